# =============================================================================
# artistwall/cli/__init__.py: CLI Package
# =============================================================================
#
# Command-line access to the wall without any UI:
#
#   show.py     Loads one listener's wall, waits until every tile and the
#               final theme have settled, and prints the result as a text
#               report or JSON.  ``--watch`` streams wall events to stderr
#               while the load runs.
#
# Run with ``python -m artistwall.cli <username>`` (see __main__.py) or the
# ``artistwall`` console script.
# =============================================================================

"""Command-line tools for artistwall."""
