# =============================================================================
# artistwall/cli/__main__.py: Package Entry Point
# =============================================================================
#
# Enables ``python -m artistwall.cli``, which runs the show command:
#     python -m artistwall.cli some_user --source DISCOGS --json
# =============================================================================

"""Allow ``python -m artistwall.cli`` execution."""

from artistwall.cli.show import main

main()
