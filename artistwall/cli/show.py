# =============================================================================
# artistwall/cli/show.py: CLI Show Command (Load + Report a Wall)
# =============================================================================
#
# Loads a listener's wall from the command line, with no UI at all:
#
#   1. Fetch the top artists from Last.fm
#   2. Reveal a tile per artist from the first image source that has one
#   3. Compute the final theme colour and headline
#   4. Prefetch the remaining sources so every tile knows its alternatives
#
# Typical usage:
#   python -m artistwall.cli.show some_user                  # Text report
#   python -m artistwall.cli.show some_user --source DISCOGS # Prefer Discogs
#   python -m artistwall.cli.show some_user --json           # JSON report
#   python -m artistwall.cli.show some_user --watch          # Stream events
#
# Logs always go to stderr.  --quiet (implied by --json) raises the level to
# WARNING.  Auto-rotation is never started from the CLI.
# =============================================================================

"""Standalone CLI that loads one listener's artist wall.

Usage::

    python -m artistwall.cli.show some_user
    python -m artistwall.cli.show some_user --source THE_AUDIO_DB
    python -m artistwall.cli.show some_user --json --output wall.json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
import time
from pathlib import Path

from artistwall.models.image import ImageSource

_STATUS_MARKS = {
    "REVEALED": "+",
    "NO_IMAGE": "-",
    "LOADING": "?",
}


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def _format_text_output(orchestrator) -> str:  # noqa: ANN001
    """Format the settled wall as a human-readable text report."""
    session = orchestrator.session
    lines: list[str] = []
    sep = "=" * 60

    lines.append(sep)
    lines.append(f"  artistwall: {session.username}")
    lines.append(sep)
    lines.append("")

    theme = orchestrator.theme
    if theme:
        lines.append(f"Headline:   {theme.headline or '-'}")
        lines.append(f"Background: {theme.background.css()}")
        lines.append(f"Text:       {theme.palette.primary.css()}  (glow {theme.palette.glow})")
        lines.append("")

    lines.append("TILES")
    lines.append("-" * 40)
    for tile in orchestrator.tiles():
        mark = _STATUS_MARKS.get(tile.status.value, " ")
        source = tile.visible_source.value if tile.visible_source else ""
        lines.append(f"  [{mark}] {tile.artist_name:<30} {source}")
        if tile.image_url:
            overlay = "  (light overlay)" if tile.light_overlay else ""
            lines.append(f"      {tile.image_url}{overlay}")
    lines.append("")

    if session.available_sources:
        lines.append(f"Sources loaded: {', '.join(s.value for s in session.available_sources)}")
        lines.append(sep)

    return "\n".join(lines)


def _format_json_output(orchestrator) -> str:  # noqa: ANN001
    """Serialize the settled wall to JSON."""
    session = orchestrator.session
    output: dict = {
        "username": session.username,
        "seed": session.seed,
        "source_order": [s.value for s in session.source_order],
        "available_sources": [s.value for s in session.available_sources],
        "tiles": [tile.model_dump(mode="json") for tile in orchestrator.tiles()],
    }
    if orchestrator.theme:
        output["theme"] = orchestrator.theme.model_dump(mode="json")
    return json.dumps(output, indent=2, default=str)


def _format_event(event) -> str:  # noqa: ANN001
    parts = [event.type.value]
    if event.tile:
        parts.append(f"{event.tile.artist_name}={event.tile.status.value}")
        if event.tile.visible_source:
            parts.append(event.tile.visible_source.value)
    if event.theme:
        parts.append(event.theme.background.css())
        if event.theme.final:
            parts.append(f"final headline={event.theme.headline!r}")
    if event.source:
        parts.append(event.source.value)
    if event.message:
        parts.append(event.message)
    return " ".join(parts)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


def _suppress_logs() -> None:
    """Hold all log output at WARNING+ on stderr.

    Must run before importing artistwall.main, which configures logging
    from LOG_LEVEL at import time.
    """
    from artistwall.utils.logging import configure_logging

    os.environ["LOG_LEVEL"] = "WARNING"
    configure_logging("WARNING")


async def _run(
    username: str | None,
    source: ImageSource | None,
    json_output: bool,
    output_file: str | None,
    watch: bool,
) -> int:
    """Load the wall and print the report.

    Returns 0 on success, 1 when no username was given or the artist list
    could not be loaded.
    """
    # Deferred import: artistwall.main reads settings and configures
    # logging on import.
    from artistwall.main import run_wall, settings

    username = username or settings.default_username
    if not username:
        print("Error: No username given and DEFAULT_USERNAME is not set.", file=sys.stderr)
        return 1

    errors: list[str] = []

    def _listener(event) -> None:  # noqa: ANN001
        if event.type.value == "error" and event.message:
            errors.append(event.message)
        if watch:
            print(_format_event(event), file=sys.stderr)

    print(f"Loading wall for: {username}", file=sys.stderr)
    start = time.monotonic()

    orchestrator = await run_wall(username, source=source, listener=_listener)

    elapsed = time.monotonic() - start
    print(f"Done in {elapsed:.1f}s", file=sys.stderr)

    if errors:
        print(f"Error: {errors[-1]}", file=sys.stderr)
        return 1

    text = _format_json_output(orchestrator) if json_output else _format_text_output(orchestrator)

    if output_file:
        Path(output_file).write_text(text, encoding="utf-8")
        print(f"Wall written to: {output_file}", file=sys.stderr)
    else:
        print(text)

    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the show CLI.

    Arguments:
      username (positional, optional): Last.fm user; DEFAULT_USERNAME otherwise
      --source / -s: Image source to show first
      --json: Output the wall as JSON instead of formatted text
      --output / -o: Write the report to a file instead of stdout
      --watch / -w: Stream wall events to stderr while loading
      --quiet / -q: Suppress all log output (auto-enabled with --json)
    """
    parser = argparse.ArgumentParser(
        prog="python -m artistwall.cli.show",
        description="Load a Last.fm listener's artist wall and print the tiles and theme.",
    )
    parser.add_argument(
        "username",
        nargs="?",
        default=None,
        help="Last.fm username (defaults to DEFAULT_USERNAME).",
    )
    parser.add_argument(
        "--source", "-s",
        type=ImageSource,
        choices=list(ImageSource),
        default=None,
        help="Image source to prefer, e.g. DISCOGS.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output the wall as JSON instead of formatted text.",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Write the report to a file instead of stdout.",
    )
    parser.add_argument(
        "--watch", "-w",
        action="store_true",
        help="Print wall events to stderr as they happen.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress log output (useful with --json for clean stdout).",
    )
    return parser


def main() -> None:
    """CLI entry point for the show tool."""
    parser = _build_parser()
    args = parser.parse_args()

    quiet = args.quiet or args.json_output
    if quiet:
        _suppress_logs()

    # The CLI never rotates; it reports the settled wall.
    os.environ["PREFERS_REDUCED_MOTION"] = "true"

    exit_code = asyncio.run(_run(args.username, args.source, args.json_output, args.output, args.watch))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
