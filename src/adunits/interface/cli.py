"""CLI commands for inspecting breakpoints and rendering ad placements."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..config.runtime import get_settings
from ..models.page_context import PageContext
from ..observability import configure_logging
from ..services.page_render import render_page
from ..wiring import build_session


def _read_json(path: Path, what: str) -> Any:
    """Load a JSON file, exiting with a message on missing file or bad JSON."""
    if not path.exists():
        print(f"Error: {what} file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            print(f"Error: {what} file is not valid JSON: {e}", file=sys.stderr)
            sys.exit(1)


def _parse_sizes_arg(value: str) -> Any:
    """Sizes are JSON (``[[300,250]]``, ``{"mobile": [[320,50]]}``) or a ``300x250,728x90`` string."""
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def _open_session(settings, network_code: str | None = None):
    """Build a session, exiting with a message when the options file is unreadable."""
    try:
        return build_session(network_code=network_code, settings=settings)
    except (OSError, ValueError) as e:
        print(f"Error: cannot load options file {settings.options_path}: {e}", file=sys.stderr)
        sys.exit(1)


def load_page(path: Path | None) -> PageContext:
    if path is None:
        return PageContext()
    raw = _read_json(path, "page")
    try:
        return PageContext.model_validate(raw)
    except ValidationError as e:
        print(f"Error: invalid page facts: {e}", file=sys.stderr)
        sys.exit(1)


def main():
    parser = argparse.ArgumentParser(description="Render responsive ad units")
    parser.add_argument("--network-code", type=str, default=None, help="Override the network code")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Breakpoints command
    subparsers.add_parser("breakpoints", help="List the configured breakpoints")

    # Place command
    place_parser = subparsers.add_parser("place", help="Render the markup for a single ad unit")
    place_parser.add_argument("identifier", type=str, help="Ad unit path")
    place_parser.add_argument("sizes", type=str, help="Sizes as JSON or a 300x250,728x90 string")
    place_parser.add_argument("--lazy-load", action="store_true", help="Mark the unit for lazy loading")

    # Render command
    render_parser = subparsers.add_parser("render", help="Render a page's placements and export payload")
    render_parser.add_argument(
        "--placements",
        type=Path,
        required=True,
        help="JSON file with a list of {identifier, sizes, options} objects",
    )
    render_parser.add_argument("--page", type=Path, default=None, help="JSON file with page facts")

    args = parser.parse_args()
    settings = get_settings()
    configure_logging(settings.log_level)

    if args.command == "breakpoints":
        session = _open_session(settings)
        print(json.dumps(session.registry.to_list(), indent=2))
    elif args.command == "place":
        session = _open_session(settings, args.network_code)
        markup = session.place(args.identifier, _parse_sizes_arg(args.sizes), {"lazy_load": args.lazy_load})
        if not markup:
            print("Error: placement rejected (see log for details)", file=sys.stderr)
            sys.exit(1)
        print(markup)
    elif args.command == "render":
        placements = _read_json(args.placements, "placements")
        if not isinstance(placements, list) or not all(isinstance(p, dict) for p in placements):
            print("Error: placements file must contain a list of objects.", file=sys.stderr)
            sys.exit(1)
        page = load_page(args.page)
        session = _open_session(settings, args.network_code)
        print(json.dumps(render_page(session, placements, page), indent=2))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
