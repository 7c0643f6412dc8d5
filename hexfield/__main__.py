"""Command line entry point for launching the Textual UI."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import CONFIG_PATH, GridSettings, load_settings, save_settings
from .logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hexfield", description="Interactive hexagonal grid visualizer")
    ap.add_argument("--orientation", choices=("pointy", "flat"), help="Hex orientation")
    ap.add_argument("--strategy", choices=("radius", "rectangle"), help="Grid membership strategy")
    ap.add_argument("--size", type=float, dest="hex_size", help="Cell size in pixels")
    ap.add_argument("--radius", type=int, help="Fixed disk radius (radius strategy only)")
    ap.add_argument(
        "--policy",
        choices=("forgiving", "strict"),
        dest="coordinate_policy",
        help="How malformed cube coordinates are handled",
    )
    ap.add_argument("--config", type=Path, default=None, help=f"Settings file (default: {CONFIG_PATH})")
    ap.add_argument("--save-config", action="store_true", help="Write the resulting settings and exit")
    ap.add_argument("--show-config", action="store_true", help="Print the resulting settings and exit")
    ap.add_argument("--log-level", default="INFO", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    ap.add_argument("--log-file", default=None, help="Write logs to this file")
    return ap


def settings_from_args(args: argparse.Namespace, base: GridSettings) -> GridSettings:
    """Overlay command line options on ``base``."""

    updates: dict[str, Any] = {}
    for name in ("orientation", "strategy", "hex_size", "radius", "coordinate_policy"):
        value = getattr(args, name, None)
        if value is not None:
            updates[name] = value
    return GridSettings.model_validate({**base.model_dump(), **updates})


def main(argv: list[str] | None = None) -> int:
    """Launch the hexfield Textual app."""

    ap = build_parser()
    args = ap.parse_args(argv)

    level = getattr(logging, args.log_level)
    interactive = not (args.show_config or args.save_config)
    # The terminal UI owns stdout, so logs only go to a file while it runs.
    setup_logging(level, log_file=args.log_file, console=not interactive)

    try:
        settings = settings_from_args(args, load_settings(args.config))
    except ValidationError as error:
        ap.error(str(error))

    if args.show_config:
        print(settings.model_dump_json(indent=2))
    if args.save_config:
        path = save_settings(settings, args.config)
        print(f"saved: {path}")
    if not interactive:
        return 0

    from .ui.app import HexfieldApp

    HexfieldApp(settings, settings_path=args.config).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - module entry point
    raise SystemExit(main())
