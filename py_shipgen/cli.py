#!/usr/bin/env python3
"""
Generate a ship blueprint from the command line.

Usage:
    py-shipgen [--seed SEED] [--set NAME=VALUE ...] [--translate] [--rotate]
               [--summary] [--indent N]

The blueprint (or its summary) is printed as JSON on stdout; logs go to
stderr.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional, Tuple

import structlog

from .config import settings as runtime_settings
from .core.settings import ShipSettings
from .core.ship_generator import ShipGenerator
from .core.transform import rotate_forward, translate_centre
from .errors import ConfigurationError, ShipGenerationError
from .logging_config import configure_logging

logger = structlog.get_logger()

KEY_POOL_OPTIONS = ("thrusterAvailableKeys", "thruster_available_keys")


def parse_override(text: str) -> Tuple[str, Any]:
    """Split ``NAME=VALUE``; VALUE is read as JSON when it parses, else kept as text."""
    if "=" not in text:
        raise ConfigurationError(f"Expected NAME=VALUE, got {text!r}")
    name, raw = text.split("=", 1)
    name = name.strip()
    if name in KEY_POOL_OPTIONS:
        if raw.startswith("["):
            return name, json.loads(raw)
        return name, raw.split(",") if "," in raw else list(raw)
    try:
        return name, json.loads(raw)
    except json.JSONDecodeError:
        return name, raw


def build_settings(overrides: List[str]) -> ShipSettings:
    changes: Dict[str, Any] = dict(parse_override(item) for item in overrides)
    return ShipSettings.from_dict(changes)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a procedural ship blueprint")
    parser.add_argument("--seed", default=runtime_settings.default_seed,
                        help="Random seed (default from SHIPGEN_DEFAULT_SEED)")
    parser.add_argument("--set", dest="overrides", action="append", default=[],
                        metavar="NAME=VALUE",
                        help="Override a generation setting, e.g. --set minCircles=2")
    parser.add_argument("--translate", action="store_true",
                        help="Move the ship centre to the origin")
    parser.add_argument("--rotate", action="store_true",
                        help="Rotate forward onto the up axis (implies --translate)")
    parser.add_argument("--summary", action="store_true",
                        help="Print stage counts instead of the full blueprint")
    parser.add_argument("--indent", type=int, default=runtime_settings.json_indent,
                        help="JSON indent")
    parser.add_argument("--log-level", default=runtime_settings.log_level,
                        help="Log level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, runtime_settings.log_format)

    try:
        ship_settings = build_settings(args.overrides)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        blueprint = ShipGenerator.from_seed(args.seed, ship_settings).generate()
    except ShipGenerationError as exc:
        logger.error("Generation failed", seed=args.seed, error=str(exc))
        print(f"Generation failed: {exc}", file=sys.stderr)
        return 1

    if args.translate or args.rotate:
        blueprint = translate_centre(blueprint)
    if args.rotate:
        blueprint = rotate_forward(blueprint)

    output = blueprint.summary() if args.summary else blueprint.to_dict()
    print(json.dumps(output, indent=args.indent or None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
