from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Any, Sequence

from .boundaries import ScopeContext
from .composer import SKIP
from .settings import load_configuration_override


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scopedtestid",
        description="Compose a scoped test id from root to leaf segments.",
    )
    parser.add_argument("segments", nargs="+", help="Root segment followed by nested segments.")
    parser.add_argument("--separator", help="Separator placed between segments.")
    parser.add_argument("--attribute-name", help="Attribute that receives the identifier.")
    parser.add_argument("--space-replacement", help="Replacement for each whitespace character.")
    parser.add_argument("--case", choices=("lower", "upper", "none"), help="Case folding applied to segments.")
    parser.add_argument("--disabled", action="store_true", help="Disable identifier output.")
    parser.add_argument("--config", type=Path, help="JSON settings file merged before the flags.")
    parser.add_argument("--verbose", action="store_true", help="Log resolution details to stderr.")
    return parser


def _build_logger(verbose: bool) -> logging.Logger:
    logger = logging.getLogger("scopedtestid")
    if not verbose or logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger


def _cli_override(args: argparse.Namespace) -> dict[str, Any]:
    override: dict[str, Any] = {}
    if args.separator is not None:
        override["separator"] = args.separator
    if args.attribute_name is not None:
        override["attribute_name"] = args.attribute_name
    if args.space_replacement is not None:
        override["space_replacement"] = args.space_replacement
    if args.case is not None:
        override["case_transform"] = args.case
    if args.disabled:
        override["enabled"] = False
    return override


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logger = _build_logger(args.verbose)

    context = ScopeContext()
    if args.config is not None:
        file_override = load_configuration_override(args.config)
        if file_override is None:
            logger.warning("Settings file %s could not be used; continuing with defaults.", args.config)
        else:
            context = context.configure(file_override)
    context = context.configure(_cli_override(args))

    root, *nested = args.segments
    context = context.root(root)
    for segment in nested:
        context = context.nest(segment)

    identifier = context.identifier
    if identifier is SKIP:
        logger.info("Identifier output is disabled.")
        return 0

    logger.debug("Composed %s from %d segment(s).", identifier, len(args.segments))
    sys.stdout.write(f'{context.configuration.attribute_name}="{identifier}"\n')
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
