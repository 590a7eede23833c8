"""Command-line driver: read declarations, print generated accessors."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .api import emit, generate_all, parse_definitions
from .config import GeneratorConfig
from .emitters import SUPPORTED_EMITTERS
from .sources import SUPPORTED_INPUT_FORMATS
from .stats import count_method_kinds
from . import constants

logger = logging.getLogger(__name__)


def _input_format(path: Path, requested: str | None) -> str:
    if requested:
        return requested
    if path.suffix == ".json":
        return constants.INPUT_JSON
    return constants.INPUT_RUST


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="variation",
        description="Generate is/as/as_mut/into accessors for tagged unions",
    )
    parser.add_argument("file", help="Rust source or JSON definition file")
    parser.add_argument(
        "--input",
        "-i",
        choices=SUPPORTED_INPUT_FORMATS,
        default=None,
        help="Input format (default: from file extension)",
    )
    parser.add_argument(
        "--emit",
        "-e",
        choices=SUPPORTED_EMITTERS,
        default=constants.EMIT_RUST,
        help="Output format (default: rust); json prints one array of bundles",
    )
    parser.add_argument(
        "--all-enums",
        action="store_true",
        help=f"Process every enum, not only #[derive({constants.DERIVE_NAME})]",
    )
    parser.add_argument(
        "--no-docs", action="store_true", help="Omit doc comments on into_* methods"
    )
    parser.add_argument(
        "--stats", action="store_true", help="Print method counts instead of code"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    path = Path(args.file)
    config = GeneratorConfig(
        require_derive=not args.all_enums,
        emit_docs=not args.no_docs,
    )
    source = path.read_text(encoding="utf-8")
    definitions = parse_definitions(source, _input_format(path, args.input), config)
    results = generate_all(definitions, config)

    if args.stats:
        stats = {
            r.type_name: count_method_kinds(r.bundle)
            for r in results
            if r.bundle is not None
        }
        print(json.dumps(stats, indent=2))
    elif args.emit == constants.EMIT_JSON:
        bundles = [
            r.bundle.model_dump(mode="json") for r in results if r.bundle is not None
        ]
        print(json.dumps(bundles, indent=2))
    else:
        print(
            "\n".join(
                emit(r.bundle, args.emit, config)
                for r in results
                if r.bundle is not None
            ),
            end="",
        )

    failures = [r for r in results if not r.ok]
    for failure in failures:
        print(f"error: {failure.error}", file=sys.stderr)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
