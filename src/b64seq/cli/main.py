"""Main CLI entry point for b64seq."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..exceptions import B64SeqError
from .commands import decode_text, encode_text, write_report


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the b64seq CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="b64seq: compact radix-64 codec for integer sequences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  b64seq --encode 1,2,3                 Encode a comma-separated sequence
  b64seq --decode BgkY                  Decode a symbol string
  b64seq --report --seed 7              Run the compression report
  b64seq --version                      Show version
        """,
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--encode",
        metavar="VALUES",
        type=str,
        help="Encode comma-separated integers in [1, 300]",
    )
    group.add_argument(
        "--decode",
        metavar="TEXT",
        type=str,
        help="Decode a symbol string to comma-separated integers",
    )
    group.add_argument(
        "--report",
        action="store_true",
        help="Run the compression report over the standard sample cases",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random report cases (--report only)",
    )
    parser.add_argument(
        "--output",
        metavar="FILE",
        type=str,
        default=None,
        help="Write the report to FILE instead of stdout (--report only)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"b64seq {__version__}",
    )

    args = parser.parse_args(argv)

    if not args.report and (args.seed is not None or args.output is not None):
        parser.error("--seed and --output only apply to --report")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.encode is not None:
            print(encode_text(args.encode))
            return 0

        if args.decode is not None:
            print(decode_text(args.decode))
            return 0

        if args.report:
            output = Path(args.output) if args.output else None
            ok = write_report(args.seed, output)
            return 0 if ok else 1
    except (B64SeqError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error writing report: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
