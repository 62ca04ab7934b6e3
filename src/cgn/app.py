"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cgn.compression import CodecError, compress_pgn_str, decompress_pgn_str
from cgn.core import ParseError, parse_pgn_game, pgn_to_string

_LOGGER = logging.getLogger(__name__)


def _compress(args: argparse.Namespace) -> None:
    pgn_text = args.input.read_text(encoding="utf-8")
    blob = compress_pgn_str(pgn_text)
    args.output.write_bytes(blob)
    _LOGGER.info(
        "Wrote %s (%d -> %d bytes)", args.output, len(pgn_text.encode()), len(blob)
    )


def _decompress(args: argparse.Namespace) -> None:
    pgn_text = decompress_pgn_str(args.input.read_bytes())
    args.output.write_text(pgn_text, encoding="utf-8")
    _LOGGER.info("Wrote %s", args.output)


def _format(args: argparse.Namespace) -> None:
    data = parse_pgn_game(args.input.read_text(encoding="utf-8"))
    print(pgn_to_string(data))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cgn",
        description="Convert single PGN games to and from compressed blobs.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    compress = commands.add_parser("compress", help="PGN file -> compressed blob")
    compress.add_argument("input", type=Path)
    compress.add_argument("output", type=Path)
    compress.set_defaults(handler=_compress)

    decompress = commands.add_parser(
        "decompress", help="compressed blob -> reduced export format PGN"
    )
    decompress.add_argument("input", type=Path)
    decompress.add_argument("output", type=Path)
    decompress.set_defaults(handler=_decompress)

    fmt = commands.add_parser("format", help="print a PGN game in reduced export format")
    fmt.add_argument("input", type=Path)
    fmt.set_defaults(handler=_format)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the ``cgn`` command and return its exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.handler(args)
    except (ParseError, CodecError, OSError) as exc:
        _LOGGER.error("%s: %s", args.input, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
