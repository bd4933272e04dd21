"""Main CLI entry point for basehan."""

from __future__ import annotations

import argparse
import io
import logging
import sys
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from .. import __version__
from ..codec import decode, encode
from ..config import DEFAULT_CHUNK_SIZE, StreamConfig
from ..exceptions import BaseHanError
from ..streams import decode_stream, encode_stream, strip_whitespace

logger = logging.getLogger("basehan")

ENCODE_PROMPT = "encode> "
DECODE_PROMPT = "decode> "


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the basehan CLI."""
    parser = argparse.ArgumentParser(
        prog="basehan",
        description="basehan: Base-Han binary-to-text encoding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  basehan < photo.jpg > photo.txt        Encode stdin to stdout
  basehan -d photo.txt > photo.jpg       Decode a file
  basehan -i                             Encode lines typed at a prompt
        """,
    )

    parser.add_argument(
        "file",
        nargs="?",
        metavar="FILE",
        help="Input file (default: stdin)",
    )
    parser.add_argument("-d", "--decode", action="store_true", help="Decode instead of encode")
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Read one line at a time from a prompt and print the result",
    )
    parser.add_argument(
        "-c",
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Read size per call (default: {DEFAULT_CHUNK_SIZE})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Do not ignore whitespace when decoding",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"basehan {__version__}")
    return parser


def interactive_shell(decode_mode: bool, stdin: TextIO, stdout: TextIO) -> None:
    """Encode or decode one line at a time until ``exit`` or end of input.

    Errors are reported and the prompt continues.
    """
    print("Interactive mode.", file=stdout)
    prompt = DECODE_PROMPT if decode_mode else ENCODE_PROMPT
    while True:
        print(prompt, end="", file=sys.stderr, flush=True)
        line = stdin.readline()
        if not line:
            break
        line = line.strip()
        if line == "exit":
            break

        if decode_mode:
            try:
                data = decode(strip_whitespace(line))
            except BaseHanError as e:
                print(f"Error: {e}", file=stdout)
                continue
            stdout.flush()
            stdout.buffer.write(data + b"\n")
            stdout.buffer.flush()
        else:
            print(encode(line.encode("utf-8")), file=stdout)
    print("Exit", file=stdout)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the basehan CLI.

    Returns:
        Exit code (0 for success, 1 for decode/IO errors, 2 for invalid options)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            stream=sys.stderr,
        )

    try:
        config = StreamConfig(chunk_size=args.chunk_size, ignore_whitespace=not args.strict)
    except ValidationError as e:
        print(f"Error: invalid options: {e}", file=sys.stderr)
        return 2

    if args.interactive:
        interactive_shell(args.decode, sys.stdin, sys.stdout)
        return 0

    if args.file is not None:
        file_path = Path(args.file)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

    stdout_text = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", write_through=True)
    stdin_text = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8")
    try:
        if args.decode:
            if args.file is not None:
                with open(args.file, encoding="utf-8") as src:
                    written = decode_stream(src, sys.stdout.buffer, config)
            else:
                written = decode_stream(stdin_text, sys.stdout.buffer, config)
        else:
            if args.file is not None:
                with open(args.file, "rb") as src:
                    written = encode_stream(src, stdout_text, config)
            else:
                written = encode_stream(sys.stdin.buffer, stdout_text, config)
        sys.stdout.buffer.flush()
    except BaseHanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: input is not valid UTF-8 text: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        stdout_text.detach()
        stdin_text.detach()

    logger.debug("Wrote %d units", written)
    return 0


if __name__ == "__main__":
    sys.exit(main())
