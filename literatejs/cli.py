"""
Command-line entry point: `literatejs PATH`.

Writes the transcript of PATH to stdout followed by a newline. Read and parse
errors are not caught, so they surface as a traceback and a non-zero exit.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_ENCODING
from .core import transcribe_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="literatejs",
        description=(
            "Turn a JavaScript file into a literate transcript: block comments "
            "become prose, all other source is wrapped in fenced code blocks."
        ),
    )
    parser.add_argument("path", help="JavaScript source file to transcribe")
    parser.add_argument(
        "--lang",
        default=None,
        help="info string for opening fences (default: inferred from the extension, usually 'js')",
    )
    parser.add_argument(
        "--module",
        action="store_true",
        help="parse as an ES module (implied for .mjs files)",
    )
    parser.add_argument(
        "--jsx",
        action="store_true",
        help="enable JSX syntax (implied for .jsx files)",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"encoding used to read PATH (default: {DEFAULT_ENCODING})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log parsing and merging details to stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    transcript = transcribe_file(
        args.path,
        lang=args.lang,
        source_type="module" if args.module else None,
        jsx=True if args.jsx else None,
        encoding=args.encoding,
        log=args.verbose,
    )
    sys.stdout.write(transcript + "\n")
    return 0
