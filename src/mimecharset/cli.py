"""Command-line interface for mimecharset."""

from __future__ import annotations

import argparse
import logging
import sys

import mimecharset
from mimecharset.registry import format_charset, is_registered, parse


def main(argv: list[str] | None = None) -> None:
    """Run the ``mimecharset`` command-line tool.

    Each name is parsed and printed next to its canonical form.  With no
    names, one name per non-blank line is read from stdin.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Normalize charset names to their IANA registry form."
    )
    parser.add_argument("names", nargs="*", help="Charset names to normalize")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the canonical name"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any name is unregistered",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"mimecharset {mimecharset.__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.names:
        names = args.names
    else:
        names = [line.strip() for line in sys.stdin if line.strip()]

    unregistered = 0
    for name in names:
        charset = parse(name)
        registered = is_registered(charset)
        if args.minimal:
            print(format_charset(charset))
        else:
            kind = "registered" if registered else "unregistered"
            print(f"{name}: {format_charset(charset)} ({kind})")
        if not registered:
            unregistered += 1
            if args.strict:
                print(f"mimecharset: {name}: not a registered charset", file=sys.stderr)

    if args.strict and unregistered:
        sys.exit(1)


if __name__ == "__main__":
    main()
