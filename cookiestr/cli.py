import json
import logging
import sys
from argparse import ArgumentParser
from typing import List, Optional

from .cookies import emit, parse
from .exceptions import EncodingError


def _make_parser() -> ArgumentParser:
    arg_parser = ArgumentParser(
        description="Parse and emit Cookie header strings", prog="cookiestr"
    )
    arg_parser.add_argument(
        "-v",
        "--verbose",
        help="Log parser recovery steps to stderr",
        action="store_true",
    )
    subparsers = arg_parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    parse_cmd = subparsers.add_parser("parse", help="Split a Cookie header into pairs")
    parse_cmd.add_argument("header", help="Cookie header value, e.g. 'a=1; b=2'")
    parse_cmd.add_argument(
        "--json",
        help="Print a JSON array of [name, value] pairs",
        action="store_true",
    )

    emit_cmd = subparsers.add_parser("emit", help="Join pairs into a Cookie header")
    emit_cmd.add_argument(
        "pairs",
        help="Cookies in 'name=value' syntax",
        metavar="pair",
        nargs="+",
    )
    return arg_parser


def main(argv: Optional[List[str]] = None) -> None:
    arg_parser = _make_parser()
    args = arg_parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "parse":
        cookies = parse(args.header, debug=args.verbose or None)
        if args.json:
            print(json.dumps([[c.name, c.value] for c in cookies]))
        else:
            for cookie in cookies:
                print(f"{cookie.name}\t{cookie.value}")
        return

    pairs = []
    for pair in args.pairs:
        name, sep, value = pair.partition("=")
        if not sep:
            arg_parser.error(f"{pair!r} not in 'name=value' syntax")
        pairs.append((name, value))
    try:
        print(emit(pairs))
    except EncodingError as exc:
        arg_parser.exit(status=1, message=f"{exc}\n")


if __name__ == "__main__":  # pragma: no branch
    main(sys.argv[1:])  # pragma: no cover
