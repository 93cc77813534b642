from __future__ import annotations

import argparse
import functools
import logging
import sys

from toolchain_version.config import current_version
from toolchain_version.errors import MalformedVersionError
from toolchain_version.parser import log_malformed, parse_version
from toolchain_version.schemas import describe_version
from toolchain_version.versions import Version


def _print_version(version: Version, *, as_json: bool) -> None:
    if as_json:
        print(describe_version(version).model_dump_json())
    else:
        print(version.unparse())


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="toolchain-version")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="treat malformed versions as 'any' instead of failing",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    parse_p = sub.add_parser("parse")
    parse_p.add_argument("text")
    parse_p.add_argument("--json", action="store_true")

    compare_p = sub.add_parser("compare")
    compare_p.add_argument("a")
    compare_p.add_argument("b")

    sort_p = sub.add_parser("sort")
    sort_p.add_argument("texts", nargs="+")
    sort_p.add_argument("--reverse", action="store_true")

    max_p = sub.add_parser("max")
    max_p.add_argument("texts", nargs="+")

    min_p = sub.add_parser("min")
    min_p.add_argument("texts", nargs="+")

    current_p = sub.add_parser("current")
    current_p.add_argument("--json", action="store_true")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    on_error = log_malformed if args.lenient else None

    if args.cmd == "current":
        try:
            version = current_version()
        except MalformedVersionError as e:
            print(str(e), file=sys.stderr)
            return 2
        _print_version(version, as_json=args.json)
        return 0

    if args.cmd == "parse":
        texts = [args.text]
    elif args.cmd == "compare":
        texts = [args.a, args.b]
    else:
        texts = args.texts
    try:
        versions = [parse_version(t, on_error) for t in texts]
    except MalformedVersionError as e:
        print(str(e), file=sys.stderr)
        return 2

    if args.cmd == "parse":
        _print_version(versions[0], as_json=args.json)
        return 0

    if args.cmd == "compare":
        print(_sign(versions[0].compare(versions[1])))
        return 0

    if args.cmd == "sort":
        for version in sorted(versions, reverse=args.reverse):
            print(version.unparse())
        return 0

    if args.cmd == "max":
        print(functools.reduce(Version.max, versions).unparse())
        return 0

    if args.cmd == "min":
        print(functools.reduce(Version.min, versions).unparse())
        return 0

    raise AssertionError(f"unhandled cmd: {args.cmd}")


if __name__ == "__main__":
    raise SystemExit(main())
