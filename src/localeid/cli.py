"""
Command-line interface for locale identifier conversion.

    localeid parse IDENTIFIER [--format auto|gettext|unicode] [--output yaml|json]
    localeid convert IDENTIFIER --to gettext|unicode [--format ...]
    localeid selftest

Exit status is 0 on success and 1 when an identifier is rejected,
cannot be converted, or a self-test case fails.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

import yaml

from localeid.backends import generate_gettext_locale, generate_unicode_locale
from localeid.errors import LocaleIdError
from localeid.gettext_parser import parse_gettext_locale
from localeid.model import LocaleRecord
from localeid.report import analyze_identifier, describe_record
from localeid.selftest import run_self_test
from localeid.unicode_parser import parse_unicode_locale


logger = logging.getLogger(__name__)

FORMATS = ("auto", "gettext", "unicode")


def _parse(identifier: str, fmt: str) -> LocaleRecord:
    if fmt == "gettext":
        return parse_gettext_locale(identifier)
    if fmt == "unicode":
        return parse_unicode_locale(identifier)
    try:
        return parse_gettext_locale(identifier)
    except LocaleIdError:
        logger.debug("%r is not Gettext, trying Unicode", identifier)
        return parse_unicode_locale(identifier)


def _dump(data, output: str) -> str:
    if output == "json":
        return json.dumps(data, indent=2, sort_keys=True)
    return yaml.safe_dump(data, sort_keys=False)


def _cmd_parse(args) -> int:
    if args.format == "auto":
        report = analyze_identifier(args.identifier)
        if not (report.is_gettext or report.is_unicode):
            print(f"error: {args.identifier!r} is neither a Gettext nor a Unicode locale identifier", file=sys.stderr)
            return 1
        print(_dump(report.to_dict(), args.output), end="" if args.output == "yaml" else "\n")
        return 0

    try:
        record = _parse(args.identifier, args.format)
    except LocaleIdError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(_dump(describe_record(record).to_dict(), args.output), end="" if args.output == "yaml" else "\n")
    return 0


def _cmd_convert(args) -> int:
    generate = generate_gettext_locale if args.to == "gettext" else generate_unicode_locale
    try:
        record = _parse(args.identifier, args.format)
        print(generate(record))
    except LocaleIdError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


def _cmd_selftest(args) -> int:
    for result in run_self_test(stop_on_failure=True):
        identifier = result.case.identifier
        print(identifier if identifier is not None else "<NULL>")
        report = result.report
        if result.ok:
            print("\tGettext identifier ok" if report.is_gettext else "\tNot a Gettext identifier (as expected)")
            print("\tUnicode identifier ok" if report.is_unicode else "\tNot a Unicode identifier (as expected)")
            if args.verbose:
                for name, sub in (("Gettext", report.gettext), ("Unicode", report.unicode)):
                    if sub is not None:
                        print(f"\t\t{name} parse -> Gettext ID: {sub.gettext_id}, Unicode ID: {sub.unicode_id}")
            continue
        for error in result.errors:
            print(f"\tERROR: {error}")
        return 1
    print("\n\nAll ok.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="localeid",
        description="Parse and convert Gettext and Unicode locale identifiers",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Show the fields and both forms of an identifier")
    p_parse.add_argument("identifier")
    p_parse.add_argument("--format", choices=FORMATS, default="auto", help="Notation of the input")
    p_parse.add_argument("--output", choices=("yaml", "json"), default="yaml", help="Dump format")
    p_parse.set_defaults(func=_cmd_parse)

    p_convert = sub.add_parser("convert", help="Convert an identifier to the other notation")
    p_convert.add_argument("identifier")
    p_convert.add_argument("--format", choices=FORMATS, default="auto", help="Notation of the input")
    p_convert.add_argument("--to", choices=("gettext", "unicode"), required=True, help="Target notation")
    p_convert.set_defaults(func=_cmd_convert)

    p_selftest = sub.add_parser("selftest", help="Run the built-in grammar checks")
    p_selftest.set_defaults(func=_cmd_selftest)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
