#!/usr/bin/env python3
"""
Demo: Parse → Inspect → Convert

Shows the full workflow for a handful of identifiers:
1. Try both grammars on the raw string
2. Show the parsed fields
3. Show the Gettext and Unicode forms, and what each one loses
"""

from localeid.report import analyze_identifier
from localeid.serialization import record_to_yaml


IDENTIFIERS = [
    "it_IT.utf8@euro",
    "sr_RS@latin",
    "it-Latn-IT",
    "de-DE-1996",
    "root-IT",
    "es-419",
    "foo@bar@baz",
]


def main():
    print("=" * 80)
    print("LOCALE IDENTIFIER CONVERSION DEMO")
    print("=" * 80)

    for identifier in IDENTIFIERS:
        report = analyze_identifier(identifier)
        print(f"\n{identifier}")
        print("-" * 80)

        if not (report.is_gettext or report.is_unicode):
            print("   ✗ Rejected by both grammars")
            continue

        for name, sub in (("Gettext", report.gettext), ("Unicode", report.unicode)):
            if sub is None:
                print(f"   ✗ Not a {name} identifier")
                continue
            print(f"   ✓ Parsed as {name}:")
            for line in record_to_yaml(sub.record).splitlines():
                print(f"       {line}")
            print(f"     Gettext ID: {sub.gettext_id}")
            print(f"     Unicode ID: {sub.unicode_id}")
            for warning in sub.warnings:
                print(f"       - {warning}")

    print("\n" + "=" * 80)
    print("Run the grammar checks with:")
    print("  localeid selftest")
    print("=" * 80)


if __name__ == "__main__":
    main()
