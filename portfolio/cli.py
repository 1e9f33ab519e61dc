"""
Catalog checks for translators.

    python -m portfolio check-catalogs [--strict]

Lists, per locale, the reference keys it does not define (these fall back to
English at runtime) and keys whose ``{{placeholders}}`` differ from the
English string. Placeholder mismatches always fail; missing keys fail only
with ``--strict``.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .i18n.catalog import load_catalogs, missing_keys, placeholder_mismatches
from .i18n.locales import REFERENCE_LOCALE, list_locales

logger = logging.getLogger(__name__)

def check_catalogs(strict: bool = False, catalogs=None) -> int:
    """Print a catalog report and return the process exit code."""
    if catalogs is None:
        catalogs = load_catalogs()

    if REFERENCE_LOCALE not in catalogs:
        print(f"Reference catalog '{REFERENCE_LOCALE}' could not be loaded")
        return 1

    failed = False
    for locale in list_locales():
        if locale.code == REFERENCE_LOCALE:
            continue
        if locale.code not in catalogs:
            print(f"[{locale.code}] catalog missing, every key falls back to {REFERENCE_LOCALE}")
            failed = failed or strict
            continue

        missing = missing_keys(catalogs, locale.code)
        mismatched = placeholder_mismatches(catalogs, locale.code)
        if not missing and not mismatched:
            print(f"[{locale.code}] ok")
            continue

        for key in missing:
            print(f"[{locale.code}] missing: {key}")
        for key in mismatched:
            print(f"[{locale.code}] placeholder mismatch: {key}")

        if mismatched or (strict and missing):
            failed = True

    return 1 if failed else 0

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="portfolio")
    sub = parser.add_subparsers(dest="command", required=True)
    check = sub.add_parser("check-catalogs", help="report missing or inconsistent translations")
    check.add_argument("--strict", action="store_true", help="fail when any key falls back to English")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(message)s")

    if args.command == "check-catalogs":
        return check_catalogs(strict=args.strict)
    return 2

if __name__ == "__main__":
    sys.exit(main())
