"""
Catalog completeness report.

Loads every supported locale through the configured catalog source and prints,
per locale, the keys missing compared to the reference locale.  Keys a dialect
inherits from its base language are listed separately.  Exits non-zero when a
locale is incomplete and --strict is given.
"""

import argparse
import asyncio
import logging
import sys

from yogaswiss.i18n.cache import CatalogCache
from yogaswiss.i18n.registry import DEFAULT_LOCALE, SUPPORTED_LOCALES, parse_locale
from yogaswiss.services.catalog_audit import audit
from yogaswiss.services.catalog_source import HttpCatalogSource, PackagedCatalogSource


def parse_args():
    p = argparse.ArgumentParser(description="Report missing translation keys per locale")
    p.add_argument("--base-url", default="", help="Fetch catalogs over HTTP from this URL")
    p.add_argument(
        "--reference",
        default=DEFAULT_LOCALE.value,
        help=f"Locale to compare against (default: {DEFAULT_LOCALE.value})",
    )
    p.add_argument("--strict", action="store_true", help="Exit 1 if any locale is incomplete")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    reference = parse_locale(args.reference)
    if reference is None:
        print(f"Unknown locale: {args.reference}", file=sys.stderr)
        return 2

    source = HttpCatalogSource(args.base_url) if args.base_url else PackagedCatalogSource()
    cache = CatalogCache(source)
    catalogs = {}
    for locale in SUPPORTED_LOCALES:
        catalogs[locale] = await cache.load(locale)

    incomplete = 0
    for locale, report in audit(catalogs, reference=reference).items():
        embedded = " (embedded fallback!)" if catalogs[locale].embedded else ""
        print(f"{locale}: {report.total} keys{embedded}")
        for key in report.missing:
            print(f"  missing   {key}")
        for key in report.covered_by_fallback:
            print(f"  inherited {key}")
        for key in report.extra:
            print(f"  extra     {key}")
        if not report.complete or catalogs[locale].embedded:
            incomplete += 1

    print(f"\n{incomplete} of {len(catalogs)} locales incomplete")
    return 1 if args.strict and incomplete else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
