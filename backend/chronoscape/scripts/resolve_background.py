"""
Resolve the background image for a date and place from the command line.

Usage:
    python -m chronoscape.scripts.resolve_background "March 1947" "Paris, France"
    python -m chronoscape.scripts.resolve_background 1850 London --asset-dir public/locations
    python -m chronoscape.scripts.resolve_background "800 BCE" Egypt --candidates
"""

import argparse
import asyncio
import sys
from typing import List, Optional

import httpx
from dotenv import load_dotenv

from chronoscape.config import get_settings
from chronoscape.core.candidates import asset_path, plan_candidates
from chronoscape.core.location import load_alias_table
from chronoscape.core.probe import HttpAssetProbe, ManifestAssetProbe
from chronoscape.core.resolver import ContextResolver


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve a historical background image")
    parser.add_argument("date", help="Free-text date, e.g. '1791' or '800 BCE'")
    parser.add_argument("location", help="Free-text place, e.g. 'Paris, France'")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--asset-dir", help="Directory holding <identifier>.jpg files")
    source.add_argument("--base-url", help="Site serving /locations/<identifier>.jpg")
    parser.add_argument("--candidates", action="store_true",
                        help="Only list candidates in probe order, do not probe")
    parser.add_argument("--parent-regions", action="store_true",
                        help="Also try the parent region of the location")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    table = load_alias_table(settings.alias_table_path)
    parents = args.parent_regions or settings.include_parent_regions

    if args.candidates:
        plan = plan_candidates(args.date, args.location, table, parents)
        print(f"era={plan.era} decade={plan.decade or '-'} location={plan.location_code or '-'}")
        for identifier in plan.candidates:
            print(asset_path(identifier, settings.asset_path_prefix, settings.asset_extension))
        return 0

    asset_dir = args.asset_dir or (settings.asset_dir if not args.base_url else None)
    async with httpx.AsyncClient(timeout=settings.probe_timeout, follow_redirects=True) as client:
        if asset_dir:
            probe = ManifestAssetProbe.from_directory(asset_dir, settings.asset_extension)
        else:
            probe = HttpAssetProbe(
                client,
                base_url=args.base_url or settings.asset_base_url,
                path_prefix=settings.asset_path_prefix,
                extension=settings.asset_extension,
            )
        resolver = ContextResolver(
            probe,
            table=table,
            include_parent_regions=parents,
            path_prefix=settings.asset_path_prefix,
            extension=settings.asset_extension,
        )
        resolution = await resolver.resolve_detailed(args.date, args.location)

    print(f"Probed: {', '.join(resolution.probed)}")
    if resolution.asset is None:
        print("No background image found")
        return 1
    print(resolution.asset)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    return asyncio.run(run(parse_args(argv)))


if __name__ == "__main__":
    sys.exit(main())
