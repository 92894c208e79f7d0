#!/usr/bin/env python3
"""Fetch the employee directory once and print a table page or the map points.

Run from the backend/ directory:

    python3 scripts/export_directory.py [--search TERM] [--sort COLUMN] [--desc]
                                        [--page N] [--page-size N] [--map] [--verbose]

Output is JSON on stdout; logging goes to stderr.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from staff_directory.core.config import Settings  # noqa: E402
from staff_directory.models.employee import RECORD_ID_FIELD, EmployeeRecord  # noqa: E402
from staff_directory.models.table import SortDirection, TableViewState  # noqa: E402
from staff_directory.services.directory_client import DirectoryClient, DirectoryClientError  # noqa: E402
from staff_directory.services.geolocation import filter_locations  # noqa: E402
from staff_directory.services.table_pipeline import DEFAULT_COLUMNS, build_table_page  # noqa: E402

logger = logging.getLogger(__name__)


def build_table_export(records: list[EmployeeRecord], args: argparse.Namespace) -> dict[str, Any]:
    state = TableViewState(
        search_term=args.search,
        sort_column=args.sort,
        sort_direction=SortDirection.DESC if args.desc else SortDirection.ASC,
        page_index=args.page,
        page_size=args.page_size,
    )
    page = build_table_page(
        [record.to_row() for record in records],
        DEFAULT_COLUMNS,
        state,
        key_field=RECORD_ID_FIELD,
    )
    return {
        "headers": [c.header for c in page.columns],
        "rows": [row.cells for row in page.rows],
        "total_count": page.total_count,
        "page_index": page.page_index,
        "page_size": page.page_size,
        "message": page.empty_message,
    }


def build_map_export(records: list[EmployeeRecord]) -> dict[str, Any]:
    points = filter_locations(records)
    return {
        "points": [p.model_dump() for p in points],
        "skipped": len(records) - len(points),
    }


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export the employee directory as a table page or map points",
    )
    parser.add_argument("--search", default="", help="Case-insensitive search term")
    parser.add_argument(
        "--sort",
        default=None,
        choices=[c.accessor for c in DEFAULT_COLUMNS],
        help="Column to sort by",
    )
    parser.add_argument("--desc", action="store_true", help="Sort descending")
    parser.add_argument("--page", type=int, default=0, help="Zero-based page index (default: 0)")
    parser.add_argument("--page-size", type=int, default=10, help="Rows per page (default: 10)")
    parser.add_argument("--map", action="store_true", help="Print map points instead of a table page")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    args = parser.parse_args(argv)
    if args.page < 0:
        parser.error("--page must be >= 0")
    if args.page_size < 1:
        parser.error("--page-size must be >= 1")
    return args


async def export(args: argparse.Namespace) -> int:
    settings = Settings()
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s", stream=sys.stderr)

    client = DirectoryClient()
    await client.initialize(settings)
    try:
        logger.info("Fetching employees from %s...", client.base_url)
        records = await client.list_employees()
    except DirectoryClientError:
        logger.exception("Failed to fetch employees")
        return 1
    finally:
        await client.close()

    logger.info("Found %d employees", len(records))
    result = build_map_export(records) if args.map else build_table_export(records, args)
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


def main() -> None:
    args = parse_args()
    sys.exit(asyncio.run(export(args)))


if __name__ == "__main__":
    main()
