"""Command line entrypoint for importing a CSV export into the diary."""

import argparse
import logging
import sys
from pathlib import Path

from health_diary.app_logging import configure_logging
from health_diary.containers import build_container
from health_diary.services.csv_import import CsvImportService

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Import the given CSV file and return a process exit code."""
    parser = argparse.ArgumentParser(description="Import daily observations from CSV.")
    parser.add_argument("path", type=Path, help="CSV file with a header row")
    args = parser.parse_args(argv)

    configure_logging()
    if not args.path.is_file():
        logger.error("CSV file not found", extra={"path": str(args.path)})
        return 1

    container = build_container()
    service = CsvImportService(container.day_service)
    with args.path.open(encoding="utf-8", newline="") as handle:
        result = service.import_rows(handle)

    print(
        f"Imported {result.imported} days, "
        f"skipped {result.skipped}, failed {result.failed}."
    )
    return 1 if result.failed else 0


if __name__ == "__main__":
    sys.exit(main())
