"""Standalone CSV import script — import customers from command line."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bindery_estimator.app import configure_logging
from bindery_estimator.io.csv_handler import import_customers_csv
from bindery_estimator.services.container import build_services


def main():
    if len(sys.argv) < 2:
        print("Usage: python import_csv.py <customers.csv>")
        sys.exit(1)

    filepath = sys.argv[1]
    configure_logging()
    services = build_services()

    print(f"Importing from: {filepath}")
    results = import_customers_csv(services.customers, filepath)

    print(f"\nResults:")
    print(f"  Imported: {results['imported']}")
    print(f"  Skipped:  {results['skipped']}")

    if results["errors"]:
        print(f"\nErrors ({len(results['errors'])}):")
        for err in results["errors"]:
            print(f"  - {err}")


if __name__ == "__main__":
    main()
