"""Standalone export script — export a collection from command line.

CSV for every collection; ``.xlsx`` output is supported for jobs and the
run list.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bindery_estimator.io.csv_handler import (
    export_customers_csv,
    export_jobs_csv,
    export_quotes_csv,
    export_run_list_csv,
)
from bindery_estimator.io.excel_handler import (
    export_jobs_excel,
    export_run_list_excel,
)
from bindery_estimator.services.container import build_services

USAGE = (
    "Usage: python export_csv.py "
    "<customers|quotes|jobs|run-list> <output.csv|output.xlsx>"
)


def main():
    if len(sys.argv) < 3:
        print(USAGE)
        sys.exit(1)

    data_type = sys.argv[1].lower()
    filepath = sys.argv[2]
    excel = filepath.lower().endswith(".xlsx")
    services = build_services()

    if data_type == "customers" and not excel:
        count = export_customers_csv(services.customers, filepath)
    elif data_type == "quotes" and not excel:
        count = export_quotes_csv(services.quotes, filepath)
    elif data_type == "jobs":
        exporter = export_jobs_excel if excel else export_jobs_csv
        count = exporter(services.jobs, filepath)
    elif data_type == "run-list":
        exporter = export_run_list_excel if excel else export_run_list_csv
        count = exporter(services.run_list, filepath)
    else:
        print(f"Cannot export {data_type} to {filepath}.")
        print(USAGE)
        sys.exit(1)

    print(f"Exported {count} {data_type} rows to {filepath}")


if __name__ == "__main__":
    main()
