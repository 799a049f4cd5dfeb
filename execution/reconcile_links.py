"""Repair quote → job links left inconsistent by an interrupted promotion.

Run:
    python execution/reconcile_links.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bindery_estimator.app import configure_logging
from bindery_estimator.services.container import build_services


def main():
    configure_logging()
    services = build_services()
    report = services.jobs.reconcile_quote_links()
    if not report.changed:
        print("All quote/job links are consistent.")
        return
    print(f"Re-linked {len(report.repaired)} quote(s), "
          f"cleared {len(report.cleared)} stale link(s).")


if __name__ == "__main__":
    main()
