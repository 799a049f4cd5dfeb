"""Find customers that share an email address and merge them.

The oldest record in each group is kept and the others are deleted.
Quotes and jobs that pointed at a deleted customer keep their
customer name snapshot but are not re-pointed.

Run:
    python execution/cleanup_duplicates.py            (merge)
    python execution/cleanup_duplicates.py --dry-run  (report only)
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bindery_estimator.app import configure_logging
from bindery_estimator.errors import BinderyError
from bindery_estimator.services.customer_service import CustomerService
from bindery_estimator.services.container import build_services

logger = logging.getLogger(__name__)


def cleanup(service: CustomerService, dry_run: bool = False) -> int:
    """Merge every duplicate-email group. Returns records removed."""
    before = service.get_all()
    print(f"BEFORE: {len(before)} total customers\n")

    groups = service.find_duplicates()
    if not groups:
        print("No duplicate customers found. Data is clean.\n")
        return 0

    print(f"Found {len(groups)} duplicate group(s):\n")
    for group in groups:
        print(f"Email: {group.email}")
        print("-" * 50)
        for customer in group.customers:
            print(f"  ID: {customer.id}")
            print(f"  Name: {customer.name}")
            print(f"  Contact: {customer.contact_name or 'N/A'}")
            print(f"  Created: {customer.created_at}\n")

    if dry_run:
        print("Dry run — nothing merged.")
        return 0

    print("Merging duplicates (keeping oldest record)...\n")
    removed = 0
    for group in groups:
        try:
            result = service.merge_duplicates([c.id for c in group.customers])
        except BinderyError as e:
            logger.error("Error merging %s: %s", group.email, e)
            continue
        print(f"Merged {group.email}:")
        print(f"  Kept: {result.merged.id} ({result.merged.name})")
        print(f"  Deleted: {', '.join(result.deleted_ids)}")
        removed += len(result.deleted_ids)

    after = service.get_all()
    print("\n" + "=" * 50)
    print(f"AFTER: {len(after)} total customers")
    print(f"Removed {removed} duplicate record(s)")
    return removed


def main():
    configure_logging()
    services = build_services()
    print("=== Customer Duplicate Cleanup ===\n")
    cleanup(services.customers, dry_run="--dry-run" in sys.argv[1:])


if __name__ == "__main__":
    main()
