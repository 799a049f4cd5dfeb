"""CSV import and export for customers, quotes, jobs and the run list."""

import csv
import logging
from pathlib import Path

from bindery_estimator.database.models import CreateCustomerInput
from bindery_estimator.errors import BinderyError
from bindery_estimator.io.validators import validate_customer_row
from bindery_estimator.services.customer_service import CustomerService
from bindery_estimator.services.job_service import JobService
from bindery_estimator.services.quote_service import QuoteService
from bindery_estimator.services.run_list_service import RunListService

logger = logging.getLogger(__name__)

CUSTOMER_CSV_COLUMNS = [
    "name", "contact_name", "email", "phone", "address", "notes",
]

QUOTE_CSV_COLUMNS = [
    "quote_number", "version", "customer_name", "job_title",
    "finished_size", "paper_stock", "status", "quantity", "unit_price",
    "total",
]

JOB_CSV_COLUMNS = [
    "job_number", "customer_name", "job_title", "quantity", "unit_price",
    "total", "status", "po_number", "due_date", "completed_at",
]

RUN_LIST_CSV_COLUMNS = [
    "job_number", "customer_name", "job_title", "customer_po",
    "customer_job_number", "quantity", "category", "due_in", "due_out",
    "status", "operations",
]


def _open_for_write(filepath: str | Path):
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    return open(filepath, "w", newline="", encoding="utf-8")


def export_customers_csv(service: CustomerService,
                         filepath: str | Path) -> int:
    """Export all customers to CSV. Returns the number of rows written."""
    customers = service.get_all()
    with _open_for_write(filepath) as f:
        writer = csv.DictWriter(f, fieldnames=CUSTOMER_CSV_COLUMNS)
        writer.writeheader()
        for c in customers:
            writer.writerow({
                "name": c.name,
                "contact_name": c.contact_name or "",
                "email": c.email or "",
                "phone": c.phone or "",
                "address": c.address or "",
                "notes": c.notes or "",
            })
    return len(customers)


def export_quotes_csv(service: QuoteService, filepath: str | Path) -> int:
    """Export quotes, one row per quantity tier. Returns rows written."""
    rows = 0
    with _open_for_write(filepath) as f:
        writer = csv.DictWriter(f, fieldnames=QUOTE_CSV_COLUMNS)
        writer.writeheader()
        for quote in service.get_all():
            for opt in quote.quantity_options:
                writer.writerow({
                    "quote_number": quote.quote_number,
                    "version": quote.version,
                    "customer_name": quote.customer_name,
                    "job_title": quote.job_title,
                    "finished_size": quote.finished_size,
                    "paper_stock": quote.paper_stock or "",
                    "status": quote.status,
                    "quantity": opt.quantity,
                    "unit_price": opt.unit_price,
                    "total": round(service.calculate_total(opt), 2),
                })
                rows += 1
    return rows


def export_jobs_csv(service: JobService, filepath: str | Path) -> int:
    """Export all jobs to CSV. Returns the number of rows written."""
    jobs = service.get_all()
    with _open_for_write(filepath) as f:
        writer = csv.DictWriter(f, fieldnames=JOB_CSV_COLUMNS)
        writer.writeheader()
        for job in jobs:
            writer.writerow({
                "job_number": job.job_number,
                "customer_name": job.customer_name,
                "job_title": job.job_title,
                "quantity": job.quantity,
                "unit_price": job.unit_price,
                "total": round(service.calculate_total(job), 2),
                "status": job.status,
                "po_number": job.po_number or "",
                "due_date": job.due_date or "",
                "completed_at": job.completed_at or "",
            })
    return len(jobs)


def export_run_list_csv(service: RunListService,
                        filepath: str | Path) -> int:
    """Export the run list in its default order. Returns rows written."""
    items = service.sort_by_default(service.get_all())
    with _open_for_write(filepath) as f:
        writer = csv.DictWriter(f, fieldnames=RUN_LIST_CSV_COLUMNS)
        writer.writeheader()
        for item in items:
            writer.writerow({
                "job_number": item.job_number,
                "customer_name": item.customer_name,
                "job_title": item.job_title,
                "customer_po": item.customer_po or "",
                "customer_job_number": item.customer_job_number or "",
                "quantity": item.quantity,
                "category": item.category,
                "due_in": item.due_in or "",
                "due_out": item.due_out or "",
                "status": item.status,
                "operations": " ".join(item.operations),
            })
    return len(items)


def import_customers_csv(service: CustomerService,
                         filepath: str | Path) -> dict:
    """Import customers from CSV. Returns results dict with counts and errors.

    Rows that fail validation or collide with an existing email are
    skipped and reported; the rest are created.
    """
    filepath = Path(filepath)
    results = {"imported": 0, "skipped": 0, "errors": []}

    with open(filepath, "r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row_num, row in enumerate(reader, start=2):
            errors = validate_customer_row(row, row_num)
            if errors:
                results["errors"].extend(errors)
                results["skipped"] += 1
                continue

            data = CreateCustomerInput(
                name=row["name"].strip(),
                **{
                    col: (row.get(col) or "").strip() or None
                    for col in CUSTOMER_CSV_COLUMNS[1:]
                },
            )
            try:
                service.create(data)
            except BinderyError as e:
                logger.warning("Skipped customer row %d: %s", row_num, e)
                results["errors"].append(f"Row {row_num}: {e}")
                results["skipped"] += 1
                continue
            results["imported"] += 1

    return results
