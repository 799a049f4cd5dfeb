"""Excel (XLSX) export for the run list and jobs."""

from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font

from bindery_estimator.services.job_service import JobService
from bindery_estimator.services.run_list_service import RunListService
from bindery_estimator.utils.formatters import format_date


def _autofit(ws):
    # Approximate: widest cell text + padding, capped
    for col in ws.columns:
        max_len = max(len(str(cell.value or "")) for cell in col)
        ws.column_dimensions[col[0].column_letter].width = min(max_len + 2, 40)


def export_run_list_excel(service: RunListService, filepath: str | Path,
                          active_only: bool = False) -> int:
    """Export the run list, default-sorted, to a workbook. Returns row count."""
    items = service.find_active() if active_only else service.get_all()
    items = service.sort_by_default(items)
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    ws = wb.active
    ws.title = "Run List"

    ws.append([
        "Category", "Job #", "Customer", "Job Title", "Customer PO",
        "Cust Job #", "Quantity", "Due In", "Due Out", "Status",
        "Operations",
    ])
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for item in items:
        ws.append([
            item.category,
            item.job_number,
            item.customer_name,
            item.job_title,
            item.customer_po or "",
            item.customer_job_number or "",
            item.quantity,
            format_date(item.due_in),
            format_date(item.due_out),
            item.status,
            ", ".join(item.operations),
        ])

    _autofit(ws)
    wb.save(filepath)
    return len(items)


def export_jobs_excel(service: JobService, filepath: str | Path) -> int:
    """Export all jobs to an Excel workbook. Returns row count."""
    jobs = service.get_all()
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    ws = wb.active
    ws.title = "Jobs"

    ws.append([
        "Job #", "Customer", "Job Title", "Quantity", "Unit Price",
        "Total", "Status", "PO #", "Due Date",
    ])
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for job in jobs:
        ws.append([
            job.job_number,
            job.customer_name,
            job.job_title,
            job.quantity,
            job.unit_price,
            round(service.calculate_total(job), 2),
            job.status,
            job.po_number or "",
            format_date(job.due_date),
        ])

    _autofit(ws)
    wb.save(filepath)
    return len(jobs)
