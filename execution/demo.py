"""Demo script — walks one job from customer to run list.

Run against a throwaway directory:
    python execution/demo.py /tmp/bindery-demo
"""

import sys
import tempfile
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bindery_estimator.database.models import (
    CreateCustomerInput,
    CreateQuantityOptionInput,
    CreateQuoteInput,
    CreateRunListItemInput,
    UpdateJobInput,
)
from bindery_estimator.config import Config
from bindery_estimator.services.container import build_services
from bindery_estimator.utils.formatters import (
    format_currency,
    format_unit_price,
)


def demo(data_dir: str | Path):
    services = build_services(data_dir)
    symbol = Config.CURRENCY_SYMBOL
    print("=== Bindery Estimator Demo ===\n")

    print("1. Creating customer...")
    customer = services.customers.create(CreateCustomerInput(
        name="Acme Publishing",
        contact_name="Jane Smith",
        email="jane@acmepub.com",
        phone="555-1234",
    ))
    print(f"   Created: {customer.name} ({customer.id})\n")

    print("2. Creating quote...")
    quote = services.quotes.create(CreateQuoteInput(
        customer_id=customer.id,
        job_title="Annual Report 2026",
        description=(
            "Print 32-page saddle-stitched booklet. Includes cutting parent "
            "sheets to press size, folding signatures, collating, and "
            "saddle-stitch binding."
        ),
        finished_size="8.5 x 11",
        paper_stock="100# gloss cover / 80# gloss text",
        quantity_options=[
            CreateQuantityOptionInput(500, 0.45),
            CreateQuantityOptionInput(1000, 0.35),
            CreateQuantityOptionInput(2500, 0.28),
        ],
    ))
    print(f"   Quote: {services.quotes.format_quote_number(quote)}")
    print(f"   Status: {quote.status}")
    for opt in quote.quantity_options:
        total = services.quotes.calculate_total(opt)
        print(f"     - {opt.quantity} @ {format_unit_price(opt.unit_price, symbol)}"
              f" = {format_currency(total, symbol)}")
    print()

    print("3. Sending and accepting quote...")
    services.quotes.update_status(quote.id, "sent")
    accepted = services.quotes.update_status(quote.id, "accepted")
    print(f"   Status: {accepted.status}\n")

    print("4. Converting quote to job (customer chose 1000 qty)...")
    job = services.jobs.create_from_quote(quote.id, 1000)
    job = services.jobs.update(job.id, UpdateJobInput(
        po_number="PO-7781", expected_in_date="2026-11-02",
    ))
    print(f"   Job: {job.job_number}")
    print(f"   Total: {format_currency(services.jobs.calculate_total(job), symbol)}\n")

    print("5. Adding job to the run list...")
    item = services.run_list.create_from_job(CreateRunListItemInput(
        job_id=job.id, category="Stitcher", operations=["FOLD", "STITCH"],
    ))
    print(f"   Run list: {item.job_number} due in {item.due_in}\n")

    print("6. Progressing job...")
    services.jobs.start_job(job.id)
    completed = services.jobs.complete_job(job.id)
    services.run_list.update_status(item.id, "complete")
    print(f"   Status: {completed.status}")
    print(f"   Completed: {completed.completed_at}\n")

    print("=== Summary ===")
    print(f"Customers: {len(services.customers.get_all())}")
    print(f"Quotes: {len(services.quotes.get_all())}")
    print(f"Jobs: {len(services.jobs.get_all())}")
    print(f"Run list: {len(services.run_list.get_all())}")


if __name__ == "__main__":
    if len(sys.argv) > 1:
        demo(sys.argv[1])
    else:
        with tempfile.TemporaryDirectory() as tmp:
            demo(tmp)
