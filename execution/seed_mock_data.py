"""Seed the data directory with realistic mock data for development and demos.

Creates:
  - 10 customers across publishing, packaging, corporate and other shops
  - 10 quotes per customer with 2-4 quantity tiers (volume-discounted)
  - quote statuses spread roughly 30% draft / 40% sent / 20% accepted /
    10% declined
  - a job for every accepted quote, and a run list entry for half of them

Run:
    python -m execution.seed_mock_data          (from project root)
    python execution/seed_mock_data.py          (direct)

WARNING: This script ADDS data — point it at a fresh data directory to
avoid duplicate customers (their emails are unique, so a second run
stops at the first customer).
"""

import os
import random
import sys

# Ensure project src is on the path
_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(_ROOT, "src"))

from bindery_estimator.database.models import (
    CreateCustomerInput,
    CreateQuantityOptionInput,
    CreateQuoteInput,
    CreateRunListItemInput,
)
from bindery_estimator.services.container import Services, build_services

CUSTOMERS = [
    ("Acme Publishing", "Jane Smith", "jane@acmepub.com", "555-0101", "publishing"),
    ("Sterling Press", "Mike Sterling", "mike@sterlingpress.com", "555-0102", "packaging"),
    ("Artisan Bindery", "Sarah Chen", "sarah@artisanbindery.com", "555-0103", "specialty"),
    ("Corporate Solutions Inc", "Bob Johnson", "bob@corpsolutions.com", "555-0104", "corporate"),
    ("Educational Press", "Linda Williams", "linda@edpress.com", "555-0105", "education"),
    ("Digital Services Ltd", "Tom Brown", "tom@digitalservices.com", "555-0106", "corporate"),
    ("Luxury Brands Co", "Emma Davis", "emma@luxurybrands.com", "555-0107", "packaging"),
    ("Government Services", "James Wilson", "james@govservices.gov", "555-0108", "corporate"),
    ("Medical Publications", "Dr. Patricia Lee", "patricia@medpub.com", "555-0109", "education"),
    ("Tech Documentation", "Alex Martinez", "alex@techdocs.io", "555-0110", "publishing"),
]

# (service, min price per 1000, max price per 1000, description)
SERVICES = [
    ("Perfect Binding", 150, 400, "Professional adhesive binding with square spine"),
    ("Case Binding", 400, 800, "Hardcover binding with cloth or paper case"),
    ("Saddle Stitch", 50, 150, "Wire staple binding through the fold"),
    ("Spiral Binding", 100, 300, "Continuous wire coil binding"),
    ("Wire-O Binding", 120, 350, "Double loop wire binding"),
    ("Foil Stamping", 200, 600, "Hot foil application for premium finish"),
    ("Die Cutting", 100, 500, "Custom shape cutting with steel rule dies"),
    ("Lamination", 80, 200, "Protective film application"),
]

JOB_TITLES = {
    "publishing": ["Annual Report", "Quarterly Magazine", "Product Catalog", "Technical Manual"],
    "packaging": ["Presentation Folder", "Product Box Set", "Gift Package", "Retail Display"],
    "specialty": ["Wedding Album", "Portfolio Collection", "Art Book Edition", "Custom Journal"],
    "corporate": ["Employee Handbook", "Training Manual", "Corporate Brochure", "Board Report"],
    "education": ["Course Textbook", "Student Workbook", "Lab Manual", "Curriculum Guide"],
}

PAPER_STOCKS = [
    "80# Gloss Text", "100# Gloss Text", "80# Matte Text", "60# Uncoated Text",
    "100# Gloss Cover", "120# Gloss Cover", "80# Matte Cover",
]

FINISHED_SIZES = ["8.5 x 11", "11 x 17", "6 x 9", "5.5 x 8.5", "9 x 12", "5 x 7"]

NOTES = [
    None,
    "Rush delivery available",
    "Proof required before production",
    "Customer to supply paper stock",
    "Reprint - match previous job",
]

CATEGORIES = ["Stitcher", "Perfect Binder", "Folder", "Cutter", "Hand Work"]
OPERATIONS = ["FOLD", "TRIM", "STITCH", "DRILL", "SCORE", "COLLATE", "SHRINK"]


def _quantity_options(rng: random.Random,
                      base_price: int) -> list[CreateQuantityOptionInput]:
    """Volume discount: more quantity, lower per-unit price."""
    quantities = [250, 500, 1000, 2500, 5000][:rng.randint(2, 4)]
    options = []
    for qty in quantities:
        if qty >= 5000:
            discount = 0.75
        elif qty >= 2500:
            discount = 0.85
        elif qty >= 1000:
            discount = 0.92
        else:
            discount = 1.0
        unit_price = round(base_price / 1000 * discount, 3)
        options.append(CreateQuantityOptionInput(qty, unit_price))
    return options


def _status(rng: random.Random) -> str:
    roll = rng.random()
    if roll < 0.30:
        return "draft"
    if roll < 0.70:
        return "sent"
    if roll < 0.90:
        return "accepted"
    return "declined"


def seed(services: Services, seed_value: int | None = None) -> dict:
    """Populate the stores with mock data. Returns counts per entity."""
    rng = random.Random(seed_value)
    counts = {"customers": 0, "quotes": 0, "jobs": 0, "run_list": 0}

    print("Creating customers and quotes...")
    for name, contact, email, phone, industry in CUSTOMERS:
        customer = services.customers.create(CreateCustomerInput(
            name=name, contact_name=contact, email=email, phone=phone,
        ))
        counts["customers"] += 1

        for _ in range(10):
            service, lo, hi, desc = rng.choice(SERVICES)
            pages = rng.choice(["24", "32", "48", "64", "96", "128"])
            quote = services.quotes.create(CreateQuoteInput(
                customer_id=customer.id,
                job_title=f"{rng.choice(JOB_TITLES[industry])} - {service}",
                description="\n".join([
                    f"{pages} page + cover",
                    desc,
                    rng.choice(["Trim 3 sides", "Drill 3 hole", "Score and fold"]),
                    rng.choice(["Box and ship", "Palletize", "Shrink wrap"]),
                ]),
                finished_size=rng.choice(FINISHED_SIZES),
                paper_stock=rng.choice(PAPER_STOCKS),
                quantity_options=_quantity_options(rng, rng.randint(lo, hi)),
                notes=rng.choice(NOTES),
            ))
            counts["quotes"] += 1

            status = _status(rng)
            if status != "draft":
                services.quotes.update_status(quote.id, "sent")
            if status in ("accepted", "declined"):
                quote = services.quotes.update_status(quote.id, status)
            if status != "accepted":
                continue

            chosen = rng.choice(quote.quantity_options)
            job = services.jobs.create_from_quote(quote.id, chosen.quantity)
            counts["jobs"] += 1
            if rng.random() < 0.5:
                services.run_list.create_from_job(CreateRunListItemInput(
                    job_id=job.id,
                    category=rng.choice(CATEGORIES),
                    operations=rng.sample(OPERATIONS, rng.randint(1, 3)),
                ))
                counts["run_list"] += 1

    print("\n✓ Mock data seeded successfully!")
    for key, value in counts.items():
        print(f"  {key.replace('_', ' ').title()}: {value}")
    return counts


def main():
    services = build_services()
    print(f"Data directory: {services.data_dir}")

    if services.customers.get_all():
        resp = input("Data already exists. Seed anyway? (y/N): ").strip().lower()
        if resp != "y":
            print("Aborted.")
            return

    seed(services)


if __name__ == "__main__":
    main()
