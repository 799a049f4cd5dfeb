"""Data models for the storage layer."""

from dataclasses import dataclass, field
from typing import Optional

from bindery_estimator.utils.constants import JOB_CLOSED_STATUSES


@dataclass
class Customer:
    id: str = ""
    name: str = ""
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    created_at: str = ""


@dataclass
class QuantityOption:
    id: str = ""
    quantity: int = 0
    unit_price: float = 0.0  # Price per finished piece

    @property
    def total(self) -> float:
        return self.quantity * self.unit_price


@dataclass
class Quote:
    id: str = ""
    quote_number: str = ""  # YYMM-NNNN, shared by every revision
    version: int = 1
    customer_id: str = ""
    customer_name: str = ""  # Snapshot at creation, never resynced
    customer_number: Optional[str] = None
    job_title: str = ""
    description: str = ""
    finished_size: str = ""
    paper_stock: Optional[str] = None
    quantity_options: list[QuantityOption] = field(default_factory=list)
    status: str = "draft"
    notes: Optional[str] = None
    created_at: str = ""
    updated_at: str = ""
    job_id: Optional[str] = None  # Set once, on promotion to a job

    @property
    def display_number(self) -> str:
        """Quote number with a ``-vN`` suffix for revisions."""
        if self.version == 1:
            return self.quote_number
        return f"{self.quote_number}-v{self.version}"

    @property
    def is_promoted(self) -> bool:
        return bool(self.job_id)

    @property
    def quantities(self) -> list[int]:
        return [opt.quantity for opt in self.quantity_options]


@dataclass
class Job:
    id: str = ""
    job_number: str = ""  # Same as the source quote's number
    quote_id: str = ""
    customer_id: str = ""
    customer_name: str = ""
    job_title: str = ""
    description: str = ""
    finished_size: str = ""
    paper_stock: Optional[str] = None
    quantity: int = 0
    unit_price: float = 0.0
    status: str = "pending"
    created_at: str = ""
    updated_at: str = ""
    completed_at: Optional[str] = None
    # Job-only fields, editable after promotion
    customer_job_number: Optional[str] = None
    po_number: Optional[str] = None
    part_number: Optional[str] = None
    expected_in_date: Optional[str] = None
    due_date: Optional[str] = None
    allowed_samples: Optional[int] = None
    allowed_overs: Optional[float] = None
    delivery_information: Optional[str] = None
    miscellaneous_notes: Optional[str] = None

    @property
    def total(self) -> float:
        return self.quantity * self.unit_price

    @property
    def is_active(self) -> bool:
        return self.status not in JOB_CLOSED_STATUSES


@dataclass
class RunListItem:
    id: str = ""
    job_id: str = ""  # Duplicate prevention only, never resynced
    # Snapshot of the job at enrollment
    job_number: str = ""
    customer_name: str = ""
    job_title: str = ""
    customer_po: Optional[str] = None
    customer_job_number: Optional[str] = None
    quantity: int = 0
    description: str = ""
    # Production tracking
    category: str = ""
    due_out: Optional[str] = None
    due_in: Optional[str] = None
    status: str = "planned"
    operations: list[str] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""

    @property
    def is_active(self) -> bool:
        return self.status != "complete"


# ── Service inputs ──────────────────────────────────────────────


@dataclass
class CreateCustomerInput:
    name: str = ""
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class UpdateCustomerInput:
    """Fields left as None keep their current value."""
    name: Optional[str] = None
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class CreateQuantityOptionInput:
    quantity: int = 0
    unit_price: float = 0.0


@dataclass
class CreateQuoteInput:
    customer_id: str = ""
    job_title: str = ""
    description: str = ""
    finished_size: str = ""
    quantity_options: list[CreateQuantityOptionInput] = field(
        default_factory=list
    )
    customer_number: Optional[str] = None
    paper_stock: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class UpdateQuoteInput:
    """Partial quote edit. customer_id is intentionally absent."""
    job_title: Optional[str] = None
    description: Optional[str] = None
    finished_size: Optional[str] = None
    paper_stock: Optional[str] = None
    customer_number: Optional[str] = None
    notes: Optional[str] = None
    quantity_options: Optional[list[CreateQuantityOptionInput]] = None


@dataclass
class UpdateJobInput:
    customer_job_number: Optional[str] = None
    po_number: Optional[str] = None
    part_number: Optional[str] = None
    expected_in_date: Optional[str] = None
    due_date: Optional[str] = None
    allowed_samples: Optional[int] = None
    allowed_overs: Optional[float] = None
    delivery_information: Optional[str] = None
    miscellaneous_notes: Optional[str] = None


@dataclass
class CreateRunListItemInput:
    job_id: str = ""
    category: Optional[str] = None
    due_out: Optional[str] = None
    due_in: Optional[str] = None
    operations: Optional[list[str]] = None


@dataclass
class UpdateRunListItemInput:
    category: Optional[str] = None
    due_out: Optional[str] = None
    due_in: Optional[str] = None
    status: Optional[str] = None
    operations: Optional[list[str]] = None
    customer_po: Optional[str] = None
    customer_job_number: Optional[str] = None
    quantity: Optional[int] = None
    description: Optional[str] = None


# ── Service results ─────────────────────────────────────────────


@dataclass
class DuplicateCheckResult:
    duplicate_email: Optional[Customer] = None
    duplicate_name: Optional[Customer] = None

    @property
    def has_duplicates(self) -> bool:
        return (
            self.duplicate_email is not None
            or self.duplicate_name is not None
        )


@dataclass
class DuplicateGroup:
    email: str = ""  # Lower-cased grouping key
    customers: list[Customer] = field(default_factory=list)


@dataclass
class MergeResult:
    merged: Customer
    deleted_ids: list[str] = field(default_factory=list)


@dataclass
class ReconcileReport:
    repaired: list[str] = field(default_factory=list)  # Quote ids re-linked
    cleared: list[str] = field(default_factory=list)   # Quote ids unlinked

    @property
    def changed(self) -> int:
        return len(self.repaired) + len(self.cleared)
