"""Quote management — numbering, quantity tiers, status and revisions."""

import logging
from dataclasses import replace
from typing import Optional

from bindery_estimator.database.models import (
    CreateQuantityOptionInput,
    CreateQuoteInput,
    Customer,
    QuantityOption,
    Quote,
    UpdateQuoteInput,
)
from bindery_estimator.database.repository import JsonRepository
from bindery_estimator.errors import InvalidArgumentError, NotFoundError
from bindery_estimator.io.validators import (
    validate_quantity_options,
    validate_quote_input,
)
from bindery_estimator.services.status import check_status_change
from bindery_estimator.utils.constants import QUOTE_TRANSITIONS
from bindery_estimator.utils.formatters import format_quote_number
from bindery_estimator.utils.ids import (
    NumberAllocator,
    generate_id,
    generate_number,
    now_iso,
)

logger = logging.getLogger(__name__)

# Plain text fields a quote edit may overwrite
_EDITABLE_FIELDS = (
    "job_title",
    "description",
    "finished_size",
    "paper_stock",
    "customer_number",
    "notes",
)


def _build_option(data: CreateQuantityOptionInput) -> QuantityOption:
    return QuantityOption(
        id=generate_id(),
        quantity=data.quantity,
        unit_price=data.unit_price,
    )


class QuoteService:
    """Owns the write path for quotes.

    Every revision of a quote shares its ``quote_number``; the
    ``version`` tells them apart. Status is a label: by default any known
    status may be set at any time, and ``strict_status`` turns on the
    forward-only transition table.
    """

    def __init__(
        self,
        quote_repository: JsonRepository[Quote],
        customer_repository: JsonRepository[Customer],
        strict_status: bool = False,
        allocator: Optional[NumberAllocator] = None,
    ):
        self.quote_repository = quote_repository
        self.customer_repository = customer_repository
        self.strict_status = strict_status
        self.allocator = allocator or NumberAllocator()

    def get_all(self) -> list[Quote]:
        return self.quote_repository.find_all()

    def get_by_id(self, quote_id: str) -> Optional[Quote]:
        return self.quote_repository.find_by_id(quote_id)

    def _require(self, quote_id: str) -> Quote:
        quote = self.quote_repository.find_by_id(quote_id)
        if quote is None:
            raise NotFoundError(f"Quote {quote_id} not found")
        return quote

    def create(self, data: CreateQuoteInput) -> Quote:
        customer = self.customer_repository.find_by_id(data.customer_id)
        if customer is None:
            raise NotFoundError(f"Customer {data.customer_id} not found")

        errors = validate_quote_input(data)
        if errors:
            raise InvalidArgumentError("; ".join(errors))

        with self.allocator.allocating() as month:
            existing_numbers = [
                q.quote_number for q in self.quote_repository.find_all()
            ]
            stamp = now_iso()
            quote = Quote(
                id=generate_id(),
                quote_number=generate_number(existing_numbers, month),
                version=1,
                customer_id=customer.id,
                customer_name=customer.name,
                customer_number=data.customer_number,
                job_title=data.job_title,
                description=data.description,
                finished_size=data.finished_size,
                paper_stock=data.paper_stock,
                quantity_options=[
                    _build_option(opt) for opt in data.quantity_options
                ],
                status="draft",
                notes=data.notes,
                created_at=stamp,
                updated_at=stamp,
            )
            self.quote_repository.create(quote)

        logger.info("Created quote %s for %s", quote.quote_number,
                    customer.name)
        return quote

    def update(self, quote_id: str, changes: UpdateQuoteInput) -> Quote:
        """Apply an edit; supplied quantity options replace the whole set."""
        existing = self._require(quote_id)

        provided = {
            name: getattr(changes, name)
            for name in _EDITABLE_FIELDS
            if getattr(changes, name) is not None
        }
        updated = replace(existing, **provided, updated_at=now_iso())

        if changes.quantity_options is not None:
            errors = validate_quantity_options(changes.quantity_options)
            if errors:
                raise InvalidArgumentError("; ".join(errors))
            updated.quantity_options = [
                _build_option(opt) for opt in changes.quantity_options
            ]

        self.quote_repository.update(quote_id, updated)
        logger.info("Updated quote %s", updated.display_number)
        return updated

    def update_status(self, quote_id: str, status: str) -> Quote:
        existing = self._require(quote_id)
        check_status_change(
            "quote", existing.status, status,
            QUOTE_TRANSITIONS, self.strict_status,
        )
        updated = replace(existing, status=status, updated_at=now_iso())
        self.quote_repository.update(quote_id, updated)
        logger.info("Quote %s status %s -> %s", updated.display_number,
                    existing.status, status)
        return updated

    def create_revision(self, quote_id: str) -> Quote:
        """Copy a quote into a new draft with the next version number.

        The source and every earlier revision stay as they are. Every other
        field, the job link included, is copied from the source.
        """
        existing = self._require(quote_id)
        max_version = max(
            q.version for q in self.find_revisions(existing.quote_number)
        )
        stamp = now_iso()
        revision = replace(
            existing,
            id=generate_id(),
            version=max_version + 1,
            status="draft",
            quantity_options=[replace(o) for o in existing.quantity_options],
            created_at=stamp,
            updated_at=stamp,
        )
        self.quote_repository.create(revision)
        logger.info("Created revision %s", revision.display_number)
        return revision

    def delete(self, quote_id: str) -> bool:
        """Remove a quote. A job promoted from it keeps its quote_id."""
        deleted = self.quote_repository.delete(quote_id)
        if deleted:
            logger.info("Deleted quote %s", quote_id)
        return deleted

    def find_by_customer(self, customer_id: str) -> list[Quote]:
        return self.quote_repository.find_by(
            lambda q: q.customer_id == customer_id
        )

    def find_by_status(self, status: str) -> list[Quote]:
        return self.quote_repository.find_by(lambda q: q.status == status)

    def find_revisions(self, quote_number: str) -> list[Quote]:
        """All versions of a quote number, oldest version first."""
        revisions = self.quote_repository.find_by(
            lambda q: q.quote_number == quote_number
        )
        return sorted(revisions, key=lambda q: q.version)

    def find_latest_revision(self, quote_number: str) -> Optional[Quote]:
        revisions = self.find_revisions(quote_number)
        return revisions[-1] if revisions else None

    @staticmethod
    def calculate_total(option: QuantityOption) -> float:
        return option.quantity * option.unit_price

    @staticmethod
    def format_quote_number(quote: Quote) -> str:
        return format_quote_number(quote.quote_number, quote.version)
