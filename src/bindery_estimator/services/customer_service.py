"""Customer management — CRUD plus duplicate detection and merging."""

import logging
from dataclasses import asdict, replace
from typing import Optional

from bindery_estimator.database.models import (
    CreateCustomerInput,
    Customer,
    DuplicateCheckResult,
    DuplicateGroup,
    MergeResult,
    UpdateCustomerInput,
)
from bindery_estimator.database.repository import JsonRepository
from bindery_estimator.errors import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
)
from bindery_estimator.io.validators import validate_customer_input
from bindery_estimator.utils.ids import generate_id, now_iso

logger = logging.getLogger(__name__)


def _lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if value else None


class CustomerService:
    """Owns the write path for customers.

    Email is unique (case-insensitive) and enforced on create and on
    email changes. Name collisions are only reported by
    ``check_for_duplicates`` so callers can warn without blocking.
    Deleting or merging customers does not touch quotes or jobs that
    reference them; those keep their denormalized customer name.
    """

    def __init__(self, repository: JsonRepository[Customer]):
        self.repository = repository

    def get_all(self) -> list[Customer]:
        return self.repository.find_all()

    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        return self.repository.find_by_id(customer_id)

    def check_for_duplicates(
        self,
        data: CreateCustomerInput,
        exclude_id: Optional[str] = None,
    ) -> DuplicateCheckResult:
        """Find an existing customer sharing the email, and one sharing the name."""
        result = DuplicateCheckResult()
        others = [c for c in self.repository.find_all() if c.id != exclude_id]

        email = _lower(data.email)
        if email:
            result.duplicate_email = next(
                (c for c in others if _lower(c.email) == email), None
            )

        name = _lower(data.name)
        if name:
            result.duplicate_name = next(
                (c for c in others if _lower(c.name) == name), None
            )
        return result

    def _ensure_email_free(self, data: CreateCustomerInput,
                           exclude_id: Optional[str] = None):
        check = self.check_for_duplicates(data, exclude_id)
        if check.duplicate_email:
            raise ConflictError(
                f'A customer with email "{data.email}" already exists: '
                f"{check.duplicate_email.name}"
            )

    def create(self, data: CreateCustomerInput) -> Customer:
        errors = validate_customer_input(data)
        if errors:
            raise InvalidArgumentError("; ".join(errors))
        if data.email:
            self._ensure_email_free(data)

        customer = Customer(
            id=generate_id(),
            name=data.name,
            contact_name=data.contact_name,
            email=data.email,
            phone=data.phone,
            address=data.address,
            notes=data.notes,
            created_at=now_iso(),
        )
        self.repository.create(customer)
        logger.info("Created customer %s (%s)", customer.name, customer.id)
        return customer

    def update(self, customer_id: str,
               changes: UpdateCustomerInput) -> Customer:
        """Merge the provided fields over the stored customer."""
        existing = self.repository.find_by_id(customer_id)
        if existing is None:
            raise NotFoundError(f"Customer {customer_id} not found")

        provided = {k: v for k, v in asdict(changes).items() if v is not None}
        updated = replace(existing, **provided)

        errors = validate_customer_input(
            CreateCustomerInput(name=updated.name, email=updated.email)
        )
        if errors:
            raise InvalidArgumentError("; ".join(errors))

        if changes.email and changes.email != existing.email:
            self._ensure_email_free(
                CreateCustomerInput(name=updated.name, email=updated.email),
                exclude_id=customer_id,
            )

        self.repository.update(customer_id, updated)
        logger.info("Updated customer %s", customer_id)
        return updated

    def delete(self, customer_id: str) -> bool:
        deleted = self.repository.delete(customer_id)
        if deleted:
            logger.info("Deleted customer %s", customer_id)
        return deleted

    def find_by_name(self, text: str) -> list[Customer]:
        """Case-insensitive substring match on the customer name."""
        needle = text.lower()
        return self.repository.find_by(lambda c: needle in c.name.lower())

    def find_by_email(self, email: str) -> Optional[Customer]:
        needle = email.lower()
        for customer in self.repository.find_all():
            if _lower(customer.email) == needle:
                return customer
        return None

    def find_duplicates(self) -> list[DuplicateGroup]:
        """Group customers by lower-cased email; only groups of two or more."""
        groups: dict[str, list[Customer]] = {}
        for customer in self.repository.find_all():
            key = _lower(customer.email)
            if key:
                groups.setdefault(key, []).append(customer)
        return [
            DuplicateGroup(email=email, customers=members)
            for email, members in groups.items()
            if len(members) > 1
        ]

    def merge_duplicates(self, customer_ids: list[str]) -> MergeResult:
        """Keep the oldest of the given customers and delete the rest."""
        if len(customer_ids) < 2:
            raise InvalidArgumentError("Need at least 2 customers to merge")

        customers = []
        for customer_id in dict.fromkeys(customer_ids):
            customer = self.repository.find_by_id(customer_id)
            if customer is not None:
                customers.append(customer)
        if len(customers) < 2:
            raise InvalidArgumentError(
                "Could not find enough customers to merge"
            )

        customers.sort(key=lambda c: c.created_at)
        keeper, *duplicates = customers

        deleted_ids = []
        for dup in duplicates:
            self.repository.delete(dup.id)
            deleted_ids.append(dup.id)

        logger.info(
            "Merged %d duplicate(s) into customer %s",
            len(deleted_ids), keeper.id,
        )
        return MergeResult(merged=keeper, deleted_ids=deleted_ids)
