"""Production run list — job snapshots tracked independently of the job."""

import logging
from dataclasses import asdict, replace
from typing import Optional

from bindery_estimator.database.models import (
    CreateRunListItemInput,
    Job,
    RunListItem,
    UpdateRunListItemInput,
)
from bindery_estimator.database.repository import JsonRepository
from bindery_estimator.errors import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
)
from bindery_estimator.services.status import check_status_change
from bindery_estimator.utils.constants import RUN_LIST_TRANSITIONS
from bindery_estimator.utils.ids import generate_id, now_iso

logger = logging.getLogger(__name__)


def normalize_operation(code: str) -> str:
    """Operation tags are stored trimmed and upper-cased (``FOLD``, ``TRIM``)."""
    return code.strip().upper()


def _normalize_operations(codes: list[str]) -> list[str]:
    # Stored in add_operation form, blanks and repeats dropped
    tags = (normalize_operation(code) for code in codes)
    return list(dict.fromkeys(tag for tag in tags if tag))


def _due_out_key(item: RunListItem) -> tuple:
    # Items without a due-out date sort after every dated item
    if not item.due_out:
        return (1, "")
    return (0, item.due_out)


class RunListService:
    """Owns the write path for run list items.

    An item copies what production needs from its job once, at creation.
    From then on the two are independent: editing or deleting an item
    never touches the job, and later job edits do not reach the item.
    The job id is kept only to stop a job being enrolled twice.
    """

    def __init__(
        self,
        run_list_repository: JsonRepository[RunListItem],
        job_repository: JsonRepository[Job],
        strict_status: bool = False,
    ):
        self.run_list_repository = run_list_repository
        self.job_repository = job_repository
        self.strict_status = strict_status

    def get_all(self) -> list[RunListItem]:
        return self.run_list_repository.find_all()

    def get_by_id(self, item_id: str) -> Optional[RunListItem]:
        return self.run_list_repository.find_by_id(item_id)

    def find_by_job_id(self, job_id: str) -> Optional[RunListItem]:
        for item in self.run_list_repository.find_all():
            if item.job_id == job_id:
                return item
        return None

    def _require(self, item_id: str) -> RunListItem:
        item = self.run_list_repository.find_by_id(item_id)
        if item is None:
            raise NotFoundError(f"Run List item {item_id} not found")
        return item

    def create_from_job(self, data: CreateRunListItemInput) -> RunListItem:
        job = self.job_repository.find_by_id(data.job_id)
        if job is None:
            raise NotFoundError(f"Job {data.job_id} not found")

        if self.find_by_job_id(job.id) is not None:
            raise ConflictError(
                f"Job {job.job_number} is already in the Run List"
            )

        stamp = now_iso()
        item = RunListItem(
            id=generate_id(),
            job_id=job.id,
            job_number=job.job_number,
            customer_name=job.customer_name,
            job_title=job.job_title,
            customer_po=job.po_number,
            customer_job_number=job.customer_job_number,
            quantity=job.quantity,
            description=job.description,
            category=data.category or "",
            due_out=data.due_out,
            due_in=data.due_in or job.expected_in_date,
            status="planned",
            operations=_normalize_operations(data.operations or []),
            created_at=stamp,
            updated_at=stamp,
        )
        self.run_list_repository.create(item)
        logger.info("Added job %s to the run list", job.job_number)
        return item

    def update(self, item_id: str,
               changes: UpdateRunListItemInput) -> RunListItem:
        existing = self._require(item_id)
        provided = {k: v for k, v in asdict(changes).items() if v is not None}
        if "status" in provided:
            check_status_change(
                "run list", existing.status, provided["status"],
                RUN_LIST_TRANSITIONS, self.strict_status,
            )
        if "operations" in provided:
            provided["operations"] = _normalize_operations(
                provided["operations"]
            )
        updated = replace(existing, **provided, updated_at=now_iso())
        self.run_list_repository.update(item_id, updated)
        logger.info("Updated run list item %s", updated.job_number)
        return updated

    def update_status(self, item_id: str, status: str) -> RunListItem:
        existing = self._require(item_id)
        check_status_change(
            "run list", existing.status, status,
            RUN_LIST_TRANSITIONS, self.strict_status,
        )
        updated = replace(existing, status=status, updated_at=now_iso())
        self.run_list_repository.update(item_id, updated)
        logger.info("Run list %s status %s -> %s", updated.job_number,
                    existing.status, status)
        return updated

    def add_operation(self, item_id: str, code: str) -> RunListItem:
        """Append an operation tag unless it is blank or already present."""
        existing = self._require(item_id)
        tag = normalize_operation(code)
        if not tag:
            raise InvalidArgumentError("Operation code cannot be blank")
        if tag in existing.operations:
            return existing
        updated = replace(
            existing,
            operations=existing.operations + [tag],
            updated_at=now_iso(),
        )
        self.run_list_repository.update(item_id, updated)
        return updated

    def remove_operation(self, item_id: str, code: str) -> RunListItem:
        existing = self._require(item_id)
        tag = normalize_operation(code)
        if tag not in existing.operations:
            return existing
        updated = replace(
            existing,
            operations=[op for op in existing.operations if op != tag],
            updated_at=now_iso(),
        )
        self.run_list_repository.update(item_id, updated)
        return updated

    def delete(self, item_id: str) -> bool:
        deleted = self.run_list_repository.delete(item_id)
        if deleted:
            logger.info("Deleted run list item %s", item_id)
        return deleted

    def find_by_status(self, status: str) -> list[RunListItem]:
        return self.run_list_repository.find_by(
            lambda item: item.status == status
        )

    def find_active(self) -> list[RunListItem]:
        return self.run_list_repository.find_by(
            lambda item: item.status != "complete"
        )

    @staticmethod
    def sort_by_default(items: list[RunListItem]) -> list[RunListItem]:
        """Category Z-A, then earliest due-out first (undated last).

        Comparison is plain string ordering, so an empty category is the
        smallest value and lands after every named category.
        """
        by_due = sorted(items, key=_due_out_key)
        return sorted(by_due, key=lambda item: item.category or "",
                      reverse=True)
