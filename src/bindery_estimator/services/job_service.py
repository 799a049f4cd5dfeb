"""Job management — promotion from accepted quotes and production status."""

import logging
from dataclasses import asdict, replace
from typing import Optional

from bindery_estimator.database.models import (
    Job,
    Quote,
    ReconcileReport,
    UpdateJobInput,
)
from bindery_estimator.database.repository import JsonRepository
from bindery_estimator.errors import (
    ConflictError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
)
from bindery_estimator.services.status import check_status_change
from bindery_estimator.utils.constants import (
    JOB_CLOSED_STATUSES,
    JOB_TRANSITIONS,
)
from bindery_estimator.utils.ids import generate_id, now_iso

logger = logging.getLogger(__name__)


class JobService:
    """Owns the write path for jobs.

    A job takes its number and quote-derived fields from the accepted
    quote it was promoted from; those are never resynced. Promotion is
    two writes (create the job, then link the quote back to it) and is
    not atomic. ``reconcile_quote_links`` repairs the quote side after an
    interrupted promotion or delete.
    """

    def __init__(
        self,
        job_repository: JsonRepository[Job],
        quote_repository: JsonRepository[Quote],
        strict_status: bool = False,
    ):
        self.job_repository = job_repository
        self.quote_repository = quote_repository
        self.strict_status = strict_status

    def get_all(self) -> list[Job]:
        return self.job_repository.find_all()

    def get_by_id(self, job_id: str) -> Optional[Job]:
        return self.job_repository.find_by_id(job_id)

    def find_by_quote(self, quote_id: str) -> Optional[Job]:
        for job in self.job_repository.find_all():
            if job.quote_id == quote_id:
                return job
        return None

    def _require(self, job_id: str) -> Job:
        job = self.job_repository.find_by_id(job_id)
        if job is None:
            raise NotFoundError(f"Job {job_id} not found")
        return job

    def create_from_quote(self, quote_id: str, selected_quantity: int) -> Job:
        """Promote an accepted quote to a job at one of its quantity tiers."""
        quote = self.quote_repository.find_by_id(quote_id)
        if quote is None:
            raise NotFoundError(f"Quote {quote_id} not found")

        if quote.status != "accepted":
            raise InvalidStateError(
                f'Cannot create job from quote with status "{quote.status}". '
                "Quote must be accepted."
            )

        if quote.job_id:
            linked = self.job_repository.find_by_id(quote.job_id)
            if linked is not None:
                raise ConflictError(
                    f"Quote {quote.display_number} was already converted "
                    f"to job {linked.job_number}"
                )

        option = next(
            (o for o in quote.quantity_options
             if o.quantity == selected_quantity),
            None,
        )
        if option is None:
            available = ", ".join(str(q) for q in quote.quantities)
            raise InvalidArgumentError(
                f"Quantity {selected_quantity} not found in quote options. "
                f"Available: {available}"
            )

        for existing in self.job_repository.find_all():
            if existing.job_number == quote.quote_number:
                raise ConflictError(
                    f"Job {existing.job_number} already exists for quote "
                    f"{quote.display_number}"
                )

        stamp = now_iso()
        job = Job(
            id=generate_id(),
            job_number=quote.quote_number,
            quote_id=quote.id,
            customer_id=quote.customer_id,
            customer_name=quote.customer_name,
            job_title=quote.job_title,
            description=quote.description,
            finished_size=quote.finished_size,
            paper_stock=quote.paper_stock,
            quantity=option.quantity,
            unit_price=option.unit_price,
            status="pending",
            created_at=stamp,
            updated_at=stamp,
        )
        self.job_repository.create(job)
        self.quote_repository.update(
            quote.id, replace(quote, job_id=job.id, updated_at=now_iso())
        )
        logger.info(
            "Promoted quote %s to job %s at quantity %d",
            quote.display_number, job.job_number, job.quantity,
        )
        return job

    def update(self, job_id: str, changes: UpdateJobInput) -> Job:
        """Merge job-only fields; quote-derived fields are not editable."""
        existing = self._require(job_id)
        provided = {k: v for k, v in asdict(changes).items() if v is not None}
        updated = replace(existing, **provided, updated_at=now_iso())
        self.job_repository.update(job_id, updated)
        logger.info("Updated job %s", updated.job_number)
        return updated

    def update_status(self, job_id: str, status: str) -> Job:
        """Set the status; entering "complete" stamps completed_at.

        Leaving "complete" does not clear completed_at, so a reopened job
        keeps the time it was last completed.
        """
        existing = self._require(job_id)
        check_status_change(
            "job", existing.status, status,
            JOB_TRANSITIONS, self.strict_status,
        )
        stamp = now_iso()
        completed_at = existing.completed_at
        if status == "complete":
            completed_at = stamp
        updated = replace(
            existing, status=status, updated_at=stamp,
            completed_at=completed_at,
        )
        self.job_repository.update(job_id, updated)
        logger.info("Job %s status %s -> %s", updated.job_number,
                    existing.status, status)
        return updated

    def start_job(self, job_id: str) -> Job:
        return self.update_status(job_id, "in_progress")

    def complete_job(self, job_id: str) -> Job:
        return self.update_status(job_id, "complete")

    def hold_job(self, job_id: str) -> Job:
        return self.update_status(job_id, "on_hold")

    def cancel_job(self, job_id: str) -> Job:
        return self.update_status(job_id, "cancelled")

    def delete(self, job_id: str) -> bool:
        """Delete a job, first unlinking its quote if it still points here."""
        job = self.job_repository.find_by_id(job_id)
        if job is None:
            return False

        quote = self.quote_repository.find_by_id(job.quote_id)
        if quote is not None and quote.job_id == job_id:
            self.quote_repository.update(
                quote.id, replace(quote, job_id=None, updated_at=now_iso())
            )

        deleted = self.job_repository.delete(job_id)
        logger.info("Deleted job %s", job.job_number)
        return deleted

    def find_by_customer(self, customer_id: str) -> list[Job]:
        return self.job_repository.find_by(
            lambda j: j.customer_id == customer_id
        )

    def find_by_status(self, status: str) -> list[Job]:
        return self.job_repository.find_by(lambda j: j.status == status)

    def find_active_jobs(self) -> list[Job]:
        return self.job_repository.find_by(
            lambda j: j.status not in JOB_CLOSED_STATUSES
        )

    def find_by_due_date_range(self, start: str, end: str) -> list[Job]:
        """Jobs whose due date falls within [start, end] (ISO dates).

        Only the date part is compared, so ``2026-10-31T15:00:00Z`` is
        inside a range ending ``2026-10-31``. Jobs without a due date are
        never included.
        """
        start_day, end_day = start[:10], end[:10]
        return self.job_repository.find_by(
            lambda j: bool(j.due_date)
            and start_day <= j.due_date[:10] <= end_day
        )

    @staticmethod
    def calculate_total(job: Job) -> float:
        return job.quantity * job.unit_price

    def reconcile_quote_links(self) -> ReconcileReport:
        """Make every quote's job_id agree with the jobs that exist.

        A quote referenced by a job but not pointing back at it is
        re-linked; a quote pointing at a job that no longer exists is
        unlinked.
        """
        report = ReconcileReport()
        jobs_by_quote = {}
        for job in self.job_repository.find_all():
            jobs_by_quote.setdefault(job.quote_id, job)
        job_ids = {job.id for job in self.job_repository.find_all()}

        for quote in self.quote_repository.find_all():
            job = jobs_by_quote.get(quote.id)
            if job is not None and quote.job_id != job.id:
                self.quote_repository.update(
                    quote.id,
                    replace(quote, job_id=job.id, updated_at=now_iso()),
                )
                report.repaired.append(quote.id)
                logger.warning("Re-linked quote %s to job %s",
                               quote.display_number, job.job_number)
            elif job is None and quote.job_id and quote.job_id not in job_ids:
                self.quote_repository.update(
                    quote.id,
                    replace(quote, job_id=None, updated_at=now_iso()),
                )
                report.cleared.append(quote.id)
                logger.warning("Cleared stale job link on quote %s",
                               quote.display_number)
        return report
