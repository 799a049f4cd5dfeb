"""Tests for JobService: promotion, status, deletion and link repair."""

from dataclasses import replace

import pytest

from bindery_estimator.database.models import UpdateJobInput
from bindery_estimator.errors import (
    ConflictError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
)


class TestCreateFromQuote:
    def test_copies_quote_and_tier(self, job, accepted_quote):
        assert job.job_number == accepted_quote.quote_number
        assert job.quote_id == accepted_quote.id
        assert job.customer_name == accepted_quote.customer_name
        assert job.job_title == accepted_quote.job_title
        assert job.paper_stock == accepted_quote.paper_stock
        assert job.quantity == 1000
        assert job.unit_price == 0.35
        assert job.status == "pending"
        assert job.completed_at is None

    def test_links_quote(self, services, job, accepted_quote):
        stored = services.quotes.get_by_id(accepted_quote.id)
        assert stored.job_id == job.id
        assert stored.is_promoted

    def test_missing_quote(self, services):
        with pytest.raises(NotFoundError):
            services.jobs.create_from_quote("ghost", 500)

    def test_draft_quote_rejected(self, services, quote):
        with pytest.raises(InvalidStateError, match="must be accepted"):
            services.jobs.create_from_quote(quote.id, 500)
        assert services.jobs.get_all() == []

    def test_unknown_quantity(self, services, accepted_quote):
        with pytest.raises(InvalidArgumentError,
                           match="Available: 500, 1000"):
            services.jobs.create_from_quote(accepted_quote.id, 750)

    def test_second_promotion_conflicts(self, services, job,
                                        accepted_quote):
        with pytest.raises(ConflictError):
            services.jobs.create_from_quote(accepted_quote.id, 500)
        assert len(services.jobs.get_all()) == 1

    def test_accepted_revision_conflicts_on_job_number(self, services, job,
                                                       accepted_quote):
        rev = services.quotes.create_revision(accepted_quote.id)
        services.quotes.update_status(rev.id, "accepted")
        with pytest.raises(ConflictError, match="already converted"):
            services.jobs.create_from_quote(rev.id, 500)

    def test_revision_of_deleted_job_conflicts_on_number(
            self, services, job, accepted_quote):
        rev = services.quotes.create_revision(accepted_quote.id)
        services.quotes.update_status(rev.id, "accepted")
        services.jobs.job_repository.delete(job.id)
        services.jobs.create_from_quote(accepted_quote.id, 500)
        with pytest.raises(ConflictError, match="already exists"):
            services.jobs.create_from_quote(rev.id, 500)

    def test_stale_link_does_not_block(self, services, accepted_quote):
        stale = replace(
            services.quotes.get_by_id(accepted_quote.id), job_id="gone"
        )
        services.quotes.quote_repository.update(accepted_quote.id, stale)
        job = services.jobs.create_from_quote(accepted_quote.id, 500)
        assert services.quotes.get_by_id(accepted_quote.id).job_id == job.id

    def test_find_by_quote(self, services, job, accepted_quote):
        assert services.jobs.find_by_quote(accepted_quote.id) == job
        assert services.jobs.find_by_quote("other") is None


class TestUpdate:
    def test_job_only_fields(self, services, job):
        updated = services.jobs.update(job.id, UpdateJobInput(
            po_number="PO-77", due_date="2026-11-15", allowed_overs=0.05,
        ))
        assert updated.po_number == "PO-77"
        assert updated.due_date == "2026-11-15"
        assert updated.allowed_overs == 0.05
        assert updated.quantity == job.quantity
        assert updated.job_number == job.job_number

    def test_missing(self, services):
        with pytest.raises(NotFoundError):
            services.jobs.update("ghost", UpdateJobInput(po_number="x"))


class TestStatus:
    def test_complete_stamps_completed_at(self, services, job):
        done = services.jobs.complete_job(job.id)
        assert done.status == "complete"
        assert done.completed_at

    def test_reopen_keeps_completed_at(self, services, job):
        done = services.jobs.complete_job(job.id)
        reopened = services.jobs.start_job(job.id)
        assert reopened.status == "in_progress"
        assert reopened.completed_at == done.completed_at

    def test_shortcuts(self, services, job):
        assert services.jobs.start_job(job.id).status == "in_progress"
        assert services.jobs.hold_job(job.id).status == "on_hold"
        assert services.jobs.cancel_job(job.id).status == "cancelled"
        assert services.jobs.get_by_id(job.id).completed_at is None

    def test_unknown_status(self, services, job):
        with pytest.raises(InvalidArgumentError):
            services.jobs.update_status(job.id, "done")

    def test_active_jobs(self, services, customer, promote):
        jobs = [promote(customer.id) for _ in range(4)]
        services.jobs.complete_job(jobs[0].id)
        services.jobs.cancel_job(jobs[1].id)
        services.jobs.hold_job(jobs[2].id)
        active = {j.id for j in services.jobs.find_active_jobs()}
        assert active == {jobs[2].id, jobs[3].id}
        assert [j.id for j in services.jobs.find_by_status("on_hold")] == [
            jobs[2].id
        ]


class TestDelete:
    def test_delete_clears_quote_link(self, services, job, accepted_quote):
        assert services.jobs.delete(job.id) is True
        assert services.jobs.get_by_id(job.id) is None
        assert services.quotes.get_by_id(accepted_quote.id).job_id is None

    def test_delete_then_repromote(self, services, job, accepted_quote):
        services.jobs.delete(job.id)
        again = services.jobs.create_from_quote(accepted_quote.id, 500)
        assert again.quantity == 500

    def test_delete_missing(self, services):
        assert services.jobs.delete("ghost") is False

    def test_delete_leaves_run_list_item(self, services, job):
        from bindery_estimator.database.models import CreateRunListItemInput

        item = services.run_list.create_from_job(
            CreateRunListItemInput(job_id=job.id)
        )
        services.jobs.delete(job.id)
        assert services.run_list.get_by_id(item.id) is not None


class TestQueries:
    def test_find_by_customer(self, services, job, customer):
        assert services.jobs.find_by_customer(customer.id) == [job]

    def test_due_date_range(self, services, customer, promote):
        a, b, c = (promote(customer.id) for _ in range(3))
        services.jobs.update(a.id, UpdateJobInput(due_date="2026-10-01"))
        services.jobs.update(
            b.id, UpdateJobInput(due_date="2026-10-31T15:00:00.000Z")
        )
        found = services.jobs.find_by_due_date_range("2026-10-01",
                                                     "2026-10-31")
        assert {j.id for j in found} == {a.id, b.id}
        assert c.id not in {j.id for j in found}

    def test_calculate_total(self, services, job):
        assert services.jobs.calculate_total(job) == pytest.approx(350.0)


class TestReconcile:
    def test_relinks_interrupted_promotion(self, services, job,
                                           accepted_quote):
        unlinked = replace(
            services.quotes.get_by_id(accepted_quote.id), job_id=None
        )
        services.quotes.quote_repository.update(accepted_quote.id, unlinked)
        report = services.jobs.reconcile_quote_links()
        assert report.repaired == [accepted_quote.id]
        assert services.quotes.get_by_id(accepted_quote.id).job_id == job.id

    def test_clears_dangling_link(self, services, job, accepted_quote):
        services.jobs.job_repository.delete(job.id)
        report = services.jobs.reconcile_quote_links()
        assert report.cleared == [accepted_quote.id]
        assert services.quotes.get_by_id(accepted_quote.id).job_id is None

    def test_consistent_store_unchanged(self, services, job):
        assert services.jobs.reconcile_quote_links().changed == 0


class TestStrictStatus:
    def test_cancelled_is_final(self, strict_services, strict_quote):
        svc = strict_services
        svc.quotes.update_status(strict_quote.id, "sent")
        svc.quotes.update_status(strict_quote.id, "accepted")
        job = svc.jobs.create_from_quote(strict_quote.id, 500)
        with pytest.raises(InvalidStateError):
            svc.jobs.complete_job(job.id)
        svc.jobs.cancel_job(job.id)
        with pytest.raises(InvalidStateError):
            svc.jobs.start_job(job.id)
