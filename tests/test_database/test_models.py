"""Tests for dataclass model properties and computed fields."""

from bindery_estimator.database.models import (
    Customer,
    DuplicateCheckResult,
    Job,
    QuantityOption,
    Quote,
    ReconcileReport,
    RunListItem,
)
from bindery_estimator.utils.constants import (
    JOB_CLOSED_STATUSES,
    JOB_STATUSES,
)


class TestQuoteProperties:
    def test_display_number_first_version(self):
        assert Quote(quote_number="2610-0001").display_number == "2610-0001"

    def test_display_number_revision(self):
        q = Quote(quote_number="2610-0001", version=3)
        assert q.display_number == "2610-0001-v3"

    def test_is_promoted(self):
        assert Quote().is_promoted is False
        assert Quote(job_id="j1").is_promoted is True

    def test_quantities(self):
        q = Quote(quantity_options=[
            QuantityOption("a", 500, 0.45), QuantityOption("b", 1000, 0.35),
        ])
        assert q.quantities == [500, 1000]

    def test_options_not_shared_between_instances(self):
        a, b = Quote(), Quote()
        a.quantity_options.append(QuantityOption("x", 1, 1.0))
        assert b.quantity_options == []


class TestTotals:
    def test_option_total(self):
        assert QuantityOption("a", 1000, 0.35).total == 350.0

    def test_job_total(self):
        assert Job(quantity=2500, unit_price=0.28).total == 700.0


class TestActiveFlags:
    def test_job_active(self):
        assert Job(status="pending").is_active is True
        assert Job(status="on_hold").is_active is True

    def test_job_closed(self):
        assert Job(status="complete").is_active is False
        assert Job(status="cancelled").is_active is False

    def test_job_active_matches_closed_statuses(self):
        for status in JOB_STATUSES:
            expected = status not in JOB_CLOSED_STATUSES
            assert Job(status=status).is_active is expected

    def test_run_list_active(self):
        assert RunListItem(status="hold").is_active is True
        assert RunListItem(status="complete").is_active is False


class TestResults:
    def test_duplicate_check_empty(self):
        assert DuplicateCheckResult().has_duplicates is False

    def test_duplicate_check_name_only(self):
        result = DuplicateCheckResult(duplicate_name=Customer(id="c"))
        assert result.has_duplicates is True

    def test_reconcile_changed(self):
        assert ReconcileReport(repaired=["a"], cleared=["b"]).changed == 2
