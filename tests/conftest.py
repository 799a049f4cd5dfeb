"""Shared test fixtures."""

import pytest

from bindery_estimator.database.models import (
    CreateCustomerInput,
    CreateQuantityOptionInput,
    CreateQuoteInput,
)
from bindery_estimator.services.container import build_services


@pytest.fixture
def data_dir(tmp_path):
    """Provide a temporary data directory."""
    return tmp_path / "data"


@pytest.fixture
def services(data_dir):
    """Provide every service wired over an empty data directory."""
    return build_services(data_dir, strict_status=False)


@pytest.fixture
def strict_services(tmp_path):
    """Services with guarded status transitions enabled."""
    return build_services(tmp_path / "strict", strict_status=True)


@pytest.fixture
def customer(services):
    """A single customer with an email address."""
    return services.customers.create(CreateCustomerInput(
        name="Acme Publishing",
        contact_name="Jane Smith",
        email="jane@acmepub.com",
        phone="555-0101",
    ))


def make_quote_input(customer_id: str, **overrides) -> CreateQuoteInput:
    """Quote input with two tiers: 500 @ 0.45 and 1000 @ 0.35."""
    fields = dict(
        customer_id=customer_id,
        job_title="Annual Report",
        description="32 page saddle stitch, trim 3 sides",
        finished_size="8.5 x 11",
        paper_stock="80# gloss text",
        quantity_options=[
            CreateQuantityOptionInput(quantity=500, unit_price=0.45),
            CreateQuantityOptionInput(quantity=1000, unit_price=0.35),
        ],
    )
    fields.update(overrides)
    return CreateQuoteInput(**fields)


@pytest.fixture
def quote(services, customer):
    """A draft quote for the fixture customer."""
    return services.quotes.create(make_quote_input(customer.id))


@pytest.fixture
def accepted_quote(services, quote):
    """The fixture quote moved through sent to accepted."""
    services.quotes.update_status(quote.id, "sent")
    return services.quotes.update_status(quote.id, "accepted")


@pytest.fixture
def job(services, accepted_quote):
    """A pending job promoted from the accepted quote at 1000 pieces."""
    return services.jobs.create_from_quote(accepted_quote.id, 1000)


@pytest.fixture
def quote_input(customer):
    """Factory for quote inputs against the fixture customer."""
    def _build(**overrides):
        overrides.setdefault("customer_id", customer.id)
        return make_quote_input(**overrides)
    return _build


@pytest.fixture
def promote(services):
    """Factory: create, send, accept and promote a quote in one call."""
    def _promote(customer_id: str, quantity: int = 1000, **overrides):
        q = services.quotes.create(make_quote_input(customer_id, **overrides))
        services.quotes.update_status(q.id, "sent")
        services.quotes.update_status(q.id, "accepted")
        return services.jobs.create_from_quote(q.id, quantity)
    return _promote


@pytest.fixture
def strict_quote(strict_services):
    """A draft quote in the strict-status store."""
    c = strict_services.customers.create(
        CreateCustomerInput(name="Strict Bindery")
    )
    return strict_services.quotes.create(make_quote_input(c.id))
