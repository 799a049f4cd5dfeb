"""Tests for record serialization and collection layout."""

from bindery_estimator.database.models import (
    Customer,
    Job,
    QuantityOption,
    Quote,
    RunListItem,
)
from bindery_estimator.database.schema import (
    collection_path,
    from_record,
    to_camel,
    to_record,
)


class TestToCamel:
    def test_single_word(self):
        assert to_camel("status") == "status"

    def test_multi_word(self):
        assert to_camel("expected_in_date") == "expectedInDate"

    def test_override(self):
        assert to_camel("customer_po") == "customerPO"


class TestCollectionPath:
    def test_file_names(self, tmp_path):
        assert collection_path(tmp_path, Customer).name == "customers.json"
        assert collection_path(tmp_path, Quote).name == "quotes.json"
        assert collection_path(tmp_path, Job).name == "jobs.json"
        assert collection_path(tmp_path, RunListItem).name == "runList.json"


class TestRecords:
    def test_quote_nested_options(self):
        quote = Quote(
            id="q1", quote_number="2610-0001",
            quantity_options=[QuantityOption("o1", 1000, 0.35)],
        )
        record = to_record(quote)
        assert record["quoteNumber"] == "2610-0001"
        assert record["quantityOptions"] == [
            {"id": "o1", "quantity": 1000, "unitPrice": 0.35}
        ]
        back = from_record(Quote, record)
        assert back.quantity_options[0] == QuantityOption("o1", 1000, 0.35)

    def test_none_fields_omitted(self):
        record = to_record(Job(id="j1"))
        assert "completedAt" not in record
        assert "poNumber" not in record
        assert record["status"] == "pending"

    def test_unknown_keys_ignored(self):
        customer = from_record(
            Customer, {"id": "c1", "name": "Acme", "legacyField": 1}
        )
        assert customer == Customer(id="c1", name="Acme")

    def test_missing_keys_take_defaults(self):
        item = from_record(RunListItem, {"id": "r1", "jobId": "j1"})
        assert item.operations == []
        assert item.status == "planned"
