"""Tests for id, timestamp and document-number helpers."""

import re
import threading
from datetime import datetime

from bindery_estimator.utils.ids import (
    NumberAllocator,
    generate_id,
    generate_number,
    month_key,
    now_iso,
)


class TestGenerateId:
    def test_unique(self):
        assert len({generate_id() for _ in range(100)}) == 100

    def test_uuid_shape(self):
        assert re.fullmatch(r"[0-9a-f-]{36}", generate_id())


class TestNowIso:
    def test_utc_millis(self):
        assert re.fullmatch(
            r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", now_iso()
        )


class TestMonthKey:
    def test_format(self):
        assert month_key(datetime(2026, 3, 9)) == "2603"

    def test_defaults_to_now(self):
        assert month_key() == datetime.now().strftime("%y%m")


class TestGenerateNumber:
    def test_first_of_month(self):
        assert generate_number([], "2610") == "2610-0001"

    def test_next_after_max(self):
        existing = ["2610-0001", "2610-0007", "2610-0003"]
        assert generate_number(existing, "2610") == "2610-0008"

    def test_other_months_ignored(self):
        existing = ["2609-0042", "2610-0002"]
        assert generate_number(existing, "2610") == "2610-0003"

    def test_new_month_restarts(self):
        assert generate_number(["2609-0042"], "2610") == "2610-0001"

    def test_unparseable_sequence_ignored(self):
        existing = ["2610-abcd", "2610-0004", "", None]
        assert generate_number(existing, "2610") == "2610-0005"

    def test_beyond_padding_width(self):
        assert generate_number(["2610-9999"], "2610") == "2610-10000"

    def test_prefix(self):
        existing = ["INV-2610-0003", "2610-0009"]
        assert generate_number(existing, "2610", prefix="INV") == \
            "INV-2610-0004"

    def test_default_month(self):
        assert generate_number([]).startswith(f"{month_key()}-")


class TestNumberAllocator:
    def test_yields_month(self):
        allocator = NumberAllocator()
        with allocator.allocating("2610") as key:
            assert key == "2610"
        with allocator.allocating() as key:
            assert key == month_key()

    def test_serializes_allocation(self):
        allocator = NumberAllocator()
        issued = []

        def worker():
            for _ in range(25):
                with allocator.allocating("2610") as month:
                    issued.append(generate_number(issued, month))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(issued) == 100
        assert len(set(issued)) == 100
        assert max(issued) == "2610-0100"

    def test_separate_months_separate_locks(self):
        allocator = NumberAllocator()
        with allocator.allocating("2609"):
            with allocator.allocating("2610") as key:
                assert key == "2610"
