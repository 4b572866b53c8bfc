"""
Tests for query_engine.py filters and aggregations.
"""
from datetime import date

import pytest

from query_engine import (
    HourlyBucket,
    Totals,
    aggregate_totals,
    bucket_by_hour,
    filter_by_date_exact,
    filter_by_date_range,
    filter_by_id_set,
    filter_by_text,
)


@pytest.fixture
def two_days(make_record):
    """Two loadings on the 10th, one on the 11th."""
    return [
        make_record(date="2024-01-11", entry_time="10:05", loaded_quantity=300, ordered_quantity=300),
        make_record(date="2024-01-10", entry_time="08:45", loaded_quantity=200, ordered_quantity=250),
        make_record(date="2024-01-10", entry_time="08:15", loaded_quantity=100, ordered_quantity=120),
    ]


class TestDateFilters:

    def test_one_day_of_two(self, make_record):
        first = make_record(date="2024-01-10", loaded_quantity=500)
        second = make_record(date="2024-01-11", loaded_quantity=700)

        assert filter_by_date_range([first, second], "2024-01-10", "2024-01-10") == [first]
        assert aggregate_totals([first, second]).total_loaded == 1200

    def test_exact_day_and_totals(self, two_days):
        day = filter_by_date_exact(two_days, "2024-01-10")
        assert aggregate_totals(day) == Totals(total_loaded=300, total_ordered=370, count=2)

    def test_exact_day_accepts_date_objects(self, two_days):
        assert filter_by_date_exact(two_days, date(2024, 1, 11)) == [two_days[0]]

    def test_range_is_inclusive(self, two_days):
        assert filter_by_date_range(two_days, "2024-01-10", "2024-01-11") == two_days
        assert filter_by_date_range(two_days, date(2024, 1, 11), date(2024, 1, 11)) == [two_days[0]]

    def test_missing_bounds_are_open(self, two_days):
        assert filter_by_date_range(two_days, None, "2024-01-10") == two_days[1:]
        assert filter_by_date_range(two_days, "2024-01-11", None) == [two_days[0]]
        assert filter_by_date_range(two_days, None, None) == two_days

    def test_inverted_range_is_empty(self, two_days):
        assert filter_by_date_range(two_days, "2024-01-11", "2024-01-10") == []


class TestTextAndIdFilters:

    def test_text_matches_tanker_destination_or_bc(self, make_record):
        records = [
            make_record(tanker_number="TQ-777", destination="Oran", bc_number="BC-1"),
            make_record(tanker_number="TQ-100", destination="Arzew", bc_number="BC-2"),
            make_record(tanker_number="TQ-200", destination="Oran", bc_number="X-ARZ"),
        ]
        assert filter_by_text(records, "tq-777") == [records[0]]
        assert filter_by_text(records, "ARZ") == records[1:]
        assert filter_by_text(records, "bc-2") == [records[1]]

    def test_empty_query_keeps_everything(self, two_days):
        assert filter_by_text(two_days, "") == two_days

    def test_id_set_keeps_input_order(self, two_days):
        ids = {two_days[2].id, two_days[0].id, "unknown"}
        assert filter_by_id_set(two_days, ids) == [two_days[0], two_days[2]]


class TestAggregation:

    def test_totals_of_nothing(self):
        assert aggregate_totals([]) == Totals(0, 0, 0)

    def test_hourly_buckets_merge_within_the_hour(self, two_days):
        buckets = bucket_by_hour(two_days)
        assert buckets == [
            HourlyBucket(hour="08:00", loaded=300, ordered=370),
            HourlyBucket(hour="10:00", loaded=300, ordered=300),
        ]

    def test_buckets_are_sorted_by_label(self, make_record):
        records = [make_record(entry_time=t) for t in ("14:00", "07:30", "09:10")]
        assert [b.hour for b in bucket_by_hour(records)] == ["07:00", "09:00", "14:00"]

    def test_fractional_quantities(self, make_record):
        records = [
            make_record(entry_time="06:10", loaded_quantity=10.5, ordered_quantity=11),
            make_record(entry_time="06:50", loaded_quantity=0.25, ordered_quantity=1),
        ]
        (bucket,) = bucket_by_hour(records)
        assert bucket.loaded == pytest.approx(10.75)
        assert bucket.ordered == 12

    def test_entry_time_without_separator_is_its_own_bucket(self, make_record):
        (bucket,) = bucket_by_hour([make_record(entry_time="0830")])
        assert bucket.hour == "0830:00"

    def test_no_records_no_buckets(self):
        assert bucket_by_hour([]) == []
