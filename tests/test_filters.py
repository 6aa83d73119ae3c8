import logging
from datetime import date, datetime

import pytest

from casedash.core.dates import record_date
from casedash.dashboard.filters import FilterCriteria, filter_records, normalize_filters, record_matches

from helpers import make_record


def test_no_criteria_keeps_everything(mixed_records):
    assert filter_records(mixed_records, FilterCriteria()) == mixed_records


def test_country_filter_is_ordered_subsequence(mixed_records):
    out = filter_records(mixed_records, FilterCriteria(country="Italy"))
    assert out == tuple(r for r in mixed_records if r.country == "Italy")
    assert [r.date_rep for r in out] == ["03/01/2020", "02/01/2020", "01/01/2020"]


def test_equal_start_and_end_include_that_day(mixed_records):
    day = date(2020, 1, 2)
    out = filter_records(mixed_records, FilterCriteria(start_date=day, end_date=day))
    assert [(r.country, r.date_rep) for r in out] == [("Italy", "02/01/2020"), ("France", "02/01/2020")]


def test_open_ended_ranges(mixed_records):
    after = filter_records(mixed_records, FilterCriteria(start_date=date(2020, 1, 2)))
    assert {r.date_rep for r in after} == {"03/01/2020", "02/01/2020"}
    before = filter_records(mixed_records, FilterCriteria(end_date=date(2019, 12, 31)))
    assert [r.country for r in before] == ["Spain"]


def test_start_after_end_matches_nothing(mixed_records):
    crit = FilterCriteria(start_date=date(2020, 1, 3), end_date=date(2020, 1, 1))
    assert filter_records(mixed_records, crit) == ()


@pytest.mark.parametrize("crit", [
    FilterCriteria(),
    FilterCriteria(country="Spain"),
    FilterCriteria(start_date=date(2020, 1, 1)),
    FilterCriteria(end_date=date(2020, 1, 2), country="Italy"),
    FilterCriteria(start_date=date(2020, 1, 1), end_date=date(2020, 1, 2), country="France"),
    FilterCriteria(country="Nowhere"),
])
def test_filter_is_sound_and_complete(mixed_records, crit):
    def expected(r):
        d = record_date(r.date_rep)
        return ((crit.start_date is None or d >= crit.start_date)
                and (crit.end_date is None or d <= crit.end_date)
                and (crit.country == "All" or r.country == crit.country))

    out = filter_records(mixed_records, crit)
    assert out == tuple(r for r in mixed_records if expected(r))
    assert all(record_matches(r, crit) for r in out)


def test_normalize_filters_blank_values():
    assert normalize_filters({"start_date": None, "end_date": "", "country": ""}) == FilterCriteria()


def test_normalize_filters_accepts_dates_datetimes_and_strings():
    crit = normalize_filters({
        "start_date": "2020-03-01",
        "end_date": datetime(2020, 3, 31, 15, 0),
        "country": " Italy ",
    })
    assert crit == FilterCriteria(date(2020, 3, 1), date(2020, 3, 31), "Italy")


def test_unreadable_date_only_drops_that_record(mixed_records, caplog):
    broken = make_record("Italy", "not-a-date", 99, 9)
    records = (broken,) + mixed_records
    crit = FilterCriteria(start_date=date(2020, 1, 1))
    with caplog.at_level(logging.WARNING, logger="casedash.dashboard.filters"):
        out = filter_records(records, crit)
    assert broken not in out
    assert len(out) == 5
    assert "not-a-date" in caplog.text


def test_unreadable_date_kept_without_date_bounds():
    broken = make_record("Italy", "not-a-date")
    assert filter_records([broken], FilterCriteria(country="Italy")) == (broken,)
