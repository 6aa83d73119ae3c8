from __future__ import annotations

from casedash.core.records import Record


def make_record(country: str, date_rep: str, cases: int = 0, deaths: int = 0) -> Record:
    return Record.model_validate(
        {"countriesAndTerritories": country, "dateRep": date_rep, "cases": cases, "deaths": deaths}
    )


class CountingFetch:
    """Stand-in for fetch_records that counts calls."""

    def __init__(self, records):
        self.records = tuple(records)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.records
