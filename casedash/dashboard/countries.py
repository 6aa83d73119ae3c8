from __future__ import annotations

from typing import Callable, Iterable

from casedash.core.records import Record
from casedash.dashboard.config import ALL_COUNTRIES, ALL_COUNTRIES_LABEL


def build_country_options(records: Iterable[Record]) -> list[str]:
    """'All' first, then every country once in first-seen order."""
    distinct = dict.fromkeys(r.country for r in records)
    return [ALL_COUNTRIES, *distinct]


def country_label(value: str) -> str:
    return ALL_COUNTRIES_LABEL if value == ALL_COUNTRIES else value


def populate_countries(fetch: Callable[[], Iterable[Record]]) -> list[str]:
    """Fetch the feed and derive the selector options from it."""
    return build_country_options(fetch())
