from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional

from casedash.core.dates import record_date
from casedash.core.records import Record
from casedash.dashboard.config import ALL_COUNTRIES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterCriteria:
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    country: str = ALL_COUNTRIES


def _as_date(value: object) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip())


def normalize_filters(raw: dict) -> FilterCriteria:
    """Build criteria from widget values; blanks mean 'no constraint'."""
    country = (raw.get("country") or "").strip() or ALL_COUNTRIES
    return FilterCriteria(
        start_date=_as_date(raw.get("start_date")),
        end_date=_as_date(raw.get("end_date")),
        country=country,
    )


def record_matches(record: Record, criteria: FilterCriteria) -> bool:
    if criteria.country != ALL_COUNTRIES and record.country != criteria.country:
        return False
    if criteria.start_date is None and criteria.end_date is None:
        return True

    # inclusive on both ends; start > end simply matches nothing
    try:
        d = record_date(record.date_rep)
    except ValueError:
        logger.warning("Skipping %s record with unreadable date %r", record.country, record.date_rep)
        return False
    if criteria.start_date is not None and d < criteria.start_date:
        return False
    if criteria.end_date is not None and d > criteria.end_date:
        return False
    return True


def filter_records(records: Iterable[Record], criteria: FilterCriteria) -> tuple[Record, ...]:
    """Subsequence of `records` matching `criteria`, source order preserved."""
    return tuple(r for r in records if record_matches(r, criteria))
