from __future__ import annotations

from datetime import date, datetime


def reorder_date_rep(date_rep: str) -> str:
    """
    Reorder a source 'DD/MM/YYYY' date into 'YYYY-MM-DD' text.
    Used both for chart labels and, via record_date(), for filtering.
    """
    parts = str(date_rep).strip().split("/")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Expected a DD/MM/YYYY date, got {date_rep!r}")
    return "-".join(reversed(parts))


def record_date(date_rep: str) -> date:
    """Calendar date of a source 'DD/MM/YYYY' value (naive, no timezone)."""
    return datetime.strptime(reorder_date_rep(date_rep), "%Y-%m-%d").date()
