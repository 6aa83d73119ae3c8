from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """One row of the ECDC case distribution feed."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    country: str = Field(..., alias="countriesAndTerritories", examples=["Italy"])
    date_rep: str = Field(..., alias="dateRep", examples=["14/12/2020"])
    cases: int = Field(..., examples=[17938])
    deaths: int = Field(..., examples=[484])


def parse_records(rows: Iterable[dict[str, Any]]) -> tuple[Record, ...]:
    """Validate raw API rows into Records, keeping source order."""
    return tuple(Record.model_validate(row) for row in rows)
