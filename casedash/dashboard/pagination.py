from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationControls:
    prev_disabled: bool
    next_disabled: bool
    label: str


def page_count(total: int, page_size: int) -> int:
    return math.ceil(total / page_size) if total > 0 else 0


def page_slice(rows: Sequence[T], page: int, page_size: int) -> Sequence[T]:
    """Rows shown on the 1-based `page`: at most `page_size` of them."""
    start = (page - 1) * page_size
    return rows[start:start + page_size]


def step_page(page: int, delta: int, total_pages: int) -> int:
    """Move one page back or forward; stays put at either end."""
    target = page + delta
    if target < 1 or target > total_pages:
        return page
    return target


def pagination_controls(page: int, total: int, page_size: int) -> PaginationControls:
    total_pages = page_count(total, page_size)
    return PaginationControls(
        prev_disabled=page == 1,
        next_disabled=page == total_pages,
        label=f"Page {page} of {total_pages}",
    )
