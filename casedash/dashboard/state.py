from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from casedash.core.records import Record
from casedash.dashboard.config import PAGE_SIZE
from casedash.dashboard.pagination import page_count


class View(str, Enum):
    TABLE = "table"
    CHART = "chart"


@dataclass(frozen=True)
class ViewState:
    """
    What the content area shows. Handlers never mutate it; they return a new
    one (see controller.py). `filtered` is always a subsequence of the last
    full fetch, in source order.
    """

    page: int = 1
    page_size: int = PAGE_SIZE
    filtered: tuple[Record, ...] = ()
    view: View = View.TABLE

    @property
    def total_pages(self) -> int:
        return page_count(len(self.filtered), self.page_size)
