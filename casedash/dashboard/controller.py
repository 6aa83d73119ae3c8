"""
Table/chart view transitions.

Every handler takes the current ViewState plus the filter criteria read from
the widgets and returns the next ViewState. Fetching is injected as a
zero-argument callable so the transitions can run without Streamlit or the
network.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterable

from casedash.core.records import Record
from casedash.dashboard.countries import populate_countries
from casedash.dashboard.filters import FilterCriteria, filter_records
from casedash.dashboard.pagination import step_page
from casedash.dashboard.state import View, ViewState

logger = logging.getLogger(__name__)

Fetch = Callable[[], Iterable[Record]]


def apply_filters(
    state: ViewState, criteria: FilterCriteria, fetch: Fetch, *, reset_page: bool = True
) -> ViewState:
    """Re-fetch the whole feed and narrow it; page goes back to 1 unless paging."""
    page = 1 if reset_page else state.page
    filtered = filter_records(fetch(), criteria)
    logger.debug("Filters %s matched %d records (page %d)", criteria, len(filtered), page)
    return replace(state, page=page, filtered=filtered)


def change_page(state: ViewState, delta: int, criteria: FilterCriteria, fetch: Fetch) -> ViewState:
    target = step_page(state.page, delta, state.total_pages)
    if target == state.page:
        return state
    return apply_filters(replace(state, page=target), criteria, fetch, reset_page=False)


def show_chart(state: ViewState) -> ViewState:
    """Chart uses the list already filtered; no fetch."""
    return replace(state, view=View.CHART)


def show_table(state: ViewState, criteria: FilterCriteria, fetch: Fetch) -> ViewState:
    return apply_filters(replace(state, view=View.TABLE), criteria, fetch, reset_page=True)


def toggle_view(state: ViewState, view: View, criteria: FilterCriteria, fetch: Fetch) -> ViewState:
    if View(view) is View.CHART:
        return show_chart(state)
    return show_table(state, criteria, fetch)


def tab_button_types(view: View) -> dict[View, str]:
    """Streamlit button type per tab: the active one is highlighted."""
    return {v: ("primary" if v is view else "secondary") for v in View}


def initial_load(criteria: FilterCriteria, fetch: Fetch) -> tuple[list[str], ViewState]:
    """Populate the country selector, then show page 1 of the table."""
    options = populate_countries(fetch)
    return options, apply_filters(ViewState(), criteria, fetch, reset_page=True)
