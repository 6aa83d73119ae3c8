# casedash/dashboard/charts.py

from __future__ import annotations

import logging
from typing import Iterable, Optional

import plotly.graph_objects as go

from casedash.core.dates import reorder_date_rep
from casedash.core.records import Record
from casedash.dashboard.config import CHART_HEIGHT, CHART_WIDTH

logger = logging.getLogger(__name__)

_TITLE_FONT = dict(family="Arial", size=12, style="italic")
_TICK_FONT = dict(family="Arial", size=10)

# (name, line colour, fill colour)
_SERIES_STYLE = {
    "cases": ("Cases", "#FFAA00", "rgba(255, 170, 0, 0.1)"),
    "deaths": ("Deaths", "#FF5555", "rgba(255, 85, 85, 0.1)"),
}


def chart_series(records: Iterable[Record]) -> tuple[list[str], list[int], list[int]]:
    """Parallel x labels (YYYY-MM-DD), cases and deaths, in record order."""
    labels: list[str] = []
    cases: list[int] = []
    deaths: list[int] = []
    for r in records:
        try:
            labels.append(reorder_date_rep(r.date_rep))
        except ValueError:
            # unreadable dates are still plotted, labelled as received
            labels.append(r.date_rep)
        cases.append(r.cases)
        deaths.append(r.deaths)
    return labels, cases, deaths


def _area_trace(key: str, x: list[str], y: list[int]) -> go.Scatter:
    name, color, fill = _SERIES_STYLE[key]
    return go.Scatter(
        x=x,
        y=y,
        name=name,
        mode="lines",
        line=dict(color=color, width=1.5, shape="spline", smoothing=0.4),
        fill="tozeroy",
        fillcolor=fill,
        hovertemplate=f"%{{x}}<br>{name}: %{{y:,}}<extra></extra>",
    )


def build_cases_deaths_figure(records: Iterable[Record]) -> Optional[go.Figure]:
    """
    Cases and deaths over the whole filtered list (not one page).
    Returns None when there is nothing to draw; callers keep whatever figure
    they showed before.
    """
    records = list(records)
    if not records:
        logger.error("No data available for rendering the chart.")
        return None

    labels, cases, deaths = chart_series(records)
    logger.debug("Rendering chart with %d points", len(labels))

    # deaths added last so it is drawn over cases
    fig = go.Figure([
        _area_trace("cases", labels, cases),
        _area_trace("deaths", labels, deaths),
    ])
    fig.update_layout(
        width=CHART_WIDTH,
        height=CHART_HEIGHT,
        autosize=False,
        legend=dict(orientation="h", x=0.5, xanchor="center", y=1.08, font=dict(family="Arial", size=12)),
        margin=dict(l=40, r=30, t=60, b=40),
    )
    # labels are plotted in record order, like category ticks
    fig.update_xaxes(
        type="category",
        title=dict(text="Period", font=_TITLE_FONT),
        tickfont=_TICK_FONT,
    )
    fig.update_yaxes(
        title=dict(text="Cases", font=_TITLE_FONT),
        tickfont=_TICK_FONT,
        rangemode="tozero",
    )
    return fig
