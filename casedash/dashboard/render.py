"""Streamlit side of the dashboard: draws a ViewState and reports clicks."""

from __future__ import annotations

from typing import Optional

import plotly.graph_objects as go
import streamlit as st

from casedash.dashboard.config import NO_DATA_MESSAGE
from casedash.dashboard.controller import tab_button_types
from casedash.dashboard.pagination import pagination_controls
from casedash.dashboard.state import View, ViewState
from casedash.dashboard.tables import build_table_frame

KEY_PREFIX = "casedash"

_TAB_LABELS = {View.TABLE: "Table", View.CHART: "Chart"}


def render_tabs(active: View) -> Optional[View]:
    """Two tab buttons; returns the one clicked this run, if any."""
    types = tab_button_types(active)
    clicked = None
    cols = st.columns([1, 1, 8])
    for col, view in zip(cols, View):
        with col:
            if st.button(_TAB_LABELS[view], type=types[view], key=f"{KEY_PREFIX}_tab_{view.value}"):
                clicked = view
    return clicked


def render_table(state: ViewState) -> None:
    st.dataframe(build_table_frame(state), hide_index=True, width="stretch")


def render_no_data() -> None:
    st.info(NO_DATA_MESSAGE)


def render_pagination(state: ViewState) -> Optional[int]:
    """Prev / 'Page X of Y' / Next; returns -1 or +1 when a button was clicked."""
    controls = pagination_controls(state.page, len(state.filtered), state.page_size)
    delta = None
    _, c_prev, c_label, c_next, _ = st.columns([3, 1, 2, 1, 3])
    with c_prev:
        if st.button("Prev", disabled=controls.prev_disabled, key=f"{KEY_PREFIX}_prev"):
            delta = -1
    with c_label:
        st.markdown(f"<div class='page-indicator'>{controls.label}</div>", unsafe_allow_html=True)
    with c_next:
        if st.button("Next", disabled=controls.next_disabled, key=f"{KEY_PREFIX}_next"):
            delta = 1
    return delta


def render_chart(fig: Optional[go.Figure]) -> None:
    if fig is None:
        return
    st.plotly_chart(fig, width="content", theme=None)
