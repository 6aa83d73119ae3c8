from __future__ import annotations

import os
import sys

import streamlit as st

# project root is importable (kept for `streamlit run casedash/dashboard/dashboard.py`)
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from casedash.core.logging_setup import configure_logging
from casedash.dashboard.charts import build_cases_deaths_figure
from casedash.dashboard.config import ALL_COUNTRIES, set_page
from casedash.dashboard.controller import (
    apply_filters,
    change_page,
    initial_load,
    toggle_view,
)
from casedash.dashboard.countries import country_label
from casedash.dashboard.data_access import fetch_records
from casedash.dashboard.filters import normalize_filters
from casedash.dashboard.render import (
    KEY_PREFIX,
    render_chart,
    render_no_data,
    render_pagination,
    render_table,
    render_tabs,
)
from casedash.dashboard.state import View
from casedash.dashboard.styles import inject as inject_styles

configure_logging()

# Page + styles
set_page()
inject_styles()

# Session defaults
st.session_state.setdefault("view_state", None)
st.session_state.setdefault("chart_fig", None)
st.session_state.setdefault("country_options", [ALL_COUNTRIES])

# Filters
f1, f2, f3, f4 = st.columns([1.5, 1.5, 2, 0.8])
with f1:
    start_d = st.date_input("Start date", value=None, key=f"{KEY_PREFIX}_start_date")
with f2:
    end_d = st.date_input("End date", value=None, key=f"{KEY_PREFIX}_end_date")
with f3:
    country = st.selectbox(
        "Country",
        options=st.session_state.country_options,
        format_func=country_label,
        key=f"{KEY_PREFIX}_country",
    )
with f4:
    st.markdown("<div style='height:28px'></div>", unsafe_allow_html=True)
    apply_clicked = st.button("Apply Filters", key=f"{KEY_PREFIX}_apply_btn")

# read fresh on every run; handlers below decide whether to use them
criteria = normalize_filters({"start_date": start_d, "end_date": end_d, "country": country})

# Initial load: countries first, then page 1 of the table
if st.session_state.view_state is None:
    options, state = initial_load(criteria, fetch_records)
    st.session_state.country_options = options
    st.session_state.view_state = state
    st.rerun()

state = st.session_state.view_state

if apply_clicked:
    state = apply_filters(state, criteria, fetch_records, reset_page=True)
    st.session_state.view_state = state

# Tabs
clicked_view = render_tabs(state.view)
if clicked_view is not None:
    state = toggle_view(state, clicked_view, criteria, fetch_records)
    if state.view is View.CHART:
        fig = build_cases_deaths_figure(state.filtered)
        if fig is not None:
            st.session_state.chart_fig = fig
    st.session_state.view_state = state
    st.rerun()

# Content
if state.view is View.CHART:
    render_chart(st.session_state.chart_fig)
elif not state.filtered:
    render_no_data()
else:
    render_table(state)
    delta = render_pagination(state)
    if delta is not None:
        st.session_state.view_state = change_page(state, delta, criteria, fetch_records)
        st.rerun()
