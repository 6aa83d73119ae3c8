# casedash/dashboard/styles.py
import streamlit as st

from casedash.core.config import API_URL
from casedash.dashboard.config import PAGE_TITLE

# keyed widgets get a `st-key-<key>` class on their container
CSS = """
<style>
.st-key-casedash_tab_table button, .st-key-casedash_tab_chart button {
    width:100%; border-radius:8px 8px 0 0; border-bottom-width:3px;
}
.st-key-casedash_prev button, .st-key-casedash_next button {width:100%;}
.page-indicator {text-align:center; padding-top:6px; font-variant-numeric:tabular-nums;}
</style>
"""

def inject():
    st.markdown(CSS, unsafe_allow_html=True)
    st.title(PAGE_TITLE)
    st.caption(f"Source: {API_URL}")
