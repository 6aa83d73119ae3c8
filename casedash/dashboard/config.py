import streamlit as st

PAGE_TITLE = "COVID-19 Cases & Deaths"


def set_page():
    st.set_page_config(page_title=PAGE_TITLE, layout="wide")


PAGE_SIZE = 20

# Country selector sentinel (value) and what the user sees for it
ALL_COUNTRIES = "All"
ALL_COUNTRIES_LABEL = "All Countries"

NO_DATA_MESSAGE = "No data found for the selected filters."

TABLE_COLUMNS = ("Country", "Date", "Cases", "Deaths")

CHART_WIDTH = 1200
CHART_HEIGHT = 700
