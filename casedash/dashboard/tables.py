from __future__ import annotations

import pandas as pd

from casedash.dashboard.config import TABLE_COLUMNS
from casedash.dashboard.pagination import page_slice
from casedash.dashboard.state import ViewState


def build_table_frame(state: ViewState) -> pd.DataFrame:
    """One page of the filtered records as a Country/Date/Cases/Deaths frame."""
    rows = page_slice(state.filtered, state.page, state.page_size)
    return pd.DataFrame(
        [(r.country, r.date_rep, r.cases, r.deaths) for r in rows],
        columns=list(TABLE_COLUMNS),
    )
