from casedash.dashboard.state import ViewState
from casedash.dashboard.tables import build_table_frame


def test_frame_has_fixed_columns(mixed_records):
    frame = build_table_frame(ViewState(filtered=mixed_records))
    assert list(frame.columns) == ["Country", "Date", "Cases", "Deaths"]
    assert frame.iloc[0].tolist() == ["Italy", "03/01/2020", 10, 1]


def test_frame_holds_requested_page(forty_five_records):
    frame = build_table_frame(ViewState(page=3, filtered=forty_five_records))
    assert len(frame) == 5
    assert frame["Cases"].tolist() == [r.cases for r in forty_five_records[40:]]


def test_empty_page_keeps_header():
    frame = build_table_frame(ViewState())
    assert frame.empty
    assert list(frame.columns) == ["Country", "Date", "Cases", "Deaths"]
