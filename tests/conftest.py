from __future__ import annotations

import pytest

from helpers import make_record


@pytest.fixture
def mixed_records():
    return (
        make_record("Italy", "03/01/2020", 10, 1),
        make_record("Spain", "03/01/2020", 20, 2),
        make_record("Italy", "02/01/2020", 30, 3),
        make_record("France", "02/01/2020", 40, 4),
        make_record("Italy", "01/01/2020", 50, 5),
        make_record("Spain", "31/12/2019", 60, 6),
    )


@pytest.fixture
def forty_five_records():
    return tuple(
        make_record("Country%d" % (i % 3), "%02d/01/2020" % (i % 28 + 1), i, i // 10)
        for i in range(45)
    )
