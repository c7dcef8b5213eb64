from datetime import datetime

import pytest

from ..services import month_bounds


def test_month_bounds_mid_year() -> None:
    assert month_bounds(2022, 7) == (datetime(2022, 7, 1), datetime(2022, 8, 1))


def test_month_bounds_january() -> None:
    assert month_bounds(2023, 1) == (datetime(2023, 1, 1), datetime(2023, 2, 1))


def test_month_bounds_december_rolls_over_year() -> None:
    assert month_bounds(2022, 12) == (datetime(2022, 12, 1), datetime(2023, 1, 1))


@pytest.mark.parametrize("month", [0, 13, -1])
def test_month_bounds_rejects_invalid_month(month: int) -> None:
    with pytest.raises(ValueError, match="Invalid month"):
        month_bounds(2022, month)
