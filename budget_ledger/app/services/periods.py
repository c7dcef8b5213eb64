from __future__ import annotations

from datetime import datetime


def month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    """Return ``[start, end)`` covering calendar ``month`` of ``year``.

    ``start`` is the first instant of the month and ``end`` the first instant
    of the following one, so December closes on January 1st of ``year + 1``.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month {month}, expected 1-12")

    start = datetime(year, month, 1)
    if month == 12:
        end = datetime(year + 1, 1, 1)
    else:
        end = datetime(year, month + 1, 1)
    return start, end
