from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from rental_desk.exceptions import InvalidDateRangeError

CENTS = Decimal("0.01")


def rental_days(start: date, end: date) -> int:
    return (end - start).days


def validate_date_range(start: date, end: date) -> None:
    if end < start:
        raise InvalidDateRangeError(
            f"Error: end date {end.isoformat()} is before start date {start.isoformat()}"
        )


def calculate_rental_cost(daily_rate: Decimal, start: date, end: date) -> Decimal:
    """Whole days between start and end times the daily rate, in cents.

    A same-day rental costs nothing. Callers validate the range first
    with :func:`validate_date_range`.
    """
    cost = Decimal(rental_days(start, end)) * Decimal(daily_rate)
    return cost.quantize(CENTS, rounding=ROUND_HALF_UP)
