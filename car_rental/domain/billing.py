"""
Billing
=======

Pure functions for availability and rental charges. Nothing here is
stored: every value is recomputed from timestamps, unit counts and the
car's price when it is read.
"""
import math
from datetime import datetime, timedelta
from typing import Iterable, Optional, Tuple

SECONDS_PER_DAY = timedelta(days=1).total_seconds()


def available_units(units: int, open_rentals: int) -> int:
    """Units left to rent, floored at zero."""
    return max(0, units - open_rentals)


def duration_days(start: datetime, end: Optional[datetime], as_of: datetime) -> int:
    """
    Number of started days between the rental start and its end.

    Args:
        start: Rental start
        end: Rental end, or None while the rental is open
        as_of: Reference time used for open rentals

    Returns:
        ceil((end or as_of) - start) in days; 0 for a zero-length span
    """
    stop = end if end is not None else as_of
    elapsed = (stop - start).total_seconds()
    if elapsed <= 0:
        return 0
    return math.ceil(elapsed / SECONDS_PER_DAY)


def rental_cost(price_per_day: float, days: int) -> float:
    return price_per_day * days


def outstanding_balance(open_rental_charges: Iterable[Tuple[float, int]]) -> float:
    """
    Sum the charges of a customer's open rentals.

    Args:
        open_rental_charges: (price_per_day, duration_days) per open rental
    """
    return sum(rental_cost(price, days) for price, days in open_rental_charges)
