"""Date and timestamp helpers."""

from datetime import date, datetime
from typing import Optional


def now() -> str:
    """Compact local timestamp for directory names (e.g. "20251114_123456")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def today() -> date:
    """Current local date."""
    return date.today()


def years_before(years: int, reference: Optional[date] = None) -> int:
    """
    Calendar year that lies `years` years before the reference date.

    Args:
        years: Offset in years
        reference: Date to count back from (defaults to today)

    Example:
        >>> years_before(3, date(2025, 6, 1))
        2022
    """
    reference = reference or today()
    return reference.year - years
