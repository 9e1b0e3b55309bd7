"""Date manipulation utilities"""

from datetime import date
from typing import List, Sequence

MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def trailing_month_starts(end: date, months: int) -> List[date]:
    """First day of each of the `months` calendar months ending at `end`, oldest first"""
    starts = []
    for offset in range(months - 1, -1, -1):
        # Month arithmetic on a zero-based month index
        index = end.year * 12 + (end.month - 1) - offset
        starts.append(date(index // 12, index % 12 + 1, 1))
    return starts


def shift_months(day: date, months: int, day_of_month: int = 1) -> date:
    """Move `months` calendar months from `day` (negative goes back), landing on `day_of_month`"""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, day_of_month)


def month_label(day: date) -> str:
    """Short display label, e.g. 'Jan 24'; English regardless of locale"""
    return f"{MONTH_ABBREVIATIONS[day.month - 1]} {day.year % 100:02d}"


def mean_interval_days(dates: Sequence[date]) -> float:
    """Mean gap in days between consecutive dates (expects ascending order, at least two dates)"""
    gaps = [(later - earlier).days for earlier, later in zip(dates, dates[1:])]
    return sum(gaps) / len(gaps)
