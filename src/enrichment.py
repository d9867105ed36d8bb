"""Derived lifespan fields: year of birth and years/months/days lived."""

import calendar
from datetime import date
import logging

import pandas as pd


logger = logging.getLogger(__name__)


def add_years(d: date, years: int) -> date:
    """Add whole years, clamping Feb 29 to Feb 28 in non-leap years."""
    try:
        return date(d.year + years, d.month, d.day)
    except ValueError:
        return date(d.year + years, d.month, 28)


def add_months(d: date, months: int) -> date:
    """Add whole calendar months, clamping the day to the target month's length."""
    years, month_index = divmod(d.month - 1 + months, 12)
    year = d.year + years
    month = month_index + 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _check_interval(start: date, end: date) -> None:
    if end < start:
        raise ValueError(f"Interval ends ({end}) before it starts ({start})")


def years_between(start: date, end: date) -> float:
    """
    Calendar years from start to end, as a fraction.

    Whole years are counted on anniversaries of start; the remainder is the
    share of the following anniversary year that has elapsed, so a leap year
    weighs 366 days and any other year 365.
    """
    _check_interval(start, end)

    whole = end.year - start.year
    if add_years(start, whole) > end:
        whole -= 1

    anchor = add_years(start, whole)
    span = (add_years(start, whole + 1) - anchor).days
    return whole + (end - anchor).days / span


def months_between(start: date, end: date) -> float:
    """Calendar months from start to end, as a fraction; same scheme as years_between."""
    _check_interval(start, end)

    whole = (end.year - start.year) * 12 + (end.month - start.month)
    if add_months(start, whole) > end:
        whole -= 1

    anchor = add_months(start, whole)
    span = (add_months(start, whole + 1) - anchor).days
    return whole + (end - anchor).days / span


def days_between(start: date, end: date) -> float:
    _check_interval(start, end)
    return float((end - start).days)


def enrich_dataset(people: pd.DataFrame, as_of: date) -> pd.DataFrame:
    """
    Return a copy of the cleaned frame with derived lifespan columns.

    The end of each lifespan is the death date, or `as_of` for anyone still
    living. Adds year_of_birth, lived_years, lived_months and lived_days; the
    three durations measure the same interval in different units.

    Raises:
        ValueError: an end date falls before the matching birth date.
    """
    enriched = people.copy()

    end_dates = [d if d is not None and not pd.isna(d) else as_of for d in enriched["death_date"]]

    years, months, days = [], [], []
    for name, birth, end in zip(enriched["name"], enriched["birth_date"], end_dates):
        try:
            years.append(years_between(birth, end))
            months.append(months_between(birth, end))
            days.append(days_between(birth, end))
        except ValueError as e:
            raise ValueError(f"{name}: {e}") from e

    enriched["year_of_birth"] = [b.year for b in enriched["birth_date"]]
    enriched["lived_years"] = years
    enriched["lived_months"] = months
    enriched["lived_days"] = days

    living = sum(1 for d in enriched["death_date"] if d is None or pd.isna(d))
    logger.debug("Enriched %d records (%d living as of %s)", len(enriched), living, as_of)
    return enriched
