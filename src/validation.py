"""Sanity checks for cleaned and enriched person records."""

from datetime import date

import pandas as pd


MAX_PLAUSIBLE_YEARS = 120


def _present(value) -> bool:
    return value is not None and not pd.isna(value)


def validate_records(people: pd.DataFrame, as_of: date) -> list[str]:
    """
    Validate person records for:
    - Death before birth
    - Birth after the as-of date
    - Death date and death place not agreeing on whether someone has died
    - Implausibly long lifespans (only checked once lived_years exists)
    - Duplicate names

    Returns a list of warning messages.
    """
    warnings: list[str] = []

    for row in people.itertuples(index=False):
        birth = row.birth_date
        death = row.death_date if _present(row.death_date) else None
        place = row.death_place if _present(row.death_place) else None

        if death and death < birth:
            warnings.append(f"Impossible: {row.name} died before being born")

        if birth > as_of:
            warnings.append(f"Impossible: {row.name} born after the as-of date {as_of}")

        if death and place is None:
            warnings.append(f"Incomplete: {row.name} has a death date but no death place")
        elif place and death is None:
            warnings.append(f"Incomplete: {row.name} has a death place but no death date")

        lived_years = getattr(row, "lived_years", None)
        if lived_years is not None and lived_years > MAX_PLAUSIBLE_YEARS:
            warnings.append(
                f"Suspicious: {row.name} lived more than {MAX_PLAUSIBLE_YEARS} years "
                f"({lived_years:.1f})"
            )

    duplicated = people.loc[people["name"].duplicated(), "name"].unique()
    for name in duplicated:
        warnings.append(f"Duplicate: {name} appears more than once")

    return warnings
