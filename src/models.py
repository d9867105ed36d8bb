"""Data classes and column names for the presidents dataset."""

from dataclasses import dataclass
from datetime import date

import pandas as pd


# Source header as published, mapped to our column names.
# Dotted spellings appear when the file has passed through R's read.csv.
SOURCE_COLUMNS = {
    "PRESIDENT": "name",
    "BIRTH DATE": "birth_date",
    "BIRTH PLACE": "birth_place",
    "DEATH DATE": "death_date",
    "LOCATION OF DEATH": "death_place",
}

PERSON_COLUMNS = list(SOURCE_COLUMNS.values())
DERIVED_COLUMNS = ["year_of_birth", "lived_years", "lived_months", "lived_days"]


@dataclass(frozen=True)
class PersonRecord:
    name: str
    birth_date: date
    birth_place: str
    death_date: date | None  # None while still living at the as-of date
    death_place: str | None
    year_of_birth: int
    lived_years: float
    lived_months: float
    lived_days: float

    @property
    def is_living(self) -> bool:
        return self.death_date is None


def _missing_to_none(value):
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    return value


def records_from_frame(people: pd.DataFrame) -> list[PersonRecord]:
    """Build PersonRecord objects from an enriched frame, in row order."""
    missing = [c for c in PERSON_COLUMNS + DERIVED_COLUMNS if c not in people.columns]
    if missing:
        raise ValueError(f"Frame is not enriched, missing columns: {missing}")

    return [
        PersonRecord(
            name=row.name,
            birth_date=row.birth_date,
            birth_place=row.birth_place,
            death_date=_missing_to_none(row.death_date),
            death_place=_missing_to_none(row.death_place),
            year_of_birth=int(row.year_of_birth),
            lived_years=float(row.lived_years),
            lived_months=float(row.lived_months),
            lived_days=float(row.lived_days),
        )
        for row in people[PERSON_COLUMNS + DERIVED_COLUMNS].itertuples(index=False)
    ]
