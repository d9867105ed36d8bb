"""CSV loading, cleaning and date handling for the presidents dataset."""

from datetime import date, datetime
import logging
from pathlib import Path
import re

import pandas as pd

from models import PERSON_COLUMNS, SOURCE_COLUMNS


logger = logging.getLogger(__name__)

DATE_FORMAT = "%m/%d/%Y"

# "9/28/2021" inside free text such as "(accessed 9/28/2021)"
REFERENCE_DATE_PATTERN = re.compile(r"\b(\d{1,2})/(\d{1,2})/(\d{4})\b")


def normalize_column_name(column: str) -> str:
    """Map 'BIRTH.DATE' and ' Birth Date ' alike to 'BIRTH DATE'."""
    return " ".join(column.replace(".", " ").split()).upper()


def load_dataset(filepath: Path) -> pd.DataFrame:
    """
    Read the presidents CSV into a frame of raw string cells.

    Every cell is kept as text and empty cells stay empty strings, so the
    cleaner decides what counts as missing.

    Raises:
        FileNotFoundError: the file does not exist.
        pandas.errors.ParserError: the CSV structure is malformed.
        ValueError: a required column is missing from the header.
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise FileNotFoundError(f"Dataset not found: {filepath}")

    raw = pd.read_csv(filepath, dtype=str, keep_default_na=False)
    raw.columns = [normalize_column_name(c) for c in raw.columns]

    missing = [c for c in SOURCE_COLUMNS if c not in raw.columns]
    if missing:
        raise ValueError(f"{filepath} is missing required columns: {missing}")

    logger.debug("Loaded %d raw rows from %s", len(raw), filepath)
    return raw[list(SOURCE_COLUMNS)]


def parse_date_string(date_str: str | None) -> date | None:
    """
    Parse a 'month/day/year' string such as '2/22/1732'.

    Returns None for an empty cell. Anything else that does not parse is an
    error, since the dataset is expected to be well formed.
    """
    if date_str is None:
        return None

    s = date_str.strip()
    if not s:
        return None

    try:
        return datetime.strptime(s, DATE_FORMAT).date()
    except ValueError as e:
        raise ValueError(f"Unparseable date {date_str!r}, expected month/day/year") from e


def parse_reference_date(note: str | None) -> date | None:
    """Pull the first month/day/year date out of a citation string."""
    if not note:
        return None

    match = REFERENCE_DATE_PATTERN.search(note)
    if not match:
        return None

    month, day, year = (int(g) for g in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        logger.warning("Reference note holds an impossible date: %s", match.group(0))
        return None


def _empty_to_none(value: str) -> str | None:
    value = value.strip()
    return value or None


def _is_reference_row(row: pd.Series) -> bool:
    # The citation lives in the PRESIDENT column with every other cell empty
    return all(not str(row[c]).strip() for c in SOURCE_COLUMNS if c != "PRESIDENT")


def clean_dataset(raw: pd.DataFrame) -> tuple[pd.DataFrame, str | None]:
    """
    Turn raw rows into person rows.

    - Splits off the trailing reference row and returns its text.
    - Renames columns to name/birth_date/birth_place/death_date/death_place.
    - Parses dates; empty death dates and death places become None.

    Returns:
        (people, reference_note); reference_note is None when the file has
        no trailing citation row.
    """
    reference_note: str | None = None
    if len(raw) and _is_reference_row(raw.iloc[-1]):
        reference_note = raw.iloc[-1]["PRESIDENT"].strip()
        raw = raw.iloc[:-1]

    people = raw.rename(columns=SOURCE_COLUMNS)[PERSON_COLUMNS].copy()
    people["name"] = people["name"].str.strip()
    people["birth_place"] = people["birth_place"].str.strip()

    for column in ("birth_date", "death_date"):
        parsed = []
        for idx, value in people[column].items():
            try:
                parsed.append(parse_date_string(value))
            except ValueError as e:
                raise ValueError(f"Row {idx} ({people.at[idx, 'name']}): {e}") from e
        people[column] = pd.Series(parsed, index=people.index, dtype=object)

    if people["birth_date"].isna().any():
        names = people.loc[people["birth_date"].isna(), "name"].tolist()
        raise ValueError(f"Missing birth date for: {names}")

    people["death_place"] = pd.Series(
        [_empty_to_none(v) for v in people["death_place"]], index=people.index, dtype=object
    )

    people = people.reset_index(drop=True)
    logger.debug("Cleaned %d person rows", len(people))
    return people, reference_note
