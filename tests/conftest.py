"""
Pytest fixtures shared by the lifespan analysis tests.
"""
from datetime import date
from pathlib import Path

import matplotlib
import pandas as pd
import pytest

matplotlib.use("Agg")

from enrichment import enrich_dataset
from parsing import clean_dataset, load_dataset


DATA_PATH = Path(__file__).parent.parent / "data" / "presidents.csv"
AS_OF = date(2021, 9, 28)


@pytest.fixture
def data_path() -> Path:
    return DATA_PATH


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def raw_presidents() -> pd.DataFrame:
    return load_dataset(DATA_PATH)


@pytest.fixture
def cleaned_presidents(raw_presidents):
    """(people, reference_note) for the shipped dataset."""
    return clean_dataset(raw_presidents)


@pytest.fixture
def presidents(cleaned_presidents) -> pd.DataFrame:
    """The shipped dataset, cleaned and enriched as of AS_OF."""
    people, _ = cleaned_presidents
    return enrich_dataset(people, AS_OF)


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temp file and return its path."""
    def _write(text: str, name: str = "people.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def small_people():
    """Three cleaned records, one still living."""
    return pd.DataFrame(
        {
            "name": ["Alpha", "Beta", "Gamma"],
            "birth_date": [date(1900, 1, 1), date(1950, 6, 15), date(1920, 3, 1)],
            "birth_place": ["A", "B", "C"],
            "death_date": pd.Series([date(1980, 1, 1), None, date(1930, 3, 1)], dtype=object),
            "death_place": pd.Series(["X", None, "Z"], dtype=object),
        }
    )
