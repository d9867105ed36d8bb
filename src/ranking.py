"""Top-n longest and shortest lifespan views."""

import pandas as pd


RANK_COLUMNS = ["name", "year_of_birth", "lived_years", "lived_months", "lived_days"]


def _ranked(people: pd.DataFrame, n: int, ascending: bool) -> pd.DataFrame:
    # mergesort is stable, so equal lifespans keep their input order
    ordered = people.sort_values("lived_days", ascending=ascending, kind="mergesort")
    return ordered[RANK_COLUMNS].head(n).reset_index(drop=True)


def rank_longest(people: pd.DataFrame, n: int = 10) -> pd.DataFrame:
    """The n longest-lived people, longest first, with unrounded durations."""
    return _ranked(people, n, ascending=False)


def rank_shortest(people: pd.DataFrame, n: int = 10) -> pd.DataFrame:
    """The n shortest-lived people, shortest first, with unrounded durations."""
    return _ranked(people, n, ascending=True)


def round_for_display(view: pd.DataFrame) -> pd.DataFrame:
    """
    Round a ranked view for presentation.

    lived_years to one decimal, lived_months to a whole month, lived_days to
    the nearest ten. Works on a copy; the view passed in is left unrounded.
    """
    display = view.copy()
    display["lived_years"] = display["lived_years"].round(1)
    display["lived_months"] = display["lived_months"].round(0).astype(int)
    display["lived_days"] = (display["lived_days"].round(-1)).astype(int)
    return display
