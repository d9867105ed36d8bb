"""Text rendering of the ranked tables, summary table and narrative."""

import pandas as pd

from ranking import rank_longest, rank_shortest, round_for_display
from summary import LifespanSummary


def round_to_hundred(value: float) -> int:
    return int(round(value, -2))


def format_days(value: float) -> str:
    """'26,400' for 26364; prose figures are rounded to the nearest hundred."""
    return f"{round_to_hundred(value):,}"


def format_table(view: pd.DataFrame, ranked: bool = True) -> str:
    """Plain-text table. Ranked views get a 1-based rank index."""
    if not ranked:
        return view.to_string(index=False)

    display = view.copy()
    display.index = pd.RangeIndex(1, len(display) + 1, name="rank")
    return display.to_string()


def _is_living(people: pd.DataFrame, name: str) -> bool:
    death = people.loc[people["name"] == name, "death_date"].iloc[0]
    return death is None or pd.isna(death)


def build_narrative(summary: LifespanSummary, people: pd.DataFrame) -> str:
    """
    Prose summary of the lifespan statistics.

    Figures are re-rounded to the nearest hundred days for readability,
    independently of the rounding the summary table uses. The longest-lived
    president "continues to add to" the record if still living, and "holds"
    it otherwise.
    """
    longest = rank_longest(people, 1).iloc[0]
    shortest = rank_shortest(people, 1).iloc[0]

    verb = "continues to add to" if _is_living(people, longest["name"]) else "holds"

    return (
        f"On average, a president lives around {format_days(summary.mean)} days, "
        f"with a standard deviation of about {format_days(summary.standard_deviation)} days. "
        f"Half of all presidents lived fewer than about {format_days(summary.median)} days. "
        f"{longest['name']} {verb} the record for the longest life, "
        f"at around {format_days(summary.max)} days, while {shortest['name']} "
        f"had the shortest, at around {format_days(summary.min)} days."
    )


def build_report(
    people: pd.DataFrame,
    summary: LifespanSummary,
    top: int = 10,
    reference_note: str | None = None,
) -> str:
    """Assemble the full text report: both rankings, the summary and the narrative."""
    longest = round_for_display(rank_longest(people, top))
    shortest = round_for_display(rank_shortest(people, top))

    sections = [
        f"Top {top} longest-lived presidents",
        format_table(longest),
        "",
        f"Top {top} shortest-lived presidents",
        format_table(shortest),
        "",
        "Summary of days lived",
        format_table(summary.as_frame(), ranked=False),
        "",
        build_narrative(summary, people),
    ]
    if reference_note:
        sections += ["", reference_note]

    return "\n".join(sections)
