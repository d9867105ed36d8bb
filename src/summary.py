"""Summary statistics over the lived_days column."""

from dataclasses import dataclass
import logging

import pandas as pd


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LifespanSummary:
    mean: int
    median: float
    mode: list[float] | None  # None when no value occurs more often than another
    max: float
    min: float
    standard_deviation: float
    count: int

    def mode_display(self) -> str:
        if self.mode is None:
            return "None"
        return ", ".join(f"{m:g}" for m in self.mode)

    def as_frame(self) -> pd.DataFrame:
        """One-row summary table, in the order the report prints it."""
        return pd.DataFrame(
            [
                {
                    "mean": self.mean,
                    "median": self.median,
                    "mode": self.mode_display(),
                    "max": self.max,
                    "min": self.min,
                    "standard_deviation": self.standard_deviation,
                }
            ]
        )


def compute_mode(values: pd.Series) -> list[float] | None:
    """
    Most frequent value(s), in ascending order.

    Returns None when every value occurs equally often, which for a set of
    distinct measurements means there is no mode worth reporting.
    """
    counts = values.value_counts()
    if counts.empty or counts.nunique() == 1:
        return None

    top = counts[counts == counts.max()].index
    return sorted(float(v) for v in top)


def summarize(lived_days: pd.Series) -> LifespanSummary:
    """
    Aggregate statistics over unrounded lived_days.

    mean is rounded to the nearest day and standard_deviation (sample,
    n - 1 denominator) to one decimal; median, max and min are exact.
    """
    values = pd.Series(lived_days, dtype=float).dropna()
    if values.empty:
        raise ValueError("Cannot summarize an empty lived_days column")

    summary = LifespanSummary(
        mean=int(round(values.mean())),
        median=float(values.median()),
        mode=compute_mode(values),
        max=float(values.max()),
        min=float(values.min()),
        standard_deviation=round(float(values.std(ddof=1)), 1),
        count=len(values),
    )
    logger.debug("Summary over %d values: %s", summary.count, summary)
    return summary
