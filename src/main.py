"""
1) Load the presidents CSV into memory.
2) Clean it: split off the citation row, rename columns, parse dates.
3) Enrich each record with years, months and days lived.
4) Validate the records.
5) Rank the longest and shortest lives, and summarize days lived.
6) Plot the distribution of days lived.
7) Print the tables and a narrative report.
"""

from dataclasses import dataclass
import logging

import pandas as pd

from config import AnalysisConfig
from enrichment import enrich_dataset
from parsing import clean_dataset, load_dataset, parse_reference_date
from plotting import plot_lifespan_distribution
from ranking import rank_longest, rank_shortest
from report import build_narrative, build_report
from summary import LifespanSummary, summarize
from validation import validate_records


logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    people: pd.DataFrame
    longest: pd.DataFrame
    shortest: pd.DataFrame
    summary: LifespanSummary
    narrative: str
    report: str
    warnings: list[str]
    reference_note: str | None


def run_pipeline(config: AnalysisConfig, plot: bool = True) -> PipelineResult:
    print(f"Loading dataset: {config.data_path}")
    raw = load_dataset(config.data_path)

    print("Cleaning data...")
    people, reference_note = clean_dataset(raw)
    print(f"  Found {len(people)} presidents")

    reference_date = parse_reference_date(reference_note)
    if reference_date and reference_date != config.as_of:
        logger.warning(
            "Dataset citation is dated %s but lifespans run to %s", reference_date, config.as_of
        )

    print(f"Computing lifespans as of {config.as_of:%m/%d/%Y}...")
    people = enrich_dataset(people, config.as_of)

    print("Validating records...")
    warnings = validate_records(people, config.as_of)
    if warnings:
        print(f"  Found {len(warnings)} validation warnings:")
        for w in warnings[:10]:  # Show first 10 warnings
            print(f"    - {w}")
        if len(warnings) > 10:
            print(f"    ... and {len(warnings) - 10} more")
    else:
        print("  No validation issues found")

    longest = rank_longest(people, config.top)
    shortest = rank_shortest(people, config.top)
    summary = summarize(people["lived_days"])

    if plot:
        plot_path = None if config.show_plot else config.plot_path
        print(f"Plotting distribution{f' to: {plot_path}' if plot_path else ''}")
        plot_lifespan_distribution(people["lived_days"], plot_path)

    return PipelineResult(
        people=people,
        longest=longest,
        shortest=shortest,
        summary=summary,
        narrative=build_narrative(summary, people),
        report=build_report(people, summary, config.top, reference_note),
        warnings=warnings,
        reference_note=reference_note,
    )


def main(argv: list[str] | None = None):
    config = AnalysisConfig.from_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    result = run_pipeline(config)

    print()
    print(result.report)
    print("Done!")


if __name__ == "__main__":
    main()
