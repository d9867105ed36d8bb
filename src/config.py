"""Run configuration: input/output paths and the as-of date."""

import argparse
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from parsing import parse_date_string


PROJECT_ROOT = Path(__file__).parent.parent

# Date the dataset was last checked; lifespans of living presidents end here
DEFAULT_AS_OF = date(2021, 9, 28)


@dataclass
class AnalysisConfig:
    data_path: Path = field(default_factory=lambda: PROJECT_ROOT / "data" / "presidents.csv")
    plot_path: Path = field(default_factory=lambda: PROJECT_ROOT / "lifespan_distribution.png")
    as_of: date = DEFAULT_AS_OF
    top: int = 10
    show_plot: bool = False
    verbose: bool = False

    def __post_init__(self):
        if self.top < 1:
            raise ValueError(f"top must be at least 1, got {self.top}")

    @classmethod
    def from_args(cls, argv: list[str] | None = None) -> "AnalysisConfig":
        defaults = cls()
        parser = argparse.ArgumentParser(
            description="Lifespan statistics for the presidents of the United States"
        )
        parser.add_argument("--data", type=Path, default=defaults.data_path, help="Input CSV")
        parser.add_argument(
            "--plot", type=Path, default=defaults.plot_path, help="Where to save the histogram"
        )
        parser.add_argument(
            "--as-of",
            type=parse_date_string,
            default=defaults.as_of,
            help="month/day/year end date for living presidents (default: %(default)s)",
        )
        parser.add_argument("--top", type=int, default=defaults.top, help="Rows per ranking")
        parser.add_argument(
            "--show", action="store_true", help="Display the plot instead of saving it"
        )
        parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
        args = parser.parse_args(argv)

        return cls(
            data_path=args.data,
            plot_path=args.plot,
            as_of=args.as_of,
            top=args.top,
            show_plot=args.show,
            verbose=args.verbose,
        )
