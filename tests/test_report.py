"""
Tests for the narrative and the text report.
"""
from datetime import date

import pandas as pd

from enrichment import enrich_dataset
from report import build_narrative, build_report, format_days, format_table, round_to_hundred
from ranking import rank_longest
from summary import summarize


class TestFormatting:
    """Tests for the number and table formatting helpers."""

    def test_round_to_hundred(self):
        assert round_to_hundred(26364) == 26400
        assert round_to_hundred(4564.0) == 4600
        assert round_to_hundred(16978.0) == 17000

    def test_format_days(self):
        assert format_days(35426.0) == "35,400"

    def test_ranked_table_starts_at_one(self, presidents):
        text = format_table(rank_longest(presidents, 3))
        lines = text.splitlines()
        assert lines[0].split()[0] == "name"
        assert lines[1].split()[0] == "rank"
        assert lines[2].split()[:3] == ["1", "Jimmy", "Carter"]

    def test_unranked_table(self):
        text = format_table(pd.DataFrame({"mean": [1]}), ranked=False)
        assert text.split() == ["mean", "1"]


class TestNarrative:
    """Tests for build_narrative."""

    def test_presidents(self, presidents):
        text = build_narrative(summarize(presidents["lived_days"]), presidents)
        assert "around 26,400 days" in text
        assert "about 4,600 days" in text
        assert "about 26,200 days" in text
        assert "Jimmy Carter continues to add to the record" in text
        assert "around 35,400 days" in text
        assert "John F. Kennedy had the shortest, at around 17,000 days" in text

    def test_dead_record_holder_holds(self, small_people):
        people = enrich_dataset(small_people, date(1960, 1, 1))
        text = build_narrative(summarize(people["lived_days"]), people)
        assert "Alpha holds the record" in text
        assert "continues to add to" not in text
        assert "Beta had the shortest" in text

    def test_living_record_holder(self, small_people):
        people = enrich_dataset(small_people, date(2040, 1, 1))
        text = build_narrative(summarize(people["lived_days"]), people)
        assert "Beta continues to add to the record" in text


class TestBuildReport:
    """Tests for build_report."""

    def test_sections(self, presidents):
        summary = summarize(presidents["lived_days"])
        text = build_report(presidents, summary, reference_note="Reference: somewhere")
        assert "Top 10 longest-lived presidents" in text
        assert "Top 10 shortest-lived presidents" in text
        assert "Summary of days lived" in text
        assert build_narrative(summary, presidents) in text
        assert text.endswith("Reference: somewhere")

    def test_display_rounding_in_tables(self, presidents):
        text = build_report(presidents, summarize(presidents["lived_days"]))
        carter = next(line for line in text.splitlines() if "Jimmy Carter" in line)
        assert carter.split()[-1] == "35430"
        assert carter.split()[-3] == "97.0"

    def test_idempotent(self, presidents):
        summary = summarize(presidents["lived_days"])
        assert build_report(presidents, summary) == build_report(presidents, summary)
