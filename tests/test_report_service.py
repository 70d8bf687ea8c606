"""Unit tests for report rendering."""

import json

from acmg_scorer.services.acmg_classifier import ACMGClassifier
from acmg_scorer.services.report_service import SEPARATOR, format_json, format_report


class TestFormatReport:
    """Tests for the plain-text report."""

    def setup_method(self):
        self.classifier = ACMGClassifier()

    def test_example_report(self):
        report = format_report(self.classifier.classify_evidence("PVS1, PM2_Supporting"))
        lines = report.splitlines()
        assert lines[0].startswith("PVS1: 8 'Null variant")
        assert lines[1].startswith("PM2_Supporting: 1 'Absent from controls")
        assert lines[2] == SEPARATOR
        assert lines[3] == "Classification: LikelyPathogenic"
        assert lines[4] == "ACMG Score: 9"
        assert lines[5] == "Post Prob Path: 0.988"

    def test_short_codes_are_right_aligned(self):
        lines = format_report(self.classifier.classify_evidence("PM2 BA1")).splitlines()
        assert lines[0].startswith(" PM2: 2 '")
        assert lines[1].startswith(" BA1:-8 '")
        assert lines[1].endswith("Exome Aggregation Consortium'")

    def test_summary_for_benign(self):
        lines = format_report(self.classifier.classify_evidence("BA1, BS1")).splitlines()
        assert lines[-3:] == [
            "Classification: Benign",
            "ACMG Score: -12",
            "Post Prob Path: 0.000",
        ]


class TestFormatJson:
    """Tests for the JSON rendering."""

    def test_round_trips_fields(self):
        result = ACMGClassifier().classify_evidence("PVS1 PM1")
        payload = json.loads(format_json(result))
        assert payload["score"] == 10
        assert payload["classification"] == "Pathogenic"
        assert [row["code"] for row in payload["evidence"]] == ["PVS1", "PM1"]
        assert 0.99 < payload["posterior_probability"] < 1.0
