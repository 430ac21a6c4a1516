"""
Unit tests for GPA aggregation.

Tests for:
- Credit-weighted GPA with a partial score sheet
- Empty and all-excluded score sheets
- Idempotence
- Custom catalogs
"""

import pytest

from semester_gpa import Course, GpaAggregator, GpaReport, GradeMapper, compute_gpa


class TestComputeGpa:

    def test_first_three_courses(self, catalog):
        """PHY113=90, BMS112=80, BMS132=70 and nothing else."""
        scores = {"PHY113": "90", "BMS112": "80", "BMS132": "70"}
        report = compute_gpa(catalog, scores)

        assert report.total_credits == 5
        assert report.total_points == pytest.approx(15.4)
        assert report.gpa == pytest.approx(3.08)

    def test_blank_strings_match_missing_keys(self, catalog):
        explicit = {c.code: "" for c in catalog}
        explicit.update({"PHY113": "90", "BMS112": "80", "BMS132": "70"})
        sparse = {"PHY113": "90", "BMS112": "80", "BMS132": "70"}
        assert compute_gpa(catalog, explicit) == compute_gpa(catalog, sparse)

    def test_full_sheet(self, catalog):
        scores = {
            "PHY113": "98",   # A+ 4.0 x2
            "BMS112": "85",   # B+ 3.3 x2
            "BMS132": "59",   # F  0.0 x1
            "BMS122": "74",   # C+ 2.3 x2
            "BDS011": "93",   # A  4.0 x4
            "BDS021": "61",   # D  1.0 x3
            "UC1": "100",     # A+ 4.0 x2
            "UC2": "67",      # C- 1.7 x2
        }
        report = compute_gpa(catalog, scores)

        assert report.total_credits == 18
        assert report.total_points == pytest.approx(8.0 + 6.6 + 0.0 + 4.6 + 16.0 + 3.0 + 8.0 + 3.4)
        assert report.gpa == pytest.approx(49.6 / 18)

    def test_failing_course_still_counts_credits(self, catalog):
        report = compute_gpa(catalog, {"BDS011": "10"})
        assert report.total_credits == 4
        assert report.total_points == 0.0
        assert report.gpa == 0.0

    def test_empty_sheet(self, catalog):
        report = compute_gpa(catalog, {})
        assert report == GpaReport(gpa=0.0, total_credits=0, total_points=0.0)

    def test_all_excluded_equals_empty(self, catalog):
        junk = ["-1", "101", "abc", "", None, "-", "200", "x90"]
        scores = {course.code: value for course, value in zip(catalog, junk)}
        assert compute_gpa(catalog, scores) == compute_gpa(catalog, {})

    def test_idempotent(self, catalog):
        scores = {"PHY113": "91", "UC2": "77.5"}
        assert compute_gpa(catalog, scores) == compute_gpa(catalog, scores)

    def test_does_not_mutate_scores(self, catalog):
        scores = {"PHY113": "91"}
        compute_gpa(catalog, scores)
        assert scores == {"PHY113": "91"}

    def test_unknown_codes_in_scores_are_ignored(self, catalog):
        assert compute_gpa(catalog, {"XYZ999": "100"}).total_credits == 0

    def test_strict_mode(self, catalog):
        scores = {"PHY113": "90abc"}
        assert compute_gpa(catalog, scores).total_credits == 2
        assert compute_gpa(catalog, scores, strict=True).total_credits == 0


class TestGpaAggregator:

    def test_custom_catalog(self):
        catalog = (Course("X1", "One", 3), Course("X2", "Two", 1))
        report = GpaAggregator().compute(catalog, {"X1": "95", "X2": "60"})
        assert report.total_credits == 4
        assert report.gpa == pytest.approx((4.0 * 3 + 1.0 * 1) / 4)

    def test_default_mapper_when_none_given(self):
        aggregator = GpaAggregator(None)
        assert isinstance(aggregator.mapper, GradeMapper)
        assert aggregator.mapper.strict is False

    def test_uses_given_mapper(self):
        catalog = (Course("X1", "One", 3),)
        aggregator = GpaAggregator(GradeMapper(strict=True))
        assert aggregator.compute(catalog, {"X1": "95 pts"}).total_credits == 0
