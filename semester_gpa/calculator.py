"""
GPA Calculator - Main Orchestrator.

This module contains the GpaCalculator class that connects the
calculation engines to the presentation layer.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m semester_gpa
"""

import logging

from .config import STRICT_SCORE_PARSING
from .data import DEFAULT_CATALOG, find_course
from .engines import GradeMapper, GpaAggregator, interpret
from .errors import UnknownCourseError
from .models import CourseEntry, GpaReport, GpaInterpretation, RawScore
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class GpaCalculator:
    """
    Main interface for the semester GPA calculator.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    This class owns the only mutable state in the system, the map of
    course code -> raw score the user has typed. On every query it:

    1. Takes a snapshot (copy) of that map
    2. Passes it to the pure engines (GradeMapper, GpaAggregator, interpret)
    3. Hands the results to the display when asked to show them

    The engines never see the live map, so nothing they compute depends on
    anything but the snapshot they were given.

    TO CHANGE THE UI:
    -----------------
    Pass a different display class, e.g. GpaCalculator(display=WebDisplay()).

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        calculator = GpaCalculator()
        calculator.set_score("PHY113", "90")
        calculator.set_score("BMS112", "80")
        report = calculator.report()      # GpaReport(gpa=3.35, total_credits=4, ...)
        calculator.reset()
    """

    def __init__(self, catalog=DEFAULT_CATALOG, strict: bool = STRICT_SCORE_PARSING,
                 display=None):
        self.catalog = tuple(catalog)
        self.mapper = GradeMapper(strict=strict)
        self.aggregator = GpaAggregator(self.mapper)
        self.display = display or TerminalDisplay()
        self._scores = self._blank_scores()

    def _resolve(self, code: str) -> str:
        """Return the catalog spelling of `code` or raise UnknownCourseError."""
        course = find_course(self.catalog, code)
        if course is None:
            raise UnknownCourseError(code)
        return course.code

    def set_score(self, code: str, raw: RawScore):
        """
        Record what the user typed for one course.

        Any input is accepted; whether it counts is decided at calculation
        time by the grade mapper.

        Raises:
            UnknownCourseError: if `code` is not in the catalog
        """
        self._scores[self._resolve(code)] = raw

    def clear_score(self, code: str):
        """Set one course back to blank."""
        self.set_score(code, "")

    def _blank_scores(self) -> dict:
        return {course.code: "" for course in self.catalog}

    def reset(self):
        """Set every course back to blank."""
        self._scores = self._blank_scores()
        logger.info("Reset %d course scores", len(self._scores))

    def scores(self) -> dict:
        """Snapshot of the current course code -> raw score map."""
        return dict(self._scores)

    def report(self) -> GpaReport:
        """Compute the GPA report from the current scores."""
        return self.aggregator.compute(self.catalog, self.scores())

    def interpretation(self, report: GpaReport = None) -> GpaInterpretation:
        """Label for the current (or given) report."""
        report = report or self.report()
        return interpret(report.gpa, report.total_credits)

    def entries(self) -> list:
        """One CourseEntry per catalog course, in display order."""
        snapshot = self.scores()
        return [
            CourseEntry(course=course, raw_score=snapshot.get(course.code),
                        grade=self.mapper.map(snapshot.get(course.code)))
            for course in self.catalog
        ]

    def show(self) -> GpaReport:
        """Print the current state through the display and return the report."""
        report = self.report()
        self.display.print_state(self.entries(), report, self.interpretation(report))
        return report
