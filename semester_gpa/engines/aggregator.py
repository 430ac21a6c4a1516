"""
GPA Aggregation Engine.

This module folds a catalog and the user's scores into a credit-weighted
GPA report.
"""

import logging
from typing import Mapping, Optional

from ..config import STRICT_SCORE_PARSING
from ..models import GpaReport, RawScore
from .grade_mapper import GradeMapper

logger = logging.getLogger(__name__)


class GpaAggregator:
    """
    Computes the semester GPA.

    FORMULA:
    --------
        quality points = sum(points * credit_hours)   over included courses
        total credits  = sum(credit_hours)            over included courses
        gpa            = quality points / total credits, or 0 with no credits

    A course is included only if its grade is not excluded (points >= 0).
    An excluded course counts toward neither the numerator nor the
    denominator. A missing key in `scores` is the same as a blank score.

    The aggregator keeps no state between calls: the same inputs always give
    the same report.
    """

    def __init__(self, mapper: Optional[GradeMapper] = None):
        self.mapper = mapper or GradeMapper()

    def compute(self, catalog, scores: Mapping[str, RawScore]) -> GpaReport:
        """
        Compute the GPA report.

        Args:
            catalog: Sequence of Course objects
            scores: Mapping of course code to raw score

        Returns:
            GpaReport(gpa, total_credits, total_points)
        """
        total_points = 0.0
        total_credits = 0

        for course in catalog:
            grade = self.mapper.map(scores.get(course.code))
            if grade.points >= 0:
                total_points += grade.points * course.credit_hours
                total_credits += course.credit_hours

        gpa = total_points / total_credits if total_credits > 0 else 0.0
        logger.debug("GPA %.4f over %d credits (%.2f quality points)", gpa, total_credits, total_points)

        return GpaReport(gpa=gpa, total_credits=total_credits, total_points=total_points)


def compute_gpa(catalog, scores: Mapping[str, RawScore],
                strict: bool = STRICT_SCORE_PARSING) -> GpaReport:
    """Compute the GPA report for `catalog` with the standard grade table."""
    return GpaAggregator(GradeMapper(strict=strict)).compute(catalog, scores)
