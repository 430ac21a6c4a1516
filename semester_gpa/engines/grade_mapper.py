"""
Grade Mapping Engine.

This module converts a raw score (out of 100) into a letter grade and a
point value using the university's grade mapping table.
"""

import logging

from ..config import (
    GRADE_SCALE,
    FAILING_LETTER,
    FAILING_POINTS,
    MIN_SCORE,
    MAX_SCORE,
    STRICT_SCORE_PARSING,
)
from ..data import parse_score
from ..models import Grade, EXCLUDED_GRADE, RawScore

logger = logging.getLogger(__name__)


class GradeMapper:
    """
    Maps scores to grades.

    MATCHING LOGIC:
    ---------------
    The scale is an ordered list of (threshold, inclusive, letter, points)
    bands, highest first. The first band the score reaches wins:
    - inclusive band: score >= threshold
    - exclusive band: score > threshold

    Only A+ is exclusive, so 97 is an "A" while 97.01 is an "A+".
    Every other boundary (93, 89, 84, ...) belongs to the higher band.
    Scores below the last band are an "F".

    EXCLUSION:
    ----------
    Blank input, input with no number, and numbers outside 0-100 all map to
    EXCLUDED_GRADE ("—", -1.0). Nothing is ever raised, so the mapper can be
    called on every keystroke.
    """

    def __init__(self, strict: bool = STRICT_SCORE_PARSING, scale=GRADE_SCALE):
        self.strict = strict
        self.scale = scale

    def map(self, raw: RawScore) -> Grade:
        """
        Map one raw score to a Grade.

        Args:
            raw: None, "", a string, or a number

        Returns:
            Grade with letter and points, or EXCLUDED_GRADE
        """
        if raw is None or raw == "":
            return EXCLUDED_GRADE

        score = parse_score(raw, strict=self.strict)
        if score is None or score < MIN_SCORE or score > MAX_SCORE:
            logger.debug("Excluding score %r (parsed as %r)", raw, score)
            return EXCLUDED_GRADE

        return self.grade_for(score)

    def grade_for(self, score: float) -> Grade:
        """Scan the bands top-down for an in-range numeric score."""
        for threshold, inclusive, letter, points in self.scale:
            if score > threshold or (inclusive and score == threshold):
                return Grade(letter=letter, points=points)
        return Grade(letter=FAILING_LETTER, points=FAILING_POINTS)


_permissive_mapper = GradeMapper(strict=False)
_strict_mapper = GradeMapper(strict=True)


def map_score(raw: RawScore, strict: bool = STRICT_SCORE_PARSING) -> Grade:
    """Map a raw score to a Grade with the standard grade table."""
    mapper = _strict_mapper if strict else _permissive_mapper
    return mapper.map(raw)
