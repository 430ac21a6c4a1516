"""
Grade and GPA result models.

Contains the dataclasses returned by the grade mapper, the aggregator and
the interpretation ladder.
"""

from dataclasses import dataclass
from enum import Enum

from ..config import EXCLUDED_POINTS, UNSET_LETTER


@dataclass(frozen=True)
class Grade:
    """
    Letter grade and point value for one score.

    points is either in [0.0, 4.0] or exactly EXCLUDED_POINTS, in which case
    letter is the "—" placeholder and the course is left out of the GPA.
    """
    letter: str
    points: float

    @property
    def is_excluded(self) -> bool:
        return self.points < 0


EXCLUDED_GRADE = Grade(letter=UNSET_LETTER, points=EXCLUDED_POINTS)


@dataclass(frozen=True)
class GpaReport:
    """
    Result of a GPA calculation.

    Example with PHY113=90, BMS112=80, BMS132=70 and nothing else entered:
        gpa: 3.08
        total_credits: 5
        total_points: 15.4
    """
    gpa: float
    total_credits: int
    total_points: float


class GpaTier(Enum):
    """
    Interpretation buckets for a GPA.

    NONE means no course has a valid score yet.
    """
    EXCELLENT = "excellent"
    VERY_GOOD = "very_good"
    GOOD = "good"
    PASS = "pass"
    NONE = "none"


@dataclass(frozen=True)
class GpaInterpretation:
    """Display label for a GPA plus the tier it falls in."""
    label: str
    tier: GpaTier
