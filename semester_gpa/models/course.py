"""
Course data models.

Contains the Course dataclass that represents one entry of the semester
catalog, and CourseEntry which pairs a course with the user's current input.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .grade import Grade


# What a user may have typed for one course: nothing yet, text, or a number
RawScore = Optional[Union[str, int, float]]


@dataclass(frozen=True)
class Course:
    """
    A single course in the semester catalog.

    Courses are frozen: the catalog is built once and shared read-only by
    every calculation.

    Attributes:
        code: Course code as printed in the study plan (e.g., "PHY113")
        name: Human-readable course title
        credit_hours: Positive integer weight of the course in the GPA
    """
    code: str
    name: str
    credit_hours: int


@dataclass(frozen=True)
class CourseEntry:
    """One row of the calculator table: a course, what was typed, and its grade."""
    course: Course
    raw_score: RawScore
    grade: Grade
