"""
Data models for the GPA calculator.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .grade import Grade, EXCLUDED_GRADE, GpaReport, GpaTier, GpaInterpretation
from .course import Course, CourseEntry, RawScore

__all__ = [
    # Course models
    "Course",
    "CourseEntry",
    "RawScore",
    # Grade and result models
    "Grade",
    "EXCLUDED_GRADE",
    "GpaReport",
    "GpaTier",
    "GpaInterpretation",
]
