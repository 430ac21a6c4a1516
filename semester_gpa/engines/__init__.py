"""
Calculation engines.

Pure logic only: these return dataclasses and never print.
"""

from .grade_mapper import GradeMapper, map_score
from .aggregator import GpaAggregator, compute_gpa
from .interpretation import interpret

__all__ = [
    "GradeMapper",
    "map_score",
    "GpaAggregator",
    "compute_gpa",
    "interpret",
]
