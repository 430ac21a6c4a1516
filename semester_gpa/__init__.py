"""
Semester GPA Calculator Package
===============================

A credit-weighted GPA calculator for a fixed semester course list
(Galala University, Field of Dentistry, Year 1, Semester 1).

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │CatalogLoader│  │  parse_score    │  │        GradeMapper          │  │
│  │  (I/O)      │  │  (parsing)      │  │   (score -> letter/points)  │  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │     GpaAggregator       │  │            interpret                │  │
│  │ (credit-weighted GPA)   │  │      (GPA -> label and tier)        │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │                    TerminalDisplay                               │   │
│  │  • Formats and prints to console                                 │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                         GpaCalculator                                    │
│   (Orchestrator - owns the score map, recomputes on every change)       │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

semester_gpa/
├── __init__.py          # This file - main exports
├── config.py            # Grade table, sentinels, labels
├── errors.py            # Exceptions raised at the edges
├── calculator.py        # GpaCalculator orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── course.py        # Course, CourseEntry
│   └── grade.py         # Grade, GpaReport, GpaInterpretation, GpaTier
│
├── data/                # Catalog and input parsing
│   ├── catalog.py       # DEFAULT_CATALOG, CatalogLoader
│   └── parser.py        # parse_score
│
├── engines/             # Calculation engines
│   ├── grade_mapper.py  # GradeMapper, map_score
│   ├── aggregator.py    # GpaAggregator, compute_gpa
│   └── interpretation.py # interpret
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from semester_gpa import DEFAULT_CATALOG, compute_gpa, map_score, interpret

    map_score("97")        # Grade(letter='A', points=4.0)
    map_score("97.01")     # Grade(letter='A+', points=4.0)
    map_score("abc")       # Grade(letter='—', points=-1.0)

    report = compute_gpa(DEFAULT_CATALOG, {"PHY113": "90", "BMS112": "80", "BMS132": "70"})
    # GpaReport(gpa=3.08, total_credits=5, total_points=15.4)

    interpret(report.gpa, report.total_credits).label   # 'Very Good'

Running from command line:

    python -m semester_gpa

"""

# Version
__version__ = "1.0.0"

# Main exports
from .calculator import GpaCalculator
from .cli import main

# Model exports
from .models import (
    Course,
    CourseEntry,
    Grade,
    EXCLUDED_GRADE,
    GpaReport,
    GpaTier,
    GpaInterpretation,
)

# Engine exports
from .engines import (
    GradeMapper,
    GpaAggregator,
    map_score,
    compute_gpa,
    interpret,
)

# Data exports
from .data import DEFAULT_CATALOG, CatalogLoader, find_course, parse_score

# Error exports
from .errors import GpaCalculatorError, CatalogError, UnknownCourseError

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    EXCLUDED_POINTS,
    UNSET_LETTER,
    MIN_SCORE,
    MAX_SCORE,
    GRADE_SCALE,
    GPA_TIERS,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "GpaCalculator",
    "main",
    # Models
    "Course",
    "CourseEntry",
    "Grade",
    "EXCLUDED_GRADE",
    "GpaReport",
    "GpaTier",
    "GpaInterpretation",
    # Engines
    "GradeMapper",
    "GpaAggregator",
    "map_score",
    "compute_gpa",
    "interpret",
    # Data
    "DEFAULT_CATALOG",
    "CatalogLoader",
    "find_course",
    "parse_score",
    # Errors
    "GpaCalculatorError",
    "CatalogError",
    "UnknownCourseError",
    # UI
    "TerminalDisplay",
    # Config
    "EXCLUDED_POINTS",
    "UNSET_LETTER",
    "MIN_SCORE",
    "MAX_SCORE",
    "GRADE_SCALE",
    "GPA_TIERS",
]
