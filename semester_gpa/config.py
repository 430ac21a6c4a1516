"""
Configuration constants for the GPA calculator.

This module contains all configuration values and constants used throughout
the calculator. Centralizing these makes it easy to adjust behavior when the
university's grading policy changes.
"""

import logging

# =============================================================================
# PROGRAMME LABELS
# =============================================================================

INSTITUTION = "GALALA UNIVERSITY"
INSTITUTION_TAGLINE = "Powered by Arizona State University"
PROGRAMME = "Field of Dentistry / Year 1 / Semester 1"


# =============================================================================
# SCORE BOUNDS AND EXCLUSION SENTINEL
# =============================================================================

# Scores are percentages. Anything outside [MIN_SCORE, MAX_SCORE] is excluded.
MIN_SCORE = 0
MAX_SCORE = 100

# Points value for a course that must not count toward the GPA
# (unset, unparseable or out-of-range score). Always negative.
EXCLUDED_POINTS = -1.0

# Letter shown for an excluded course
UNSET_LETTER = "—"

# Leading-numeric-prefix parsing ("12abc" -> 12) is the default.
# Set to True to require the whole input to be a number.
STRICT_SCORE_PARSING = False


# =============================================================================
# GRADE MAPPING TABLE
# =============================================================================
# Galala University Study Plan, "Grade Mapping" table.
#
# Each band is (threshold, inclusive, letter, points), scanned top-down and
# first match wins. Only the A+ band is exclusive: exactly 97 is an "A".
#
#   More than 97%            A+  4.0
#   93% to 97%               A   4.0
#   89% to less than 93%     A-  3.7
#   84% to less than 89%     B+  3.3
#   80% to less than 84%     B   3.0
#   76% to less than 80%     B-  2.7
#   73% to less than 76%     C+  2.3
#   70% to less than 73%     C   2.0
#   67% to less than 70%     C-  1.7
#   64% to less than 67%     D+  1.3
#   60% to less than 64%     D   1.0
#   Less than 60%            F   0.0

GRADE_SCALE = (
    (97, False, "A+", 4.0),
    (93, True, "A", 4.0),
    (89, True, "A-", 3.7),
    (84, True, "B+", 3.3),
    (80, True, "B", 3.0),
    (76, True, "B-", 2.7),
    (73, True, "C+", 2.3),
    (70, True, "C", 2.0),
    (67, True, "C-", 1.7),
    (64, True, "D+", 1.3),
    (60, True, "D", 1.0),
)

FAILING_LETTER = "F"
FAILING_POINTS = 0.0


# =============================================================================
# GPA INTERPRETATION LADDER
# =============================================================================
# (minimum gpa, label, tier name), first match wins.
# Below the last rung the label is "Pass" if any credits were counted,
# otherwise "N/A".

GPA_TIERS = (
    (3.7, "Excellent", "EXCELLENT"),
    (3.0, "Very Good", "VERY_GOOD"),
    (2.0, "Good", "GOOD"),
)

PASS_LABEL = "Pass"
NO_CREDITS_LABEL = "N/A"


# =============================================================================
# LOGGING
# =============================================================================

DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
