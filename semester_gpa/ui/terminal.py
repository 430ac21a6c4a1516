"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the semester_gpa package.

To create a different UI (web, GUI, etc.), create a new class with
the same method signatures but different output handling.
"""

import math

from ..config import INSTITUTION, INSTITUTION_TAGLINE, PROGRAMME
from ..models import CourseEntry, GpaReport, GpaInterpretation, GpaTier


class TerminalDisplay:
    """
    Pretty terminal output for the calculator.

    LAYOUT:
    -------
        ══════════════════════════════════════════════
          GALALA UNIVERSITY - Semester GPA Calculator
        ══════════════════════════════════════════════
          Total Credits   Semester GPA   Quality Points
        ...
          COURSE                     CODE    CR  SCORE  GRADE
        ...
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    TIER_COLORS = {
        GpaTier.EXCELLENT: GREEN,
        GpaTier.VERY_GOOD: BLUE,
        GpaTier.GOOD: YELLOW,
        GpaTier.PASS: RED,
        GpaTier.NONE: DIM,
    }

    WIDTH = 70

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * cls.WIDTH}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * cls.WIDTH}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_banner(cls):
        """Print the institution banner shown when the calculator starts."""
        cls.print_header(f"{INSTITUTION} - Semester GPA Calculator")
        print(f"  {cls.DIM}{INSTITUTION_TAGLINE}{cls.RESET}")
        print(f"  {cls.BOLD}{PROGRAMME}{cls.RESET}")

    @staticmethod
    def format_gpa(gpa: float) -> str:
        """GPA to two decimals; NaN shows as 0.00."""
        if math.isnan(gpa):
            return "0.00"
        return f"{gpa:.2f}"

    @classmethod
    def print_gpa_panel(cls, report: GpaReport, interpretation: GpaInterpretation):
        """Print total credits, GPA with its label, and quality points."""
        cls.print_subheader("Semester GPA")
        color = cls.TIER_COLORS.get(interpretation.tier, cls.DIM)

        print(f"  {cls.BOLD}Total Credits:{cls.RESET}  {report.total_credits}")
        print(f"  {cls.BOLD}Semester GPA:{cls.RESET}   {cls.BOLD}{cls.MAGENTA}{cls.format_gpa(report.gpa)}{cls.RESET}"
              f"  {color}{cls.BOLD}{interpretation.label}{cls.RESET}")
        print(f"  {cls.BOLD}Quality Points:{cls.RESET} {report.total_points:.2f}")

    @classmethod
    def print_course_table(cls, entries: list):
        """Print every course with its credit hours, entered score and grade."""
        cls.print_subheader("Courses")
        print(f"\n  {cls.BOLD}{'COURSE':<44} {'CODE':<8} {'CR':>2}  {'SCORE':>6}  {'GRADE'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * (cls.WIDTH - 4)}{cls.RESET}")

        for entry in entries:
            print(cls._course_row(entry))

    @classmethod
    def _course_row(cls, entry: CourseEntry) -> str:
        """Format one table row; excluded grades are dimmed."""
        course = entry.course
        name = course.name if len(course.name) <= 44 else course.name[:41] + "..."
        score = "" if entry.raw_score is None else str(entry.raw_score)
        if len(score) > 6:
            score = score[:5] + "…"

        if entry.grade.is_excluded:
            grade = f"{cls.DIM}{entry.grade.letter}{cls.RESET}"
        elif entry.grade.points >= 2.0:
            grade = f"{cls.GREEN}{entry.grade.letter}{cls.RESET}"
        elif entry.grade.points > 0:
            grade = f"{cls.YELLOW}{entry.grade.letter}{cls.RESET}"
        else:
            grade = f"{cls.RED}{entry.grade.letter}{cls.RESET}"

        return f"  {name:<44} {cls.DIM}{course.code:<8}{cls.RESET} {course.credit_hours:>2}  {score:>6}  {grade}"

    @classmethod
    def print_state(cls, entries: list, report: GpaReport, interpretation: GpaInterpretation):
        """Print the GPA panel followed by the course table."""
        cls.print_gpa_panel(report, interpretation)
        cls.print_course_table(entries)
        print()

    @classmethod
    def print_help(cls):
        """Print the interactive commands."""
        cls.print_subheader("Commands")
        print(f"  {cls.CYAN}<CODE> <score>{cls.RESET}  set a score, e.g. {cls.DIM}PHY113 91{cls.RESET}")
        print(f"  {cls.CYAN}<CODE>{cls.RESET}          clear a score")
        print(f"  {cls.CYAN}reset{cls.RESET}           clear all scores")
        print(f"  {cls.CYAN}show{cls.RESET}            print the table again")
        print(f"  {cls.CYAN}help{cls.RESET}            show this list")
        print(f"  {cls.CYAN}quit{cls.RESET}            leave the calculator")

    @classmethod
    def print_error(cls, message: str):
        print(f"  {cls.RED}Error: {message}{cls.RESET}")

    @classmethod
    def print_notice(cls, message: str):
        print(f"  {cls.YELLOW}{message}{cls.RESET}")
