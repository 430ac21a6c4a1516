"""
Exceptions raised at the edges of the calculator.

Grade mapping and GPA aggregation never raise: a bad score is simply
excluded. Errors only come from loading a catalog file or from asking the
calculator about a course it does not know.
"""


class GpaCalculatorError(Exception):
    """Base class for calculator errors."""


class CatalogError(GpaCalculatorError):
    """Raised when a catalog file is missing or malformed."""


class UnknownCourseError(GpaCalculatorError, KeyError):
    """Raised when a course code is not in the active catalog."""

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unknown course code: {self.code}"
