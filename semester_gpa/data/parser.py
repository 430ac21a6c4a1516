"""
Score parsing.

This module turns whatever the user typed for a course into a float, or
None when there is no number to be found.
"""

import math
import re
from typing import Optional

from ..models import RawScore

# Longest numeric prefix: optional sign, digits with optional fraction,
# optional exponent. "Infinity" is accepted so it can be range-rejected.
_NUMERIC_PREFIX = re.compile(
    r"""
    [+-]?
    (?:
        Infinity
      | (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
    )
    """,
    re.VERBOSE | re.ASCII,
)

_STRICT_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_score(raw: RawScore, strict: bool = False) -> Optional[float]:
    """
    Parse a raw score into a float.

    PERMISSIVE MODE (default):
    --------------------------
    Leading whitespace is skipped and the number is read as far as it
    extends; anything after it is ignored. "12abc" -> 12.0, "7.5%" -> 7.5,
    "abc" -> None. This matches how the score box behaved in the browser
    version of the calculator.

    STRICT MODE:
    ------------
    The whole input (surrounding whitespace aside) must be a finite decimal
    number. "12abc" -> None.

    Numbers that are already int/float are passed through. NaN and booleans
    are treated as "no number".

    Args:
        raw: What the user entered for one course
        strict: Require the full string to be numeric

    Returns:
        The parsed value, or None if no number could be read
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float)):
        value = float(raw)
        return None if math.isnan(value) else value

    text = str(raw).lstrip()
    if strict:
        match = _STRICT_NUMBER.fullmatch(text.rstrip())
    else:
        match = _NUMERIC_PREFIX.match(text)

    if match is None:
        return None

    token = match.group(0)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)
