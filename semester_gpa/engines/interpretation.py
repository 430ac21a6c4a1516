"""
GPA interpretation: a display label for a computed GPA.
"""

from ..config import GPA_TIERS, PASS_LABEL, NO_CREDITS_LABEL
from ..models import GpaInterpretation, GpaTier


def interpret(gpa: float, total_credits: int) -> GpaInterpretation:
    """
    Bucket a GPA into a label, first match wins.

        gpa >= 3.7           Excellent
        gpa >= 3.0           Very Good
        gpa >= 2.0           Good
        any credits counted  Pass
        otherwise            N/A
    """
    for minimum, label, tier in GPA_TIERS:
        if gpa >= minimum:
            return GpaInterpretation(label=label, tier=GpaTier[tier])
    if total_credits > 0:
        return GpaInterpretation(label=PASS_LABEL, tier=GpaTier.PASS)
    return GpaInterpretation(label=NO_CREDITS_LABEL, tier=GpaTier.NONE)
