"""
User interface implementations.

Currently only the terminal display exists. Other front ends can be added
alongside it with the same method names.
"""

from .terminal import TerminalDisplay

__all__ = ["TerminalDisplay"]
