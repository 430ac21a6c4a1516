"""
Data layer: the course catalog and score parsing.
"""

from .catalog import DEFAULT_CATALOG, CatalogLoader, find_course
from .parser import parse_score

__all__ = ["DEFAULT_CATALOG", "CatalogLoader", "find_course", "parse_score"]
