"""Plain-text rendering of LaTeX equations."""

from .equation import MAX_PASSES, normalize_equation
from .symbols import SYMBOLS, SUBSCRIPTS, SUPERSCRIPTS, to_subscript, to_superscript
from .catalog import Topic, CatalogEquation, EQUATIONS, render_catalog, find_equation

__all__ = [
    # Normalizer
    "MAX_PASSES",
    "normalize_equation",
    # Tables
    "SYMBOLS",
    "SUBSCRIPTS",
    "SUPERSCRIPTS",
    "to_subscript",
    "to_superscript",
    # Catalog
    "Topic",
    "CatalogEquation",
    "EQUATIONS",
    "render_catalog",
    "find_equation",
]
