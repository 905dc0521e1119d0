"""Rendering helpers for presenting approximation results."""

from .latex import fraction_latex, fraction_pretty
from .html_table import make_results_table
from .graph import render_candidates_plot

__all__ = [
    "fraction_latex",
    "fraction_pretty",
    "make_results_table",
    "render_candidates_plot",
]
