"""Fraction typesetting helpers."""
from __future__ import annotations

__all__ = ["fraction_latex", "fraction_pretty"]


def fraction_latex(numerator: int, denominator: int) -> str:
    """Copyable LaTeX for ``numerator/denominator``; always a ``\\frac``."""
    return f"\\frac{{{numerator}}}{{{denominator}}}"


def fraction_pretty(numerator: int, denominator: int, *, use_unicode: bool = True) -> str:
    """Render the fraction as a multi-line block with SymPy's pretty printer."""
    import sympy as sp

    # Rational prints inline, so build an unevaluated quotient to get a stacked bar.
    quotient = sp.Mul(numerator, sp.Pow(denominator, -1, evaluate=False), evaluate=False)
    return sp.pretty(quotient, use_unicode=use_unicode)
