"""HTML table rendering helpers."""
from __future__ import annotations

import html as _html
from typing import Sequence

from ..candidate import ScoredCandidate
from ..ranking import SortPolicy, coerce_policy
from ..utils import decimal_text, error_text, score_label
from .latex import fraction_latex

__all__ = ["make_results_table"]


def make_results_table(
    candidates: Sequence[ScoredCandidate], policy: SortPolicy | str
) -> str:
    """Convert ranked candidates → `<table>` element string (values escaped).

    Each row carries its LaTeX form in a ``data-latex`` attribute for
    copy-to-clipboard front ends.  The score column only appears for policies
    that have a score to show.
    """
    policy = coerce_policy(policy)
    labels = [score_label(c, policy) for c in candidates]
    show_score = any(label is not None for label in labels)

    header = ["fraction", "decimal", "error"] + (["score"] if show_score else [])
    head_html = "".join(f"<th>{_html.escape(h)}</th>" for h in header)

    rows: list[str] = []
    for cand, label in zip(candidates, labels):
        cells = [
            f"{cand.numerator}/{cand.denominator}",
            decimal_text(cand),
            error_text(cand),
        ]
        if show_score:
            cells.append(label or "")
        latex = _html.escape(fraction_latex(cand.numerator, cand.denominator), quote=True)
        body = "".join(f"<td>{_html.escape(c)}</td>" for c in cells)
        rows.append(f'<tr data-latex="{latex}">{body}</tr>')

    return (
        f'<table data-sort="{_html.escape(policy.value)}">'
        f"<thead><tr>{head_html}</tr></thead><tbody>{''.join(rows)}</tbody></table>"
    )
