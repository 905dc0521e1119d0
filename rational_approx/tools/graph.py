"""Candidate plot rendering helpers."""
from __future__ import annotations

import os
import tempfile
import warnings
from pathlib import Path
from typing import Sequence

from ..candidate import ScoredCandidate

__all__ = ["render_candidates_plot"]

# Exact matches are drawn at this error so they stay visible on a log axis.
_EXACT_FLOOR = 1e-17


def _select_backend(matplotlib: object) -> None:
    try:
        backend = matplotlib.get_backend().lower()  # type: ignore[attr-defined]
    except Exception:
        backend = ""
    if backend in {"agg", "tkagg"}:
        return
    env_backend = os.environ.get("MPLBACKEND", "").lower()
    prefer_tk = bool(os.environ.get("DISPLAY")) or env_backend == "tkagg"
    if prefer_tk:
        try:
            matplotlib.use("TkAgg")  # type: ignore[attr-defined]
        except Exception as exc:  # pragma: no cover - depends on system backend
            warnings.warn(
                f"Preferred GUI backend 'TkAgg' unavailable; falling back to 'Agg': {exc}",
                RuntimeWarning,
            )
            matplotlib.use("Agg")  # type: ignore[attr-defined]
    else:
        matplotlib.use("Agg")  # type: ignore[attr-defined]


def render_candidates_plot(
    candidates: Sequence[ScoredCandidate],
    x: float,
    path: str | os.PathLike[str] | None = None,
) -> str:
    """Scatter error against denominator and save a **PNG file**; return its path."""
    # Lazy import so the package works without matplotlib unless a plot is requested
    try:
        import matplotlib  # type: ignore
        _select_backend(matplotlib)
        import matplotlib.pyplot as plt  # type: ignore
    except Exception as exc:  # pragma: no cover - environment-dependent
        raise RuntimeError(
            "matplotlib is required to render plots. Install it or run without --plot."
        ) from exc

    dens = [c.denominator for c in candidates]
    errs = [max(c.error, _EXACT_FLOOR) for c in candidates]

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.scatter(dens, errs)
    for cand, err in zip(candidates, errs):
        ax.annotate(
            f"{cand.numerator}/{cand.denominator}",
            (cand.denominator, err),
            textcoords="offset points",
            xytext=(4, 4),
            fontsize=7,
        )
    ax.set_yscale("log")
    ax.set_xlabel("denominator")
    ax.set_ylabel("|x - n/d|")
    ax.set_title(f"Rational approximations of {x!r}")
    ax.grid(True, which="both", linewidth=0.5)

    if path is None:
        fd, tmp = tempfile.mkstemp(suffix=".png")
        os.close(fd)
        png_path = Path(tmp)
    else:
        png_path = Path(path)
    fig.savefig(png_path, format="png")
    plt.close(fig)
    return str(png_path)
