"""Command‑line interface wrapper around :pyfunc:`rational_approx.approximate`."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from . import constants as C
from .candidate import ScoredCandidate
from .pipeline import evaluate
from .pipeline_state import ApproximationState
from .ranking import SortPolicy, get_sort_policy, set_sort_policy
from .tools import fraction_latex, fraction_pretty, make_results_table, render_candidates_plot
from .utils import (
    NO_RESULTS_MESSAGE,
    decimal_text,
    error_text,
    parse_number,
    random_number_text,
    score_label,
)

__all__ = ["main"]

_FORMATS = ("text", "pretty", "json", "html", "latex")
_SORT_COMMAND = ":sort"


def _preview_plot(path: str) -> None:
    """Display the generated plot PNG in a Matplotlib window (best‑effort)."""
    try:
        import numpy as np  # type: ignore
        from PIL import Image  # type: ignore
        import matplotlib.pyplot as plt  # imported lazily to avoid GUI deps
    except ImportError as exc:
        print(
            f"⚠️ Could not preview plot image; missing dependency: {exc}",
            file=sys.stderr,
        )
        return

    try:
        img = Image.open(path).convert("RGBA")
        arr = np.array(img)
        fig, ax = plt.subplots()
        ax.imshow(arr)
        ax.axis("off")
        plt.show()
    except Exception as exc:
        print(f"⚠️ Could not preview plot image: {exc}", file=sys.stderr)


# ---------------------------------------------------------------------------
# Output rendering
# ---------------------------------------------------------------------------

def _text_line(cand: ScoredCandidate, policy: SortPolicy) -> str:
    line = (
        f"{cand.numerator}/{cand.denominator}".ljust(14)
        + f"≈ {decimal_text(cand)}".ljust(16)
        + f"error: {error_text(cand)}"
    )
    label = score_label(cand, policy)
    if label:
        line += f"  [{label}]"
    return line


def render_results(state: ApproximationState, fmt: str) -> str:
    """Render a finished evaluation in one of the supported output formats."""
    results = state.results
    policy = state.policy
    if fmt == "json":
        payload = {
            "x": state.x,
            "sort": policy.value,
            "continued_fraction": state.terms,
            "pool_size": state.pool_size,
            "results": [
                dict(c.to_dict(), latex=fraction_latex(c.numerator, c.denominator))
                for c in results
            ],
        }
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    if fmt == "html":
        return make_results_table(results, policy)
    if fmt == "latex":
        return "\n".join(fraction_latex(c.numerator, c.denominator) for c in results)
    if fmt == "pretty":
        blocks = []
        for cand in results:
            blocks.append(fraction_pretty(cand.numerator, cand.denominator))
            blocks.append(_text_line(cand, policy))
        return "\n\n".join(blocks)
    header = f"Approximations of {state.x!r} (sort: {policy.value})"
    return "\n".join([header] + [_text_line(c, policy) for c in results])


# ---------------------------------------------------------------------------
# CLI plumbing
# ---------------------------------------------------------------------------

def _parse_cli(argv: list[str] | None = None) -> argparse.Namespace:  # noqa: D401 – imperative mood
    parser = argparse.ArgumentParser(
        description="Approximate a real number by small irreducible fractions"
    )
    parser.add_argument("number", nargs="?", help="Number to approximate, e.g. 3.14159265")
    parser.add_argument("--random", action="store_true", help="Approximate a random number in [0, 1)")
    parser.add_argument("--demo", action="store_true", help=f"Approximate {C._DEMO_NUMBER}")
    parser.add_argument(
        "--interactive",
        action="store_true",
        help=(
            "Read one number per line from stdin; ':sort <policy>' changes the "
            "sort policy for the following lines"
        ),
    )
    parser.add_argument(
        "--sort",
        choices=[p.value for p in SortPolicy],
        default=None,
        help="Ranking policy (default: %s)" % C.DEFAULT_SORT_POLICY,
    )
    parser.add_argument(
        "--max-denominator",
        type=int,
        default=C.DEFAULT_MAX_DENOMINATOR,
        help="Largest convergent denominator kept",
    )
    parser.add_argument(
        "--brute-force-bound",
        type=int,
        default=C.DEFAULT_BRUTE_FORCE_BOUND,
        help="Largest denominator tried by the brute-force search",
    )
    parser.add_argument(
        "--terms",
        type=int,
        default=C.DEFAULT_TERM_CAP,
        help="Maximum number of continued-fraction terms",
    )
    parser.add_argument("--limit", type=int, default=C.RESULT_LIMIT, help="Number of results to show")
    parser.add_argument("--format", choices=_FORMATS, default="text", help="Output format")
    parser.add_argument("--out", help="Write output to file instead of stdout")
    parser.add_argument("--plot", action="store_true", help="Render a PNG plot of the results")
    parser.add_argument("--preview", action="store_true", help="Preview the plot PNG (implies --plot)")
    parser.add_argument(
        "--log-level",
        choices=["WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging level for rational_approx",
    )
    return parser.parse_args(argv)


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(level=logging.WARNING)
    level = getattr(logging, level_name)
    pkg_logger = logging.getLogger("rational_approx")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    handler.setLevel(level)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)


def _evaluate(ns: argparse.Namespace, x: float) -> ApproximationState:
    try:
        return evaluate(
            x,
            ns.max_denominator,
            ns.brute_force_bound,
            ns.terms,
            limit=ns.limit,
        )
    except ValueError as exc:
        sys.exit(f"Error: {exc}")


def _emit(ns: argparse.Namespace, state: ApproximationState) -> None:
    rendered = render_results(state, ns.format)
    if ns.out:
        Path(ns.out).write_text(rendered + "\n", "utf-8")
        print(f"✔ Results written to {ns.out}")
    else:
        print(rendered)

    if ns.plot or ns.preview:
        png = render_candidates_plot(state.results, state.x)
        print(f"✔ Plot written to {png}", file=sys.stderr)
        if ns.preview:
            _preview_plot(png)


def _run_interactive(ns: argparse.Namespace, stream: TextIO) -> None:
    for raw in stream:
        line = raw.strip()
        if line.startswith(_SORT_COMMAND):
            requested = line[len(_SORT_COMMAND):].strip()
            try:
                set_sort_policy(requested)
            except ValueError as exc:
                print(f"Error: {exc}", file=sys.stderr)
                continue
            print(f"sort: {get_sort_policy().value}")
            continue
        x = parse_number(line)
        if x is None:
            print(NO_RESULTS_MESSAGE)
            continue
        state = _evaluate(ns, x)
        print(render_results(state, ns.format))


def main(argv: Sequence[str] | None = None) -> None:  # noqa: D401 – imperative mood
    ns = _parse_cli(list(argv) if argv is not None else None)
    _configure_logging(ns.log_level)

    if ns.sort:
        set_sort_policy(ns.sort)

    sources = sum(bool(v) for v in (ns.number is not None, ns.random, ns.demo, ns.interactive))
    if sources > 1:
        sys.exit("Error: 'number' cannot be combined with --random/--demo/--interactive.")
    if ns.interactive and (ns.out or ns.plot or ns.preview):
        sys.exit("Error: --interactive cannot be combined with --out/--plot/--preview.")

    if ns.interactive:
        _run_interactive(ns, sys.stdin)
        return

    if ns.random:
        text = random_number_text()
    elif ns.demo:
        text = C._DEMO_NUMBER
    else:
        text = ns.number

    x = parse_number(text)
    if x is None:
        sys.exit(NO_RESULTS_MESSAGE)

    _emit(ns, _evaluate(ns, x))


if __name__ == "__main__":  # pragma: no cover
    main()
