# -*- coding: utf-8 -*-
"""
Plain-text rendering of an optimization outcome (console summary).
"""

from __future__ import annotations
from typing import List

from parcel_split.planning import Outcome, Result

_REASONS = {
    "no_items": "no items to ship",
    "item_exceeds_max_weight": "item heavier than the package weight limit",
    "no_valid_partition": "no valid grouping exists",
    "budget_exhausted": "search budget exhausted before any grouping was found",
}


def _fmt_weight(w: float) -> str:
    return f"{w:g}"


def format_report(outcome: Outcome) -> str:
    """Render a Result as a package-by-package summary, or an Infeasible as one line."""
    if not isinstance(outcome, Result):
        line = f"No feasible solution ({outcome.mode}): {_REASONS.get(outcome.reason, outcome.reason)}"
        if outcome.item_names:
            line += f" [{', '.join(outcome.item_names)}]"
        return line

    lines: List[str] = [f"Cheapest shipping cost: {outcome.total_cost:g} ({outcome.mode} mode)"]
    for idx, pc in enumerate(outcome.packages, start=1):
        lines.append("")
        lines.append(f"Package {idx}:")
        for it in pc.items:
            lines.append(f"  - {it.name} ({_fmt_weight(it.weight)} kg)")
        lines.append(f"  Total weight: {pc.total_weight:.2f} kg")
        lines.append(f"  Billable weight: {pc.billable_weight} kg")
        lines.append(f"  Cost: {pc.cost:g}")
    if outcome.oversize:
        lines.append("")
        lines.append(f"Warning: over-weight packages for {', '.join(outcome.oversize)}")
    if outcome.stats is not None and not outcome.stats.complete:
        lines.append("")
        lines.append("Warning: search stopped early; cost may not be minimal")
    return "\n".join(lines)
