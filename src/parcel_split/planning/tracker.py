# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for an optimization run.

Files produced (when Tracker is used):
  - packages.csv     (chosen grouping with per-package cost breakdown)
  - summary.csv      (one row of run-level KPIs)
  - search_log.csv   (incumbent improvements + search counters; exact mode only)

Notes
-----
- Callers decide when to invoke these writers; optimize() calls record() at the end
  when a tracker is passed in.
"""

from __future__ import annotations
import csv
import json
import os
from dataclasses import dataclass
from typing import List

from parcel_split.costing.cost_model import DEFAULT_EPS, fits, surcharge_applies
from parcel_split.planning import Outcome, Result, SearchReport, ShipmentState


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    # -----------------------------
    # Chosen grouping
    # -----------------------------
    def write_packages_csv(
        self,
        state: ShipmentState,
        result: Result,
        filename: str = "packages.csv",
        eps: float = DEFAULT_EPS,
    ) -> str:
        """
        Per-package breakdown of a Result.

        Columns:
          package_index, item_names, total_weight, billable_weight, cost,
          surcharge_applied (0/1), over_max_weight (0/1)

        Both flags use the same `eps` tolerance as the run that priced them.
        """
        path = os.path.join(self.out_dir, filename)
        max_weight = float(state.params.max_weight)

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                "package_index",
                "item_names",
                "total_weight",
                "billable_weight",
                "cost",
                "surcharge_applied",
                "over_max_weight",
            ])
            for idx, pc in enumerate(result.packages, start=1):
                w.writerow([
                    idx,
                    json.dumps(list(pc.item_names), ensure_ascii=False),
                    round(pc.total_weight, 6),
                    pc.billable_weight,
                    pc.cost,
                    1 if surcharge_applies(pc.total_weight, state.params, eps) else 0,
                    0 if fits(pc.total_weight, max_weight, eps) else 1,
                ])
        return path

    # -----------------------------
    # Run-level KPIs
    # -----------------------------
    def write_summary_csv(
        self,
        state: ShipmentState,
        outcome: Outcome,
        filename: str = "summary.csv",
    ) -> str:
        """
        One-row run summary.

        Columns:
          mode, feasible, reason, total_items, num_packages, total_weight,
          total_cost, max_weight, unit_cost, delivery_fee, min_delivery_weight
        """
        path = os.path.join(self.out_dir, filename)
        p = state.params

        if isinstance(outcome, Result):
            reason = ""
            num_packages = len(outcome.packages)
            total_cost = outcome.total_cost
        else:
            reason = outcome.reason
            num_packages = 0
            total_cost = ""

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                "mode",
                "feasible",
                "reason",
                "total_items",
                "num_packages",
                "total_weight",
                "total_cost",
                "max_weight",
                "unit_cost",
                "delivery_fee",
                "min_delivery_weight",
            ])
            w.writerow([
                outcome.mode,
                1 if outcome.feasible else 0,
                reason,
                len(state.items),
                num_packages,
                round(state.total_weight, 6),
                total_cost,
                float(p.max_weight),
                float(p.unit_cost),
                float(p.delivery_fee),
                float(p.min_delivery_weight),
            ])
        return path

    # -----------------------------
    # Exact-search diagnostics
    # -----------------------------
    def write_search_log_csv(
        self,
        report: SearchReport,
        filename: str = "search_log.csv",
    ) -> str:
        """
        Incumbent trace of one exact search.

        Columns:
          improvement_index, incumbent_cost
        followed by a blank row and counter rows (counter, value).
        """
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["improvement_index", "incumbent_cost"])
            for idx, cost in enumerate(report.improvements):
                w.writerow([idx, cost])
            w.writerow([])
            w.writerow(["counter", "value"])
            w.writerow(["enumeration", report.enumeration])
            w.writerow(["nodes", report.nodes])
            w.writerow(["pruned_by_weight", report.pruned_by_weight])
            w.writerow(["pruned_by_cost", report.pruned_by_cost])
            w.writerow(["complete", 1 if report.complete else 0])
        return path

    def record(self, state: ShipmentState, outcome: Outcome, eps: float = DEFAULT_EPS) -> List[str]:
        """
        Write every artifact that applies to `outcome`; returns the paths written.

        Artifacts that do not apply (packages.csv for an Infeasible outcome,
        search_log.csv without an exact search) are removed, so a reused
        out_dir only ever describes the latest run.
        """
        paths = [self.write_summary_csv(state, outcome)]
        if isinstance(outcome, Result):
            paths.append(self.write_packages_csv(state, outcome, eps=eps))
        else:
            self._discard("packages.csv")
        stats = outcome.stats
        if stats is not None:
            paths.append(self.write_search_log_csv(stats))
        else:
            self._discard("search_log.csv")
        return paths

    def _discard(self, filename: str) -> None:
        path = os.path.join(self.out_dir, filename)
        if os.path.exists(path):
            os.remove(path)
