#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Split problems/problem_1 into packages and print the cheapest grouping.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_problem.py

Outputs under OUT_DIR:
  - summary.csv      (run-level KPIs)
  - packages.csv     (per-package breakdown)
  - search_log.csv   (exact mode: incumbent trace + counters)
"""

from __future__ import annotations
import logging
import os
import time
from typing import List

# ====== CONFIGURATION ======
ITEMS_PATH = "problems/problem_1/items.json"
PARAMS_PATH = "problems/problem_1/params.json"   # set to None to use the defaults below
OUT_DIR = "reports/problem_1"

# "exact" (branch-and-bound) or "fast" (first-fit-decreasing)
MODE = "exact"

# Exact search: "subset" or "permutation"; NODE_BUDGET=None searches exhaustively
ENUMERATION = "subset"
NODE_BUDGET = None

# Fast mode: ship items heavier than MAX_WEIGHT alone instead of rejecting the run
ALLOW_OVERSIZE = False

# Billing defaults (used when PARAMS_PATH is None)
MAX_WEIGHT = 5.0
UNIT_COST = 225.0
DELIVERY_FEE = 80.0
MIN_DELIVERY_WEIGHT = 4.0

LOG_LEVEL = logging.INFO
# ============================

from parcel_split.business_objects import BillingParams, Item
from parcel_split.planning import Policy
from parcel_split.planning.optimizer import optimize
from parcel_split.planning.report import format_report
from parcel_split.planning.tracker import Tracker
from parcel_split.utils.read_jsons import read_items_json, read_params_json


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="[%(asctime)s][%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")

    # Load problem
    items: List[Item] = read_items_json(ITEMS_PATH)
    if PARAMS_PATH is not None:
        params = read_params_json(PARAMS_PATH)
    else:
        params = BillingParams(
            max_weight=MAX_WEIGHT,
            unit_cost=UNIT_COST,
            delivery_fee=DELIVERY_FEE,
            min_delivery_weight=MIN_DELIVERY_WEIGHT,
        )

    policy = Policy(
        mode=MODE,
        enumeration=ENUMERATION,
        node_budget=NODE_BUDGET,
        allow_oversize=ALLOW_OVERSIZE,
    )
    tracker = Tracker(out_dir=OUT_DIR)

    start = time.perf_counter()
    outcome = optimize(items, params, policy=policy, tracker=tracker)
    elapsed = time.perf_counter() - start

    print(f"\n=== Package split ({MODE}) for {len(items)} items ===")
    print(format_report(outcome))
    print(f"\nComputation time: {elapsed:.2f} s")
    print(f"Artifacts written under: {os.path.abspath(OUT_DIR)}")


if __name__ == "__main__":
    main()
