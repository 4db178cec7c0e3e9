# -*- coding: utf-8 -*-
"""
Planning layer public API for the package-splitting pipeline.

This module exposes the core planning-time data contracts:
  - State models (ShipmentState, OpenBin)
  - Policy configuration
  - Solution and outcome models (CostInfo, PackageCost, Result, Infeasible, SearchReport)

Other planning modules (optimizer, solvers, tracker, report) are intentionally
not exported here to avoid cluttering the namespace. They should be imported
explicitly when needed.
"""

from .state import ShipmentState, OpenBin
from .policy import Policy
from .solution import (
    CostInfo,
    Infeasible,
    Outcome,
    Package,
    PackageCost,
    Partition,
    Result,
    SearchReport,
)

__all__ = [
    "ShipmentState",
    "OpenBin",
    "Policy",
    "CostInfo",
    "Infeasible",
    "Outcome",
    "Package",
    "PackageCost",
    "Partition",
    "Result",
    "SearchReport",
]
