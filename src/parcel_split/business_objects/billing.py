# -*- coding: utf-8 -*-
"""
Billing parameters for package cost evaluation.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from .errors import StateValidationError

# Tolerance for weight and billing comparisons
DEFAULT_EPS = 1e-9


@dataclass(frozen=True)
class BillingParams:
    """
    Immutable per-run billing knobs.

    Attributes
    ----------
    max_weight : float
        Upper bound on the total weight of one package (> 0).
    unit_cost : float
        Price per billable weight unit (>= 0).
    delivery_fee : float
        Surcharge for packages lighter than `min_delivery_weight` (>= 0).
    min_delivery_weight : float
        Surcharge threshold (>= 0). A package weighing exactly the
        threshold owes no surcharge.
    """
    max_weight: float
    unit_cost: float
    delivery_fee: float = 0.0
    min_delivery_weight: float = 0.0

    def __post_init__(self) -> None:  # type: ignore[override]
        for name in ("max_weight", "unit_cost", "delivery_fee", "min_delivery_weight"):
            if not math.isfinite(getattr(self, name)):
                raise StateValidationError(f"BillingParams.{name} must be a finite number.")
        if self.max_weight <= 0:
            raise StateValidationError("BillingParams.max_weight must be > 0.")
        if self.unit_cost < 0:
            raise StateValidationError("BillingParams.unit_cost must be >= 0.")
        if self.delivery_fee < 0:
            raise StateValidationError("BillingParams.delivery_fee must be >= 0.")
        if self.min_delivery_weight < 0:
            raise StateValidationError("BillingParams.min_delivery_weight must be >= 0.")
