# -*- coding: utf-8 -*-
"""
parcel_split: split weighted items into weight-bounded packages at minimum
shipping cost (exact branch-and-bound or first-fit-decreasing).
"""

from parcel_split.business_objects import BillingParams, Item, SchemaError, StateValidationError
from parcel_split.planning import Infeasible, Policy, Result
from parcel_split.planning.optimizer import optimize

__all__ = [
    "BillingParams",
    "Item",
    "SchemaError",
    "StateValidationError",
    "Infeasible",
    "Policy",
    "Result",
    "optimize",
]

__version__ = "0.1.0"
