# -*- coding: utf-8 -*-
"""
Item model for package splitting.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from .errors import StateValidationError


@dataclass(frozen=True)
class Item:
    """
    A goods item that must be shipped in exactly one package.

    Attributes
    ----------
    name : str
        Display label. Should be unique for reporting, but uniqueness is
        not enforced.
    weight : float
        Nonnegative weight in billing units (kg).
    """
    name: str
    weight: float

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.name:
            raise StateValidationError("Item.name must be non-empty.")
        if not math.isfinite(self.weight):
            raise StateValidationError(f"Item[{self.name}] weight must be a finite number.")
        if self.weight < 0:
            raise StateValidationError(f"Item[{self.name}] weight must be >= 0.")
