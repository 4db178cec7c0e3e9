# -*- coding: utf-8 -*-
"""
I/O helpers for loading package-splitting problem definitions.

This module includes lightweight JSON readers that match the
`problems/problem_*/{items.json, params.json}` structure.

JSON formats:
- items.json   : [{"name": "...", "weight": <number>}, ...]
- params.json  : {"max_weight": <number>, "unit_cost": <number>,
                  "delivery_fee": <number>, "min_delivery_weight": <number>}

These map directly to:
- business_objects.items.Item
- business_objects.billing.BillingParams
"""

from __future__ import annotations
import json
from typing import Any, List

from parcel_split.business_objects import BillingParams, Item, SchemaError


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def _number(value: object, key: str) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaError(f"'{key}' must be a number, got {value!r}")
    return float(value)


def _load(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e


def read_items_json(path: str) -> List[Item]:
    """
    Load items from a JSON array. Each element must have:
      - name (str)
      - weight (number, >= 0)
    """
    data = _load(path)
    if not isinstance(data, list):
        raise SchemaError(f"{path}: expected a JSON array.")

    items: List[Item] = []
    for idx, obj in enumerate(data, start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            name = str(_require(obj, "name", path))
            weight = _number(_require(obj, "weight", path), "weight")
            items.append(Item(name=name, weight=weight))
        except ValueError as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
    return items


def read_params_json(path: str) -> BillingParams:
    """
    Load billing parameters from a JSON object with keys:
      - max_weight (number, > 0)
      - unit_cost (number, >= 0)
      - delivery_fee (number, >= 0)
      - min_delivery_weight (number, >= 0)
    """
    data = _load(path)
    if not isinstance(data, dict):
        raise SchemaError(f"{path}: expected a JSON object.")
    try:
        return BillingParams(
            max_weight=_number(_require(data, "max_weight", path), "max_weight"),
            unit_cost=_number(_require(data, "unit_cost", path), "unit_cost"),
            delivery_fee=_number(_require(data, "delivery_fee", path), "delivery_fee"),
            min_delivery_weight=_number(_require(data, "min_delivery_weight", path), "min_delivery_weight"),
        )
    except ValueError as e:
        raise SchemaError(f"{path}: {e}") from e
