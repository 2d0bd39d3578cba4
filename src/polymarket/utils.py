"""Shared utilities."""

from __future__ import annotations

import json
from typing import Any


def safe_json(val: Any) -> list:
    """Parse a JSON-encoded string, or return as-is if already a list."""
    if isinstance(val, list):
        return val
    if isinstance(val, str):
        try:
            parsed = json.loads(val)
        except (json.JSONDecodeError, TypeError):
            return []
        return parsed if isinstance(parsed, list) else []
    return []


def safe_float(val: Any) -> float:
    """Coerce numbers and numeric strings to float; anything else is 0."""
    if isinstance(val, bool):
        return float(val)
    if isinstance(val, (int, float)):
        return float(val)
    if isinstance(val, str):
        try:
            return float(val)
        except ValueError:
            return 0.0
    return 0.0


def format_usd(value: float) -> str:
    """
    Dollar amount with thousands separators, e.g. ``$1,234,567.5``.

    At most three fraction digits, trailing zeros dropped.
    """
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return f"${text}"


def format_number(value: float) -> str:
    """Shortest plain rendering of a price: ``0.6``, ``1``, ``0.125``."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text
