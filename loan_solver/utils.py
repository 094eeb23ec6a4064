"""Utility functions for the loan solver.

Helpers for turning command-line strings into numbers. Amounts may use
thousands separators and ``k``/``m`` shorthand suffixes.
"""

from __future__ import annotations

from typing import Optional

_SUFFIXES = {"k": 1_000.0, "m": 1_000_000.0}


def parse_amount(value: str) -> float:
    """Parse a numeric string with optional suffixes.

    Accepts plain floats ("39000.00"), thousands separators ("39,000") and
    shorthand with ``k``/``m`` suffixes (e.g., "39k" meaning 39_000).

    Raises
    ------
    ValueError
        If the string is not a number.
    """
    cleaned = value.strip().lower().replace(",", "")
    factor = 1.0
    if cleaned and cleaned[-1] in _SUFFIXES:
        factor = _SUFFIXES[cleaned[-1]]
        cleaned = cleaned[:-1]
    try:
        return float(cleaned) * factor
    except ValueError as exc:
        raise ValueError(f"Invalid amount: {value}") from exc


def parse_optional_amount(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    return parse_amount(value)
