# siteprofit/services/formatting.py
# -----------------------------------------------------------------------------
# Form input filtering and result display formatting
# - money fields keep raw digits in state, commas only for display
# -----------------------------------------------------------------------------
from __future__ import annotations

import re
from typing import Optional

from siteprofit.services.metrics import parse_input

_KEYSTROKE_RE = re.compile(r"(\d+(\.\d*)?)?")


def strip_commas(value: Optional[str]) -> str:
    return (value or "").replace(",", "")


def sanitize_input(incoming: str, unit: str) -> Optional[str]:
    """
    Filter one edit of a form field.

    Returns the raw value to keep, or None when the edit is rejected and the
    previous value should stay. "$" and "%" fields accept digits with a single
    optional decimal point; any other unit passes the text through.
    """
    if unit not in ("$", "%"):
        return incoming
    raw = strip_commas(incoming)
    if raw == "" or _KEYSTROKE_RE.fullmatch(raw):
        return raw
    return None


def _group(value: float, digits: int) -> str:
    text = f"{value:,.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_with_commas(value: Optional[str]) -> str:
    """'1500000' -> '1,500,000'. Blank or non-numeric gives ''."""
    num = parse_input(value)
    if num is None:
        return ""
    return _group(num, 3)


def format_metric(value: Optional[float], unit: str) -> str:
    """3.0, ':1' -> '3:1'; 2.6667, ' Years' -> '2.67 Years'; None -> 'N/A'."""
    if value is None:
        return "N/A"
    return f"{_group(round(value, 2), 2)}{unit}"
