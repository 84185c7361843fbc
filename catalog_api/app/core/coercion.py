"""
Loose value coercion for query strings and JSON bodies.

Clients of this API send numbers either as JSON numbers or as strings
(query parameters are always strings).  These helpers read such values
leniently: a numeric prefix is enough (``"12abc"`` reads as 12), and a
value without one reads as ``None``.  ``is_truthy`` decides whether an
optional body field counts as "provided".
"""

import math
import re
from typing import Any, Optional

_INT_RE = re.compile(r"^[+-]?[0-9]+")
_HEX_RE = re.compile(r"^([+-]?)0[xX]([0-9a-fA-F]+)")
_FLOAT_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (bool, list, dict)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return str(value).lstrip()


def parse_int(value: Any) -> Optional[int]:
    """Read the leading integer of ``value``; ``None`` if there is none."""
    text = _as_text(value)
    if not text:
        return None
    hex_match = _HEX_RE.match(text)
    if hex_match:
        sign, digits = hex_match.groups()
        number = int(digits, 16)
        return -number if sign == "-" else number
    match = _INT_RE.match(text)
    if match is None:
        return None
    return int(match.group(0))


def parse_float(value: Any) -> Optional[float]:
    """Read the leading decimal number of ``value``; ``None`` if there is none."""
    text = _as_text(value)
    if not text:
        return None
    match = _FLOAT_RE.match(text)
    if match is None:
        return None
    number = float(match.group(0))
    return number if math.isfinite(number) else None


def is_truthy(value: Any) -> bool:
    """Truthiness as the API's clients understand it.

    ``None``, ``False``, zero, NaN and the empty string are falsy.
    Everything else is truthy, including empty lists and objects.
    """
    if value is None or value is False:
        return False
    if isinstance(value, bool):
        return True
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True
