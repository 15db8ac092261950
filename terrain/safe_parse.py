from __future__ import annotations
"""Utility helpers for safely coercing values to numbers.

Values read from JSON configuration files are coerced here before they reach
the dataclasses.  A warning is logged whenever a value cannot be interpreted
as a finite number, and the supplied default is used instead.
"""

from typing import Any
import math
import logging

logger = logging.getLogger(__name__)


def to_int(value: Any, default: int = 0) -> int:
    """Coerce ``value`` to ``int``.

    Strings are stripped and parsed when they look like integers.  Floats are
    accepted when finite.  Anything else logs a warning and yields ``default``.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    if isinstance(value, str):
        s = value.strip()
        if s and (s.isdigit() or (s[0] in {"+", "-"} and s[1:].isdigit())):
            return int(s)
    if value is None:
        return default
    logger.warning("to_int: coercing %r to default %r", value, default)
    return default


def to_float(value: Any, default: float = 0.0) -> float:
    """Coerce ``value`` to a finite ``float``.

    Non finite floats (``nan``/``inf``) and unparsable inputs emit a warning
    and ``default`` is returned.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        f = float(value)
        if math.isfinite(f):
            return f
    elif isinstance(value, str):
        try:
            f = float(value.strip())
        except ValueError:
            f = math.nan
        if math.isfinite(f):
            return f
    elif value is None:
        return default
    logger.warning("to_float: coercing %r to default %r", value, default)
    return default

