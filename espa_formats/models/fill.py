# -*- coding: utf-8 -*-
"""
Fill Values - ESPA metadata sentinels and presence predicates.

ESPA internal metadata marks absent optional fields with reserved fill
values instead of leaving them out. This module is the single place
those sentinels are interpreted: the model constructors translate them
to ``None`` so downstream code only reasons about presence.

Author
------
geoint.org

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
from typing import Any, Optional

INT_META_FILL = -3333
FLOAT_META_FILL = -3333.0
STRING_META_FILL = "undefined"

# Float metadata round-trips through text, so equality is tolerant.
EPSILON = 0.00001


def is_int_fill(value: Any) -> bool:
    """Return True if *value* is the integer fill sentinel (or None)."""
    if value is None:
        return True
    return int(value) == INT_META_FILL


def is_float_fill(value: Any) -> bool:
    """Return True if *value* is within ``EPSILON`` of the float sentinel.

    ``None`` is treated as fill.
    """
    if value is None:
        return True
    return abs(float(value) - FLOAT_META_FILL) <= EPSILON


def is_string_fill(value: Any) -> bool:
    """Return True if *value* is the string fill sentinel (or None)."""
    return value is None or value == STRING_META_FILL


def int_or_none(value: Any) -> Optional[int]:
    """Translate an integer metadata value, mapping fill to None."""
    if is_int_fill(value):
        return None
    return int(value)


def float_or_none(value: Any) -> Optional[float]:
    """Translate a float metadata value, mapping fill to None."""
    if is_float_fill(value):
        return None
    return float(value)


def string_or_none(value: Any) -> Optional[str]:
    """Translate a text metadata value, mapping fill to None."""
    if is_string_fill(value):
        return None
    return str(value)
