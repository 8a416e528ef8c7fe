"""Decide whether an attribute is exempt from ``i18n-missing-attribute``.

Attribute values are compared the way the template's JavaScript runtime would
read them: a value is "numeric" when ``String(Number(value))`` gives the value
back unchanged. That rejects leading zeros, padding, exponent spellings and
other non-canonical forms even though they parse as numbers; the check is a
known approximation.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import AbstractSet

from .i18n_check_config import BOOLEAN_LITERALS, NAMESPACE_PREFIX, SIZE_SUFFIX

# Decimal literals accepted by JavaScript's Number(); anything else is NaN
# (hex/octal/binary literals never convert back to the same text).
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_NON_FINITE = {"NaN", "Infinity", "-Infinity"}


def js_number_to_string(number: float) -> str:
    """Format ``number`` like JavaScript's ``String(number)``.

    Example:
        >>> js_number_to_string(1e21), js_number_to_string(0.000001), js_number_to_string(12.0)
        ('1e+21', '0.000001', '12')
    """
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    # repr gives the shortest round-trip digits, as JavaScript does
    normalised = Decimal(repr(abs(number))).normalize()
    _, digit_tuple, exponent = normalised.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = int(exponent) + k

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
    return sign + body


def is_size_or_number(value: str) -> bool:
    """Return True for canonical numbers, optionally suffixed with ``px``."""
    candidate = value
    if candidate.endswith(SIZE_SUFFIX):
        candidate = candidate[: -len(SIZE_SUFFIX)]

    if candidate in _NON_FINITE:
        return True
    if not _DECIMAL_LITERAL.fullmatch(candidate):
        return False
    return js_number_to_string(float(candidate)) == candidate


def is_exempt(name: str, value: object, ignored_attributes: AbstractSet[str]) -> bool:
    """Return True when attribute ``name`` with ``value`` needs no i18n marker.

    Exempt when the value is absent, empty, ``"true"``/``"false"`` or a
    size/number, when the name is namespaced (``:xml``), or when the name is
    in ``ignored_attributes``.
    """
    if value is None:
        return True
    # Unexpected value types are classified by their text so they are still
    # reported unless one of the rules below applies.
    text = value if isinstance(value, str) else str(value)

    if not text or text in BOOLEAN_LITERALS:
        return True
    if is_size_or_number(text):
        return True
    if name.startswith(NAMESPACE_PREFIX):
        return True
    return name in ignored_attributes
