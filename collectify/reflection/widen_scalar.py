from __future__ import annotations

import ctypes
import decimal
import logging
import numbers
from typing import Any, Literal, TypeAlias

logger = logging.getLogger(__name__)

ScalarKind: TypeAlias = Literal[
    "signed",  # Signed integers of any width (int, numbers.Integral, ctypes.c_int*)
    "unsigned",  # Unsigned fixed-width integers (ctypes.c_uint*, ctypes.c_size_t)
    "floating",  # float, numbers.Real, decimal.Decimal, ctypes.c_float/c_double
    "textual",  # Everything else, rendered with str()
]

PluckedScalar: TypeAlias = int | float | str

_SIGNED_CTYPES: tuple[type, ...] = (
    ctypes.c_byte,
    ctypes.c_short,
    ctypes.c_int,
    ctypes.c_long,
    ctypes.c_longlong,
    ctypes.c_int8,
    ctypes.c_int16,
    ctypes.c_int32,
    ctypes.c_int64,
    ctypes.c_ssize_t,
)

_UNSIGNED_CTYPES: tuple[type, ...] = (
    ctypes.c_ubyte,
    ctypes.c_ushort,
    ctypes.c_uint,
    ctypes.c_ulong,
    ctypes.c_ulonglong,
    ctypes.c_uint8,
    ctypes.c_uint16,
    ctypes.c_uint32,
    ctypes.c_uint64,
    ctypes.c_size_t,
)

_FLOATING_CTYPES: tuple[type, ...] = (
    ctypes.c_float,
    ctypes.c_double,
    ctypes.c_longdouble,
)

_CTYPES: tuple[type, ...] = _SIGNED_CTYPES + _UNSIGNED_CTYPES + _FLOATING_CTYPES


def scalar_kind(value: Any) -> ScalarKind:
    """Classify ``value`` into the category that decides how it is widened."""
    # bool is an Integral subclass but not a numeric field.
    if isinstance(value, bool):
        return "textual"
    if isinstance(value, _UNSIGNED_CTYPES):
        return "unsigned"
    if isinstance(value, _SIGNED_CTYPES) or isinstance(value, numbers.Integral):
        return "signed"
    if isinstance(value, _FLOATING_CTYPES):
        return "floating"
    if isinstance(value, (numbers.Real, decimal.Decimal)):
        return "floating"
    return "textual"


def widen_scalar(value: Any) -> PluckedScalar:
    """Widen a field value to the canonical scalar of its category.

    Integers of every width become ``int``, floating point values become
    ``float`` and everything else becomes its ``str()`` representation.

    Example:
        ```python
        widen_scalar(ctypes.c_uint8(200))  # 200
        widen_scalar(Fraction(1, 4))  # 0.25
        widen_scalar(True)  # "True"
        ```
    """
    kind = scalar_kind(value)
    raw = value.value if isinstance(value, _CTYPES) else value

    match kind:
        case "signed" | "unsigned":
            return int(raw)
        case "floating":
            return float(raw)
        case "textual":
            if not isinstance(value, str):
                logger.debug(
                    f"Widening {type(value).__qualname__} value to its text representation"
                )
            return str(value)
