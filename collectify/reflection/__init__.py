"""
Runtime reflection helpers used by Collection operations.

These functions inspect element values at runtime: reading a named field off a
record-like value (pydantic models, dataclasses, named tuples, mappings and
plain objects), widening a field value to a canonical scalar, and comparing
two values by structure rather than identity.
"""

from .deep_equal import deep_equal
from .field_reader import is_record, read_field
from .widen_scalar import PluckedScalar, ScalarKind, scalar_kind, widen_scalar

__all__: list[str] = [
    "PluckedScalar",
    "ScalarKind",
    "deep_equal",
    "is_record",
    "read_field",
    "scalar_kind",
    "widen_scalar",
]
