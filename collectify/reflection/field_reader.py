"""
Reading named fields off record-like values.

A record is any value that exposes named fields at runtime. The supported
shapes, checked in this order, are:

- pydantic models (declared, computed and extra fields)
- dataclass instances
- named tuples
- mappings with string keys
- plain objects with an instance ``__dict__`` or ``__slots__``

Scalars, strings, bytes, plain sequences, sets and ``None`` are not records.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from collectify.collections.errors.missing_field_error import MissingFieldError
from collectify.collections.errors.unsupported_element_shape_error import (
    UnsupportedElementShapeError,
)

_NOT_RECORDS: tuple[type, ...] = (
    str,
    bytes,
    bytearray,
    memoryview,
    int,
    float,
    complex,
    list,
    set,
    frozenset,
    range,
    type(None),
)


def is_record(value: Any) -> bool:
    """Tell whether ``value`` exposes named fields that read_field can access."""
    if isinstance(value, BaseModel):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    if _is_named_tuple(value):
        return True
    if isinstance(value, Mapping):
        return True
    if isinstance(value, (tuple, *_NOT_RECORDS)) or isinstance(value, type):
        return False
    if callable(value):
        return False
    return hasattr(value, "__dict__") or bool(_instance_slots(value))


def read_field(element: Any, name: str) -> Any:
    """Return the value of the field ``name`` on ``element``.

    Args:
        element: A record-like value.
        name: The field to read.

    Raises:
        UnsupportedElementShapeError: ``element`` is not record-like.
        MissingFieldError: ``element`` is a record without a field called ``name``.
    """
    if not is_record(element):
        raise UnsupportedElementShapeError(type(element))

    if isinstance(element, BaseModel):
        model_type = type(element)
        extra = element.model_extra or {}
        if (
            name in model_type.model_fields
            or name in model_type.model_computed_fields
        ):
            return getattr(element, name)
        if name in extra:
            return extra[name]
        raise MissingFieldError(name, model_type)

    if dataclasses.is_dataclass(element):
        if name in {field.name for field in dataclasses.fields(element)}:
            return getattr(element, name)
        raise MissingFieldError(name, type(element))

    if _is_named_tuple(element):
        if name in element._fields:
            return getattr(element, name)
        raise MissingFieldError(name, type(element))

    if isinstance(element, Mapping):
        if name in element:
            return element[name]
        raise MissingFieldError(name, type(element))

    instance_fields = getattr(element, "__dict__", {})
    if name in instance_fields:
        return instance_fields[name]
    if name in _instance_slots(element):
        try:
            return getattr(element, name)
        except AttributeError:
            # Declared slot that was never assigned.
            raise MissingFieldError(name, type(element)) from None
    raise MissingFieldError(name, type(element))


def _is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _instance_slots(value: Any) -> list[str]:
    slots: list[str] = []
    for klass in type(value).__mro__:
        declared = klass.__dict__.get("__slots__", ())
        if isinstance(declared, str):
            declared = (declared,)
        slots.extend(
            slot for slot in declared if slot not in ("__dict__", "__weakref__")
        )
    return slots
