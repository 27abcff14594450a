import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

_MISSING = object()


def deep_equal(left: Any, right: Any) -> bool:
    """Compare two values by structure instead of identity.

    Both values must have exactly the same type, scalars included, so
    ``deep_equal(1, True)`` and ``deep_equal([1], (1,))`` are false. Records
    are walked field by field: pydantic models (fields, extras and private
    attributes), dataclasses and plain objects that keep the default
    identity-based ``__eq__``. Mappings, lists and tuples are walked element
    by element. Any other value is compared with ``==``.

    Self-referencing structures are supported: a pair of values already being
    compared further up the walk counts as equal.

    Example:
        ```python
        class Point:
            def __init__(self, x: int, y: int) -> None:
                self.x = x
                self.y = y

        Point(1, 2) == Point(1, 2)  # False, identity comparison
        deep_equal(Point(1, 2), Point(1, 2))  # True
        ```
    """
    return _deep_equal(left, right, set())


def _deep_equal(left: Any, right: Any, visited: set[tuple[int, int]]) -> bool:
    if left is right:
        return True
    if type(left) is not type(right):
        return False

    pair = (id(left), id(right))
    if pair in visited:
        return True

    if isinstance(left, Mapping):
        visited.add(pair)
        return _same_entries(left, right, visited)

    if isinstance(left, (list, tuple)):
        if len(left) != len(right):
            return False
        visited.add(pair)
        return all(_deep_equal(a, b, visited) for a, b in zip(left, right))

    if isinstance(left, BaseModel):
        visited.add(pair)
        return (
            _same_entries(_model_fields(left), _model_fields(right), visited)
            and _same_entries(left.model_extra or {}, right.model_extra or {}, visited)
            and _same_entries(
                left.__pydantic_private__ or {},
                right.__pydantic_private__ or {},
                visited,
            )
        )

    if dataclasses.is_dataclass(left) and not isinstance(left, type):
        visited.add(pair)
        return _same_entries(_dataclass_fields(left), _dataclass_fields(right), visited)

    if _uses_identity_equality(left):
        visited.add(pair)
        return _same_entries(_attributes(left), _attributes(right), visited)

    return bool(left == right)


def _same_entries(
    left: Mapping[Any, Any], right: Mapping[Any, Any], visited: set[tuple[int, int]]
) -> bool:
    if left.keys() != right.keys():
        return False
    return all(_deep_equal(left[key], right[key], visited) for key in left)


def _model_fields(model: BaseModel) -> dict[str, Any]:
    return {name: getattr(model, name) for name in type(model).model_fields}


def _dataclass_fields(instance: Any) -> dict[str, Any]:
    return {
        field.name: getattr(instance, field.name, _MISSING)
        for field in dataclasses.fields(instance)
    }


def _uses_identity_equality(value: Any) -> bool:
    cls = type(value)
    if cls.__eq__ is not object.__eq__ or callable(value):
        return False
    return hasattr(value, "__dict__") or _slot_names(cls) != []


def _attributes(value: Any) -> dict[str, Any]:
    attributes: dict[str, Any] = dict(getattr(value, "__dict__", {}))
    for name in _slot_names(type(value)):
        if hasattr(value, name):
            attributes[name] = getattr(value, name)
    return attributes


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(slot for slot in slots if slot not in ("__dict__", "__weakref__"))
    return names
