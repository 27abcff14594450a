"""
Errors raised by collection operations.

Every failure surfaced by a Collection derives from CollectionError, and each
concrete error also derives from the closest built-in exception so callers can
catch either form (for example, OutOfBoundsError is also an IndexError).
"""

from .collection_error import CollectionError
from .missing_field_error import MissingFieldError
from .out_of_bounds_error import OutOfBoundsError
from .unsupported_element_shape_error import UnsupportedElementShapeError

__all__: list[str] = [
    "CollectionError",
    "MissingFieldError",
    "OutOfBoundsError",
    "UnsupportedElementShapeError",
]
