"""
Collectify: ordered, in-memory collections with fluent combinators.

Example:
```python
from collectify import collect, new_collection

words = collect(["first", "middle", "last"])
words.map(len).all()  # [5, 6, 4]

stack = new_collection().push(1).push(2)
stack.pop()  # 2
```
"""

from collectify.collections.collect import collect
from collectify.collections.collection import Collection
from collectify.collections.errors.collection_error import CollectionError
from collectify.collections.errors.missing_field_error import MissingFieldError
from collectify.collections.errors.out_of_bounds_error import OutOfBoundsError
from collectify.collections.errors.unsupported_element_shape_error import (
    UnsupportedElementShapeError,
)
from collectify.collections.new_collection import new_collection

__all__: list[str] = [
    "Collection",
    "CollectionError",
    "MissingFieldError",
    "OutOfBoundsError",
    "UnsupportedElementShapeError",
    "collect",
    "new_collection",
]
