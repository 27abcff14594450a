"""
Ordered, in-memory collections with fluent combinators.

This package provides the Collection class together with the ``collect`` and
``new_collection`` factories. Mutating operations change a collection in place
and return it for chaining, while operations that reshape the data (filter,
reject, map, pluck) return new collections.
"""

from .collect import collect
from .collection import Collection
from .new_collection import new_collection

__all__: list[str] = ["Collection", "collect", "new_collection"]
