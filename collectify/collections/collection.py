"""
Module for the Collection, an ordered, in-memory sequence with fluent combinators.

A Collection owns a list of elements and exposes chainable operations over it.
Mutating operations (``add``, ``push``, ``prepend``, ``fill``, ``merge``,
``shift``, ``pop``) change the receiver in place and, except for the two
removals, return it so calls can be chained. Operations that produce a new
shape (``filter``, ``reject``, ``map``, ``pluck``) always return a fresh
Collection and leave the receiver untouched.

Example:
```python
from collectify import collect

numbers = collect([1, 2, 3, 4, 5])

total = numbers.reduce(lambda carry, item: carry + item, 0)  # 15
evens = numbers.filter(lambda item: item % 2 == 0).all()  # [2, 4]

numbers.add(6).prepend(0)
numbers.first()  # 0
numbers.last()  # 6
```
"""

import logging
import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

from collectify.collections.errors.out_of_bounds_error import OutOfBoundsError
from collectify.reflection.deep_equal import deep_equal
from collectify.reflection.field_reader import read_field
from collectify.reflection.widen_scalar import PluckedScalar, widen_scalar

logger = logging.getLogger(__name__)


class Collection[T](BaseModel):
    """
    An ordered, zero-indexed sequence of elements of type ``T``.

    The index domain is always ``[0, count())``: ``first()`` is the element at
    index 0 and ``last()`` the element at index ``count() - 1``. Insertion order
    is preserved by every operation except ``prepend`` (which shifts the
    existing elements one position to the right) and the boundary removals
    ``shift`` and ``pop``.

    The collection is a pydantic model with a single ``items`` field, so it
    serializes as ``{"items": [...]}`` and can be rebuilt with
    ``model_validate``/``model_validate_json``. A parametrized collection such
    as ``Collection[int]`` validates its elements on construction.

    Collections are not safe for concurrent mutation. Callers sharing one
    across threads must provide their own locking.

    Attributes:
        items (list[T]): The held elements, in index order. Prefer ``all()``
            when a copy that is safe from later mutations is needed.

    Example:
        ```python
        words = collect(["first", "middle", "last"])

        words.shift()  # "first"
        words.count()  # 2
        words.map(len).all()  # [6, 4]
        ```
    """

    items: list[T] = Field(default_factory=list)
    """
    The elements held by the collection, in index order.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=False,
    )

    # --------- bulk population ----------

    def fill(self, items: Iterable[T]) -> Self:
        """Replace every element with ``items``, keeping their order.

        The previous contents are discarded. The incoming iterable is copied,
        so later changes to it do not affect the collection.
        """
        self.items = list(items)
        logger.debug(f"Filled collection with {len(self.items)} items")
        return self

    def merge(self, other: "Collection[T]") -> Self:
        """Append every element of ``other`` to the end of this collection.

        ``other`` keeps its elements. Merging is not commutative:
        ``a.merge(b)`` appends ``b`` after ``a`` while ``b.merge(a)`` does the
        opposite.
        """
        incoming = list(other.items)
        self.items.extend(incoming)
        logger.debug(
            f"Merged {len(incoming)} items into collection, "
            f"which now holds {len(self.items)}"
        )
        return self

    # --------- end operations ----------

    def prepend(self, item: T) -> Self:
        """Insert ``item`` at index 0."""
        self.items.insert(0, item)
        return self

    def add(self, item: T) -> Self:
        """Append ``item`` to the end of the collection."""
        self.items.append(item)
        return self

    def push(self, item: T) -> Self:
        """Alias of add."""
        return self.add(item)

    def first(self) -> T:
        """Return the element at index 0.

        Raises:
            OutOfBoundsError: The collection is empty.
        """
        if not self.items:
            raise OutOfBoundsError(0, 0, operation="first")
        return self.items[0]

    def last(self) -> T:
        """Return the element at index ``count() - 1``.

        Raises:
            OutOfBoundsError: The collection is empty.
        """
        if not self.items:
            raise OutOfBoundsError(-1, 0, operation="last")
        return self.items[-1]

    def shift(self) -> T:
        """Remove and return the element at index 0.

        Raises:
            OutOfBoundsError: The collection is empty.
        """
        if not self.items:
            raise OutOfBoundsError(0, 0, operation="shift")
        return self.items.pop(0)

    def pop(self) -> T:
        """Remove and return the last element.

        Raises:
            OutOfBoundsError: The collection is empty.
        """
        if not self.items:
            raise OutOfBoundsError(-1, 0, operation="pop")
        return self.items.pop()

    # --------- random access and search ----------

    def get(self, index: int) -> T:
        """Return the element at ``index``.

        Negative indices are not supported; they are out of bounds like any
        other index outside ``[0, count())``.

        Raises:
            TypeError: ``index`` is not an integer.
            OutOfBoundsError: ``index`` is outside ``[0, count())``.
        """
        index = operator.index(index)
        if not 0 <= index < len(self.items):
            raise OutOfBoundsError(index, len(self.items))
        return self.items[index]

    def index_of(self, item: T) -> int:
        """Return the smallest index holding an element structurally equal to ``item``.

        Elements are compared with deep_equal, so records are matched by their
        contents rather than their identity. Returns ``-1`` when no element
        matches.
        """
        for index, candidate in enumerate(self.items):
            if deep_equal(candidate, item):
                return index
        return -1

    def contains(self, predicate: Callable[[T], bool]) -> bool:
        """Tell whether any element satisfies ``predicate``.

        Elements are visited in index order and the scan stops at the first
        match.
        """
        return any(predicate(item) for item in self.items)

    def contains_item(self, item: T) -> bool:
        """Tell whether any element is equal (``==``) to ``item``."""
        return any(candidate == item for candidate in self.items)

    # --------- size ----------

    def count(self) -> int:
        return len(self.items)

    def is_empty(self) -> bool:
        return self.count() == 0

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    # --------- iteration and reduction ----------

    def for_each(self, action: Callable[[T], Any]) -> None:
        """Call ``action`` with every element, in index order."""
        for item in self.items:
            action(item)

    def reduce[A](self, combine: Callable[[A, T], A], initial: A) -> A:
        """Fold the elements from left to right.

        ``combine`` receives the running accumulator and the next element and
        returns the new accumulator. An empty collection returns ``initial``.

        Example:
            ```python
            collect([1, 2, 3]).reduce(lambda carry, item: carry + item, 0)  # 6

            # Reverse into a new collection
            collect([1, 2, 3]).reduce(
                lambda carry, item: carry.prepend(item), new_collection()
            ).all()  # [3, 2, 1]
            ```
        """
        carry = initial
        for item in self.items:
            carry = combine(carry, item)
        return carry

    def filter(self, predicate: Callable[[T], bool]) -> Self:
        """Return a new collection with the elements that satisfy ``predicate``."""
        return type(self).model_construct(
            items=[item for item in self.items if predicate(item)]
        )

    def reject(self, predicate: Callable[[T], bool]) -> Self:
        """Return a new collection with the elements that do not satisfy ``predicate``.

        ``reject`` is the complement of ``filter``: for the same predicate the
        two results partition the original elements.
        """
        return type(self).model_construct(
            items=[item for item in self.items if not predicate(item)]
        )

    def map[U](self, transform: Callable[[T], U]) -> "Collection[U]":
        """Return a new collection holding ``transform(item)`` for every element."""
        return Collection.model_construct(
            items=[transform(item) for item in self.items]
        )

    # --------- projection ----------

    def pluck(self, field: str) -> "Collection[PluckedScalar]":
        """Return a new collection with the value of ``field`` from every element.

        Elements must be records: pydantic models, dataclasses, named tuples,
        mappings or plain objects. Values are widened by category: integers
        of any width become ``int``, floating point values become ``float``
        and anything else becomes its ``str()`` representation.

        Raises:
            UnsupportedElementShapeError: An element is not a record.
            MissingFieldError: An element has no field called ``field``.

        Example:
            ```python
            class User(BaseModel):
                id: int
                name: str

            users = collect([User(id=1, name="John"), User(id=2, name="Jane")])
            users.pluck("id").all()  # [1, 2]
            users.pluck("name").first()  # "John"
            ```
        """
        plucked = [widen_scalar(read_field(item, field)) for item in self.items]
        return Collection.model_construct(items=plucked)

    # --------- whole-view accessors ----------

    def all(self) -> list[T]:
        """Return a snapshot of every element, in index order.

        The returned list is a copy: mutating it does not change the
        collection, and later mutations of the collection do not change it.
        """
        return list(self.items)

    def to_array(self) -> list[T]:
        """Alias of all."""
        return self.all()

    # --------- python protocols ----------

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.items)

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __contains__(self, item: object) -> bool:
        return self.contains_item(item)  # type: ignore[arg-type]
