from collections.abc import Iterable

from collectify.collections.collection import Collection


def collect[T](items: Iterable[T]) -> Collection[T]:
    """Build a collection holding ``items`` in the same order.

    ``items`` is copied, so the collection never aliases the caller's
    sequence. Any iterable is accepted, generators included.
    """
    return Collection.model_construct(items=list(items))
