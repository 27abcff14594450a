from collectify.collections.errors.collection_error import CollectionError


class OutOfBoundsError(CollectionError, IndexError):
    """Raised when an index falls outside ``[0, count)``.

    Boundary reads and removals (``first``, ``last``, ``shift``, ``pop``) on an
    empty collection raise this error with ``index`` set to the position they
    tried to reach.
    """

    def __init__(self, index: int, count: int, operation: str = "get") -> None:
        self.index = index
        self.count = count
        self.operation = operation
        if count == 0:
            message = f"Cannot {operation}() on an empty collection"
        else:
            message = (
                f"Index {index} is out of bounds for a collection of {count} items"
            )
        super().__init__(message)
