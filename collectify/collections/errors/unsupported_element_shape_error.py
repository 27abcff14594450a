from collectify.collections.errors.collection_error import CollectionError


class UnsupportedElementShapeError(CollectionError, TypeError):
    """Raised by pluck when an element is not a record with named fields."""

    def __init__(self, element_type: type) -> None:
        self.element_type = element_type
        super().__init__(
            f"Cannot read named fields from {element_type.__qualname__}: "
            "element is not a record"
        )
