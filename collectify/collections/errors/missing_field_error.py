from collectify.collections.errors.collection_error import CollectionError


class MissingFieldError(CollectionError, AttributeError):
    """Raised by pluck when an element does not expose the requested field."""

    def __init__(self, field: str, element_type: type) -> None:
        self.field = field
        self.element_type = element_type
        super().__init__(
            f"{element_type.__qualname__} has no field named {field!r}"
        )
