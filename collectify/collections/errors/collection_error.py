class CollectionError(Exception):
    """Base class for every error raised by a Collection."""
