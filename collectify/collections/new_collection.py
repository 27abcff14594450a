from collectify.collections.collection import Collection


def new_collection[T]() -> Collection[T]:
    return Collection()
