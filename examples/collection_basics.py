"""
Walkthrough of the Collection combinators.

Run with:
    python examples/collection_basics.py
"""

import logging

from pydantic import BaseModel

from collectify import MissingFieldError, collect, new_collection

logging.basicConfig(level=logging.DEBUG)


class User(BaseModel):
    id: int
    name: str


numbers = collect([1, 2, 3, 4, 5])
print("Sum:", numbers.reduce(lambda carry, item: carry + item, 0))
print("Evens:", numbers.filter(lambda item: item % 2 == 0).all())
print("Odds:", numbers.reject(lambda item: item % 2 == 0).all())
print(
    "Reversed:",
    numbers.reduce(lambda carry, item: carry.prepend(item), new_collection()).all(),
)

words = collect(["first", "middle", "last"])
print("Lengths:", words.map(len).all())
print("Shifted:", words.shift(), "->", words.all())

queue = new_collection().push("a").push("b").merge(collect(["c", "d"]))
print("Queue:", queue.all(), "popped:", queue.pop())

users = collect(
    [
        User(id=1, name="John"),
        User(id=2, name="Jane"),
        User(id=3, name="Charlie"),
    ]
)
print("Ids:", users.pluck("id").all())
print("Names:", users.pluck("name").all())
print("Index of Charlie:", users.index_of(User(id=3, name="Charlie")))
print("JSON:", users.model_dump_json())

try:
    users.pluck("email")
except MissingFieldError as error:
    print("Pluck failed:", error)
