"""Iterator: traverse a collection without exposing its representation.

Problem:
    A library keeps books in a list and magazines in a set. Client code
    that walks each one through its own container API has to know how every
    collection is stored, and changes whenever storage changes.

Solution:
    Each collection hands out an iterator through ``create_iterator``. An
    iterator keeps its own position, so several traversals of the same
    collection can run independently. Clients only call ``has_next`` and
    ``next``. The iterators also speak the Python iterator protocol, so they
    work in ``for`` loops.

Use cases:
    1. A collection has a complex structure that should stay hidden from
       clients.
    2. Traversal code should not be duplicated across the app.
    3. The same code should traverse different data structures.

Pros:
    1. Single Responsibility Principle: traversal algorithms live in their
       own classes.
    2. Open/Closed Principle: new collections and iterators plug into
       existing code.
    3. The same collection can be iterated in parallel.

Cons:
    1. Overkill for simple collections.
    2. Can be less efficient than walking a specialized collection directly.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Generic, List, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Book:
    title: str


@dataclass(frozen=True)
class Magazine:
    name: str


class Iterator(ABC, Generic[T]):
    """Explicit iterator interface, also usable as a Python iterator."""

    @abstractmethod
    def has_next(self) -> bool:
        pass

    @abstractmethod
    def next(self) -> T:
        pass

    def __iter__(self) -> "Iterator[T]":
        return self

    def __next__(self) -> T:
        return self.next()


class SequenceIterator(Iterator[T]):
    """Walks a snapshot of a sequence by position."""

    def __init__(self, items: Sequence[T]):
        self._items = list(items)
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._items)

    def next(self) -> T:
        if not self.has_next():
            raise StopIteration
        item = self._items[self._position]
        self._position += 1
        return item


class BookIterator(SequenceIterator[Book]):
    pass


class MagazineIterator(SequenceIterator[Magazine]):
    pass


class BookCollection:
    """Ordered, duplicates allowed."""

    def __init__(self) -> None:
        self._books: List[Book] = []

    def add_book(self, book: Book) -> None:
        self._books.append(book)

    def create_iterator(self) -> BookIterator:
        return BookIterator(self._books)

    def __len__(self) -> int:
        return len(self._books)


class MagazineCollection:
    """De-duplicated by name; iterates in insertion order."""

    def __init__(self) -> None:
        self._magazines: Dict[str, Magazine] = {}

    def add_magazine(self, magazine: Magazine) -> None:
        self._magazines.setdefault(magazine.name, magazine)

    def create_iterator(self) -> MagazineIterator:
        return MagazineIterator(list(self._magazines.values()))

    def __len__(self) -> int:
        return len(self._magazines)


def main() -> None:
    """List the books, then the magazines, each through its own iterator."""
    book_collection = BookCollection()
    for title in ("Design Patterns", "Clean Code", "Refactoring"):
        book_collection.add_book(Book(title))

    book_iterator = book_collection.create_iterator()
    print("Books:")
    while book_iterator.has_next():
        print(book_iterator.next().title)

    magazine_collection = MagazineCollection()
    for name in ("Tech Today", "Software Weekly", "Coding Digest"):
        magazine_collection.add_magazine(Magazine(name))

    magazine_iterator = magazine_collection.create_iterator()
    print("\nMagazines:")
    while magazine_iterator.has_next():
        print(magazine_iterator.next().name)


if __name__ == "__main__":
    main()
