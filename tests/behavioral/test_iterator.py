import pytest

from pattern_catalog.behavioral.iterator import Book, BookCollection, Magazine, MagazineCollection, main


def test_main_output(capsys):
    main()

    assert capsys.readouterr().out.splitlines() == [
        "Books:",
        "Design Patterns",
        "Clean Code",
        "Refactoring",
        "",
        "Magazines:",
        "Tech Today",
        "Software Weekly",
        "Coding Digest",
    ]


def test_iterators_keep_independent_positions():
    collection = BookCollection()
    collection.add_book(Book("A"))
    collection.add_book(Book("B"))

    first = collection.create_iterator()
    second = collection.create_iterator()
    first.next()

    assert first.next().title == "B"
    assert second.next().title == "A"


def test_next_past_end_raises():
    iterator = BookCollection().create_iterator()

    assert iterator.has_next() is False
    with pytest.raises(StopIteration):
        iterator.next()


def test_magazines_are_deduplicated_in_insertion_order():
    collection = MagazineCollection()
    for name in ("Tech Today", "Coding Digest", "Tech Today"):
        collection.add_magazine(Magazine(name))

    assert [m.name for m in collection.create_iterator()] == ["Tech Today", "Coding Digest"]
    assert len(collection) == 2


def test_books_allow_duplicates():
    collection = BookCollection()
    collection.add_book(Book("A"))
    collection.add_book(Book("A"))

    assert [b.title for b in collection.create_iterator()] == ["A", "A"]
