from library_graphql.resolvers import resolve_author_of, resolve_books_of
from library_graphql.store import Author, Book


def test_tolkien_owns_the_trilogy_in_order(store):
    books = resolve_books_of(store, Author(id=2, name="J. R. R. Tolkien"))
    assert [b.id for b in books] == [4, 5, 6]


def test_every_book_resolves_to_its_author(store):
    for book in store.books():
        assert resolve_author_of(store, book).id == book.author_id


def test_dangling_reference_resolves_to_none(store):
    assert resolve_author_of(store, Book(id=9, name="Orphan", author_id=99)) is None


def test_author_without_books(store):
    assert resolve_books_of(store, Author(id=99, name="Nobody")) == []


def test_resolution_reflects_latest_mutation(store):
    store.update_book(1, "Harry Potter and the Chamber of Secrets", 3)
    assert [b.id for b in resolve_books_of(store, Author(id=1, name=""))] == [2, 3]
    assert [b.id for b in resolve_books_of(store, Author(id=3, name=""))] == [1, 7, 8]
