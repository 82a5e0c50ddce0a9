"""Resolution of the author <-> books relation against a store."""

from typing import List, Optional, Protocol

from library_graphql.store import Author, Book, LibraryStore


class HasAuthorId(Protocol):
    author_id: int


class HasId(Protocol):
    id: int


def resolve_author_of(store: LibraryStore, book: HasAuthorId) -> Optional[Author]:
    # Dangling references resolve to None
    return store.get_author(book.author_id)


def resolve_books_of(store: LibraryStore, author: HasId) -> List[Book]:
    return store.books_by_author(author.id)
