from typing import List, Optional

import strawberry
from strawberry.types import Info

from library_graphql import store as records
from library_graphql.resolvers import resolve_author_of, resolve_books_of
from library_graphql.store import LibraryStore


def get_store(info: Info) -> LibraryStore:
    return info.context["store"]


@strawberry.type(description="This represents a book written by an author")
class Book:
    id: int
    name: str
    author_id: int

    # belongs_to author
    @strawberry.field
    def author(self, info: Info) -> Optional["Author"]:
        author = resolve_author_of(get_store(info), self)
        return Author.marshal(author) if author is not None else None

    @classmethod
    def marshal(cls, record: records.Book) -> "Book":
        return cls(id=record.id, name=record.name, author_id=record.author_id)


@strawberry.type(description="This represents an author of a book")
class Author:
    id: int
    name: str

    # has_many books
    @strawberry.field
    def books(self, info: Info) -> Optional[List[Optional[Book]]]:
        return [Book.marshal(b) for b in resolve_books_of(get_store(info), self)]

    @classmethod
    def marshal(cls, record: records.Author) -> "Author":
        return cls(id=record.id, name=record.name)
