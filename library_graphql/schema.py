"""Root Query and Mutation types, and the startup check of the generated schema."""

import logging
from typing import List, Optional

import strawberry
from graphql import build_schema, find_breaking_changes
from strawberry import UNSET
from strawberry.types import Info

from library_graphql import store as records
from library_graphql.graphql_types import Author, Book, get_store

logger = logging.getLogger(__name__)


# --- Query Definition ---

@strawberry.type(description="Root Query")
class Query:
    @strawberry.field(description="A single book")
    def book(self, info: Info, id: Optional[int] = UNSET) -> Optional[Book]:
        book = get_store(info).get_book(id)
        return Book.marshal(book) if book is not None else None

    @strawberry.field(description="List of all books")
    def books(self, info: Info) -> Optional[List[Optional[Book]]]:
        return [Book.marshal(b) for b in get_store(info).books()]

    @strawberry.field(description="A single author")
    def author(self, info: Info, id: Optional[int] = UNSET) -> Optional[Author]:
        author = get_store(info).get_author(id)
        return Author.marshal(author) if author is not None else None

    @strawberry.field(description="List of all authors")
    def authors(self, info: Info) -> Optional[List[Optional[Author]]]:
        return [Author.marshal(a) for a in get_store(info).authors()]


# --- Mutation Definition ---

@strawberry.type(description="Root Mutation")
class Mutation:
    @strawberry.mutation(description="Add a book")
    def add_book(self, info: Info, id: int, name: str, author_id: int) -> Optional[Book]:
        book = records.Book(id=id, name=name, author_id=author_id)
        return Book.marshal(get_store(info).add_book(book))

    @strawberry.mutation(description="Delete a book")
    def delete_book(self, info: Info, id: int) -> Optional[Book]:
        return Book.marshal(get_store(info).remove_book(id))

    @strawberry.mutation(description="Update a book")
    def update_book(self, info: Info, id: int, name: str, author_id: int) -> Optional[Book]:
        return Book.marshal(get_store(info).update_book(id, name, author_id))

    @strawberry.mutation(description="Add an author")
    def add_author(self, info: Info, id: int, name: str) -> Optional[Author]:
        author = records.Author(id=id, name=name)
        return Author.marshal(get_store(info).add_author(author))

    @strawberry.mutation(description="Delete an author")
    def delete_author(self, info: Info, id: int) -> Optional[Author]:
        return Author.marshal(get_store(info).remove_author(id))

    @strawberry.mutation(description="Update an author")
    def update_author(self, info: Info, id: int, name: str) -> Optional[Author]:
        return Author.marshal(get_store(info).rename_author(id, name))


# --- Schema Verification ---

EXPECTED_SDL = """
type Author {
  id: Int!
  name: String!
  books: [Book]
}

type Book {
  id: Int!
  name: String!
  authorId: Int!
  author: Author
}

type Query {
  book(id: Int): Book
  books: [Book]
  author(id: Int): Author
  authors: [Author]
}

type Mutation {
  addBook(id: Int!, name: String!, authorId: Int!): Book
  deleteBook(id: Int!): Book
  updateBook(id: Int!, name: String!, authorId: Int!): Book
  addAuthor(id: Int!, name: String!): Author
  deleteAuthor(id: Int!): Author
  updateAuthor(id: Int!, name: String!): Author
}
"""


class SchemaMismatch(RuntimeError):
    """The generated schema does not provide the published API."""

    def __init__(self, changes):
        self.changes = changes
        super().__init__(
            "Schema does not match the published API: "
            + "; ".join(change.description for change in changes)
        )


def verify_schema(schema: strawberry.Schema, expected_sdl: str = EXPECTED_SDL) -> None:
    """Fail if ``schema`` drops or changes anything the published SDL promises.

    Additions are allowed. The comparison runs on graphql-core schemas, so
    strawberry's name conversion (``author_id`` -> ``authorId``) is accounted for.
    """
    changes = find_breaking_changes(build_schema(expected_sdl), build_schema(schema.as_str()))
    if changes:
        raise SchemaMismatch(changes)
    logger.debug("Schema verified against published SDL")


schema = strawberry.Schema(query=Query, mutation=Mutation)
