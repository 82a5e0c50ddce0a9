import logging
import threading
from typing import List, Optional, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)


# --- Data Model ---
class Author(BaseModel):
    id: int
    name: str


class Book(BaseModel):
    id: int
    name: str
    author_id: int


class RecordNotFound(LookupError):
    """Raised when a delete or update names an id that is not in the store."""

    def __init__(self, kind: str, record_id: int):
        super().__init__(f"{kind} {record_id} not found")
        self.kind = kind
        self.record_id = record_id


# --- Seed Data ---
SEED_AUTHORS = [
    Author(id=1, name="J. K. Rowling"),
    Author(id=2, name="J. R. R. Tolkien"),
    Author(id=3, name="Brent Weeks"),
]

SEED_BOOKS = [
    Book(id=1, name="Harry Potter and the Chamber of Secrets", author_id=1),
    Book(id=2, name="Harry Potter and the Prisoner of Azkaban", author_id=1),
    Book(id=3, name="Harry Potter and the Goblet of Fire", author_id=1),
    Book(id=4, name="The Fellowship of the Ring", author_id=2),
    Book(id=5, name="The Two Towers", author_id=2),
    Book(id=6, name="The Return of the King", author_id=2),
    Book(id=7, name="The Way of Shadows", author_id=3),
    Book(id=8, name="Beyond the Shadows", author_id=3),
]

Record = TypeVar("Record", Author, Book)


def _find(records: List[Record], record_id: Optional[int]) -> Optional[Record]:
    for record in records:
        if record.id == record_id:
            return record
    return None


def _pop(records: List[Record], record_id: int, kind: str) -> Record:
    for i, record in enumerate(records):
        if record.id == record_id:
            return records.pop(i)
    raise RecordNotFound(kind, record_id)


class LibraryStore:
    """In-memory authors and books.

    Both lists share one lock. Every method holds it for its whole body, so a
    mutation is never observed half-applied, and reads hand out list copies.
    Identifiers are not unique; the first record with a given id wins.
    """

    def __init__(self, authors: Optional[List[Author]] = None, books: Optional[List[Book]] = None):
        self._lock = threading.RLock()
        self._authors: List[Author] = list(authors or [])
        self._books: List[Book] = list(books or [])

    @classmethod
    def seeded(cls) -> "LibraryStore":
        store = cls()
        store.reset()
        return store

    def reset(self) -> None:
        with self._lock:
            self._authors = [a.model_copy() for a in SEED_AUTHORS]
            self._books = [b.model_copy() for b in SEED_BOOKS]
        logger.info("Store reset to %d authors and %d books", len(self._authors), len(self._books))

    # --- Authors ---

    def authors(self) -> List[Author]:
        with self._lock:
            return list(self._authors)

    def get_author(self, author_id: Optional[int]) -> Optional[Author]:
        with self._lock:
            return _find(self._authors, author_id)

    def add_author(self, author: Author) -> Author:
        with self._lock:
            self._authors.append(author)
        logger.info("Added author %d", author.id)
        return author

    def remove_author(self, author_id: int) -> Author:
        with self._lock:
            try:
                author = _pop(self._authors, author_id, "Author")
            except RecordNotFound:
                logger.warning("Delete of missing author %d", author_id)
                raise
        logger.info("Deleted author %d", author_id)
        return author

    def rename_author(self, author_id: int, name: str) -> Author:
        with self._lock:
            author = _find(self._authors, author_id)
            if author is None:
                logger.warning("Update of missing author %d", author_id)
                raise RecordNotFound("Author", author_id)
            author.name = name
        logger.info("Updated author %d", author_id)
        return author

    # --- Books ---

    def books(self) -> List[Book]:
        with self._lock:
            return list(self._books)

    def get_book(self, book_id: Optional[int]) -> Optional[Book]:
        with self._lock:
            return _find(self._books, book_id)

    def books_by_author(self, author_id: int) -> List[Book]:
        with self._lock:
            return [b for b in self._books if b.author_id == author_id]

    def add_book(self, book: Book) -> Book:
        with self._lock:
            self._books.append(book)
        logger.info("Added book %d", book.id)
        return book

    def remove_book(self, book_id: int) -> Book:
        with self._lock:
            try:
                book = _pop(self._books, book_id, "Book")
            except RecordNotFound:
                logger.warning("Delete of missing book %d", book_id)
                raise
        logger.info("Deleted book %d", book_id)
        return book

    def update_book(self, book_id: int, name: str, author_id: int) -> Book:
        with self._lock:
            book = _find(self._books, book_id)
            if book is None:
                logger.warning("Update of missing book %d", book_id)
                raise RecordNotFound("Book", book_id)
            book.name = name
            book.author_id = author_id
        logger.info("Updated book %d", book_id)
        return book
