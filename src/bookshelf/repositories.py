import abc
import dataclasses
import logging
import threading
import uuid
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Book:
    id: str
    title: str
    author: str
    isbn: str
    description: str


@dataclasses.dataclass(frozen=True)
class BookFields:
    title: str
    author: str
    isbn: str
    description: str


class BookRepository(abc.ABC):

    @abc.abstractmethod
    def create(self, fields: BookFields) -> Book:
        ...

    @abc.abstractmethod
    def find_all(self) -> List[Book]:
        ...

    @abc.abstractmethod
    def find_by_id(self, book_id: str) -> Optional[Book]:
        ...

    @abc.abstractmethod
    def update(self, book_id: str, fields: BookFields) -> Optional[Book]:
        ...

    @abc.abstractmethod
    def delete(self, book_id: str) -> bool:
        ...


class InMemoryBookRepository(BookRepository):

    def __init__(self):
        self._books: Dict[str, Book] = {}
        self._lock = threading.Lock()

    def create(self, fields: BookFields) -> Book:
        book = Book(id=uuid.uuid4().hex, **dataclasses.asdict(fields))
        with self._lock:
            self._books[book.id] = book
        logger.debug(f'InMemoryBookRepository[{id(self)}] created {book.id}')
        return book

    def find_all(self) -> List[Book]:
        with self._lock:
            return list(self._books.values())

    def find_by_id(self, book_id: str) -> Optional[Book]:
        with self._lock:
            return self._books.get(book_id)

    def update(self, book_id: str, fields: BookFields) -> Optional[Book]:
        with self._lock:
            if book_id not in self._books:
                return None
            book = Book(id=book_id, **dataclasses.asdict(fields))
            self._books[book_id] = book
        return book

    def delete(self, book_id: str) -> bool:
        with self._lock:
            return self._books.pop(book_id, None) is not None
