from typing import List, Optional

import injector
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bookshelf.cmds.apiserver import create_app
from bookshelf.modules import setup_dependency_injection
from bookshelf.repositories import Book, BookFields, BookRepository
from bookshelf_web.controllers.v10.books import build_book_routers

BOOK_PAYLOAD = {
    'title': 'Rust in Action',
    'author': 'Tim McNamara',
    'isbn': '9781617294556',
    'description': 'Systems programming',
}


class RecordingBookRepository(BookRepository):

    def __init__(self):
        self.calls = []

    def _book(self, book_id: str, fields: BookFields = None) -> Book:
        fields = fields or BookFields(**BOOK_PAYLOAD)
        return Book(id=book_id, title=fields.title, author=fields.author, isbn=fields.isbn,
                    description=fields.description)

    def create(self, fields: BookFields) -> Book:
        self.calls.append(('create', fields))
        return self._book('new-book', fields)

    def find_all(self) -> List[Book]:
        self.calls.append(('find_all',))
        return []

    def find_by_id(self, book_id: str) -> Optional[Book]:
        self.calls.append(('find_by_id', book_id))
        return self._book(book_id)

    def update(self, book_id: str, fields: BookFields) -> Optional[Book]:
        self.calls.append(('update', book_id, fields))
        return self._book(book_id, fields)

    def delete(self, book_id: str) -> bool:
        self.calls.append(('delete', book_id))
        return True


class RecordingModule(injector.Module):

    def __init__(self, repository: RecordingBookRepository):
        self.repository = repository

    def configure(self, binder: injector.Binder):
        binder.bind(BookRepository, to=self.repository)


@pytest.fixture
def recording_repository() -> RecordingBookRepository:
    return RecordingBookRepository()


@pytest.fixture
def books_client(recording_repository):
    app = FastAPI()
    app.state.registry = setup_dependency_injection(modules=[RecordingModule(recording_repository)])
    app.include_router(build_book_routers())
    with TestClient(app) as client:
        yield client


@pytest.fixture
def app_client():
    with TestClient(create_app(setup_dependency_injection())) as client:
        yield client
