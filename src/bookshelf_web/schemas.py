from typing import List

from pydantic import BaseModel

from bookshelf.repositories import Book, BookFields


class CreateBookRequest(BaseModel):
    title: str
    author: str
    isbn: str
    description: str

    def to_fields(self) -> BookFields:
        return BookFields(
            title=self.title,
            author=self.author,
            isbn=self.isbn,
            description=self.description,
        )


class UpdateBookRequest(CreateBookRequest):
    pass


class BookResponse(BaseModel):
    id: str
    title: str
    author: str
    isbn: str
    description: str

    @classmethod
    def from_book(cls, book: Book) -> 'BookResponse':
        return cls(
            id=book.id,
            title=book.title,
            author=book.author,
            isbn=book.isbn,
            description=book.description,
        )


class BookListResponse(BaseModel):
    items: List[BookResponse]
