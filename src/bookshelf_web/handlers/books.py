import logging

from fastapi import Depends, Response, status

from bookshelf.errors import BookNotFoundError
from bookshelf.repositories import BookRepository
from bookshelf_web.dependencies import provide
from bookshelf_web.schemas import BookListResponse, BookResponse, CreateBookRequest, UpdateBookRequest

logger = logging.getLogger(__name__)


async def register_book(
        req: CreateBookRequest,
        repository: BookRepository = Depends(provide(BookRepository)),
) -> BookResponse:
    book = repository.create(req.to_fields())
    logger.info(f'registered book {book.id}')
    return BookResponse.from_book(book)


async def show_book_list(
        repository: BookRepository = Depends(provide(BookRepository)),
) -> BookListResponse:
    return BookListResponse(items=[BookResponse.from_book(book) for book in repository.find_all()])


async def show_book(
        book_id: str,
        repository: BookRepository = Depends(provide(BookRepository)),
) -> BookResponse:
    book = repository.find_by_id(book_id)
    if book is None:
        raise BookNotFoundError(book_id)
    return BookResponse.from_book(book)


async def update_book(
        book_id: str,
        req: UpdateBookRequest,
        repository: BookRepository = Depends(provide(BookRepository)),
) -> BookResponse:
    book = repository.update(book_id, req.to_fields())
    if book is None:
        raise BookNotFoundError(book_id)
    logger.info(f'updated book {book_id}')
    return BookResponse.from_book(book)


async def delete_book(
        book_id: str,
        repository: BookRepository = Depends(provide(BookRepository)),
) -> Response:
    if not repository.delete(book_id):
        raise BookNotFoundError(book_id)
    logger.info(f'deleted book {book_id}')
    return Response(status_code=status.HTTP_204_NO_CONTENT)
