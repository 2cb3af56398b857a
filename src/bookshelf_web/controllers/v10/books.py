import logging

from fastapi import status

from bookshelf_web.handlers.books import delete_book, register_book, show_book, show_book_list, update_book
from bookshelf_web.routing import RouteEntry, TableRouter, build_router, describe_routes, nest

logger = logging.getLogger(__name__)

BOOKS_PREFIX = '/books'

# updates go through POST on the item path, not PUT/PATCH
BOOK_ROUTES = (
    RouteEntry('POST', '', register_book, status_code=status.HTTP_201_CREATED),
    RouteEntry('GET', '', show_book_list),
    RouteEntry('GET', '/{book_id}', show_book),
    RouteEntry('POST', '/{book_id}', update_book),
    RouteEntry('DELETE', '/{book_id}', delete_book, status_code=status.HTTP_204_NO_CONTENT),
)


def build_book_routers() -> TableRouter:
    books_router = build_router(BOOK_ROUTES)

    router = nest(BOOKS_PREFIX, books_router, tags=['books'])
    logger.debug(f'built book router: {describe_routes(router)}')
    return router
