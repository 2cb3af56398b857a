from bookshelf_web.controllers.v10.books import build_book_routers
from bookshelf_web.controllers.v10.health import build_health_router
from bookshelf_web.routing import TableRouter, nest

__all__ = ['v10_router', 'build_v10_router']


def build_v10_router() -> TableRouter:
    return nest('/v1.0', build_health_router(), build_book_routers())


v10_router = build_v10_router()
