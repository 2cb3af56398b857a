from bookshelf_web.controllers.v10 import v10_router
from bookshelf_web.routing import merge

__all__ = ['main_router']

main_router = merge(v10_router)
