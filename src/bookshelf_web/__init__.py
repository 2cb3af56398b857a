from bookshelf_web.controllers import main_router

__all__ = ['main_router']
