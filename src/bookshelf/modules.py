from typing import Iterable

import injector

from bookshelf.config import ServerConfig
from bookshelf.repositories import BookRepository, InMemoryBookRepository

AppRegistry = injector.Injector


class ConfigModule(injector.Module):

    def __init__(self, server_config: ServerConfig = None):
        self.server_config = server_config

    @injector.singleton
    @injector.provider
    def get_server_config(self) -> ServerConfig:
        if self.server_config is None:
            return ServerConfig()
        return self.server_config


class RepositoryModule(injector.Module):

    @injector.singleton
    @injector.provider
    def get_book_repository(self) -> BookRepository:
        return InMemoryBookRepository()


def setup_dependency_injection(
        server_config: ServerConfig = None,
        modules: Iterable[injector.Module] = None,
) -> AppRegistry:
    if modules is None:
        modules = [RepositoryModule()]
    modules = [ConfigModule(server_config), *modules]

    _injector = injector.Injector(modules, auto_bind=False)

    return _injector
