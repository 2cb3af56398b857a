import argparse
import logging
from typing import List

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from bookshelf.config import ServerConfig, configure_logging
from bookshelf.errors import BookshelfError
from bookshelf.modules import AppRegistry, setup_dependency_injection
from bookshelf_web import main_router
from bookshelf_web.routing import describe_routes

logger = logging.getLogger(__name__)


def create_app(registry: AppRegistry = None):
    if registry is None:
        registry = setup_dependency_injection()
    config = registry.get(ServerConfig)

    app = FastAPI(title='bookshelf')
    app.state.registry = registry
    app.include_router(main_router)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc):
        return JSONResponse(
            {"status": 1, "message": "Validation failed", "errors": jsonable_encoder(exc.errors())},
            status_code=422,
        )

    @app.exception_handler(BookshelfError)
    async def bookshelf_exception_handler(request, exc: BookshelfError):
        logger.debug(f'{request.method} {request.url.path} failed: {exc!r}')
        return JSONResponse({"status": 1, "message": exc.message}, status_code=exc.status_code)

    logger.info(f'bookshelf app created for {config.host}:{config.port}')
    return app


def format_routes() -> List[str]:
    return [f'{method:<7} {path:<24} {handler}' for method, path, handler in describe_routes(main_router)]


def main(argv: List[str] = None):
    registry = setup_dependency_injection()
    config = registry.get(ServerConfig)

    parser = argparse.ArgumentParser(prog='bookshelf-apiserver')
    parser.add_argument('--host', default=config.host)
    parser.add_argument('--port', type=int, default=config.port)
    parser.add_argument('--routes', action='store_true', help='print the route table and exit')
    args = parser.parse_args(argv)

    if args.routes:
        for line in format_routes():
            print(line)
        return

    configure_logging(config.log_level)

    import uvicorn
    uvicorn.run(create_app(registry), host=args.host, port=args.port, log_level=config.log_level.lower())


if __name__ == '__main__':
    main()
