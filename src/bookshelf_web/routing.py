import dataclasses
import logging
import re
from typing import Callable, Iterable, List, Tuple
from urllib.parse import unquote

from fastapi import APIRouter
from fastapi.routing import APIRoute
from starlette.routing import Match
from starlette.types import Scope

logger = logging.getLogger(__name__)

HTTP_METHODS = frozenset(['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS', 'TRACE', 'CONNECT'])

_PLACEHOLDER = re.compile(r'\{([^{}]*)\}')

# stands in for an encoded slash while matching, never valid in a decoded path
_ENCODED_SLASH = '\x00'


class RouteTableError(ValueError):
    pass


def handler_name(handler) -> str:
    return getattr(handler, '__name__', repr(handler))


@dataclasses.dataclass(frozen=True)
class RouteEntry:
    method: str
    path: str
    handler: Callable

    # response status for the handler, None keeps FastAPI's default
    status_code: int = None
    tags: Tuple[str, ...] = ()

    @property
    def key(self) -> Tuple[str, str]:
        return self.method.upper(), self.path


class RawSegmentRoute(APIRoute):
    """Matches path parameters against the raw path segments.

    Starlette decodes ``%2F`` before matching, which would split one
    identifier into two segments. When the raw path holds an encoded slash the
    match is retried with every raw segment decoded on its own.
    """

    def matches(self, scope: Scope) -> Tuple[Match, Scope]:
        match, child_scope = super().matches(scope)
        raw_path = scope.get('raw_path')
        if match != Match.NONE or scope['type'] != 'http' or not raw_path or b'%2f' not in raw_path.lower():
            return match, child_scope

        segments = raw_path.decode('latin-1').split('/')
        path = '/'.join(unquote(segment).replace('/', _ENCODED_SLASH) for segment in segments)
        match, child_scope = super().matches({**scope, 'path': path})
        if match == Match.NONE:
            return match, child_scope

        child_scope['path_params'] = {
            key: value.replace(_ENCODED_SLASH, '/') if isinstance(value, str) else value
            for key, value in child_scope.get('path_params', {}).items()
        }
        return match, child_scope


class TableRouter(APIRouter):
    """An APIRouter that remembers the route table it was built from."""

    def __init__(self, entries: Iterable[RouteEntry] = (), **kwargs):
        kwargs.setdefault('route_class', RawSegmentRoute)
        super().__init__(**kwargs)
        self.entries = tuple(entries)


def validate_path(path: str):
    if path and not path.startswith('/'):
        raise RouteTableError(f'path {path!r} must be empty or start with "/"')

    names = []
    for placeholder in _PLACEHOLDER.findall(path):
        name = placeholder.split(':', 1)[0]
        if not name.isidentifier():
            raise RouteTableError(f'placeholder {{{placeholder}}} in {path!r} is not a valid name')
        names.append(name)
    if len(names) != len(set(names)):
        raise RouteTableError(f'path {path!r} repeats a placeholder')

    leftover = _PLACEHOLDER.sub('', path)
    if '{' in leftover or '}' in leftover:
        raise RouteTableError(f'path {path!r} has unbalanced braces')


def validate_route_table(entries: Iterable[RouteEntry]):
    seen = {}
    for entry in entries:
        if not callable(entry.handler):
            raise RouteTableError(f'handler for {entry.method} {entry.path!r} is not callable: {entry.handler!r}')
        if entry.method.upper() not in HTTP_METHODS:
            raise RouteTableError(f'unknown HTTP method {entry.method!r} for {entry.path!r}')
        validate_path(entry.path)
        if entry.key in seen:
            raise RouteTableError(
                f'duplicate route {entry.method.upper()} {entry.path!r}: '
                f'{handler_name(seen[entry.key])} and {handler_name(entry.handler)}'
            )
        seen[entry.key] = entry.handler


def build_router(entries: Iterable[RouteEntry]) -> TableRouter:
    entries = tuple(entries)
    validate_route_table(entries)

    router = TableRouter(entries)
    for entry in entries:
        kwargs = {}
        if entry.status_code is not None:
            kwargs['status_code'] = entry.status_code
        router.add_api_route(
            entry.path,
            entry.handler,
            methods=[entry.method.upper()],
            name=handler_name(entry.handler),
            tags=list(entry.tags) or None,
            **kwargs,
        )
    return router


def _table_of(router: APIRouter) -> Tuple[RouteEntry, ...]:
    if not isinstance(router, TableRouter):
        raise RouteTableError(f'{router!r} was not built by build_router and cannot be composed')
    return router.entries


def nest(prefix: str, *routers: TableRouter, tags: Iterable[str] = ()) -> TableRouter:
    if not prefix.startswith('/') or prefix.endswith('/'):
        raise RouteTableError(f'prefix {prefix!r} must start with "/" and not end with "/"')

    tags = tuple(tags)
    return build_router(
        dataclasses.replace(entry, path=prefix + entry.path, tags=entry.tags + tags)
        for router in routers
        for entry in _table_of(router)
    )


def merge(*routers: TableRouter) -> TableRouter:
    return build_router(entry for router in routers for entry in _table_of(router))


def describe_routes(router: APIRouter) -> List[Tuple[str, str, str]]:
    if isinstance(router, TableRouter):
        described = [(entry.method.upper(), entry.path, handler_name(entry.handler)) for entry in router.entries]
    else:
        # routers built elsewhere only report their own top-level routes
        described = [
            (method, route.path, handler_name(route.endpoint))
            for route in router.routes
            if isinstance(route, APIRoute)
            for method in route.methods
        ]
    return sorted(described, key=lambda item: (item[1], item[0]))
