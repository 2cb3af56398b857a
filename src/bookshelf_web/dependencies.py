from typing import Callable, Type, TypeVar

from fastapi import Request

T = TypeVar('T')


def get_registry(request: Request):
    registry = getattr(request.app.state, 'registry', None)
    if registry is None:
        raise RuntimeError('no registry attached to app.state; build the app with create_app()')
    return registry


def provide(interface: Type[T]) -> Callable[[Request], T]:
    """Resolve ``interface`` from whichever registry the hosting app carries."""

    def dependency(request: Request) -> T:
        return get_registry(request).get(interface)

    dependency.__name__ = f'provide_{interface.__name__}'
    return dependency
