from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from ._container import Container

    Injector = Callable[[Container], Mapping[str, object]]


@runtime_checkable
class Cradle(Protocol):
    """Name-indexed view of the dependencies a container can produce.

    Proxy-mode targets receive a cradle as their only argument and look up
    what they need by name. Annotating a parameter with `Cradle` also marks a
    target as taking the whole cradle instead of named dependencies.
    """

    def lookup(self, name: str) -> object: ...

    def __getitem__(self, name: str) -> object: ...


class ContainerCradle:
    """Plain cradle over a container: every lookup is `container.resolve(name)`."""

    __slots__ = ("_container",)

    # lookup-only: no iteration, no membership tests
    __iter__ = None
    __contains__ = None

    def __init__(self, container: Container) -> None:
        self._container = container

    def lookup(self, name: str) -> object:
        return self._container.resolve(name)

    def __getitem__(self, name: str) -> object:
        return self.lookup(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._container!r})"


class InjectorCradle(ContainerCradle):
    """Cradle that checks an injector's local values before the container.

    The injector is called with the container on every single lookup, so it
    may return different mappings between lookups of the same resolution.
    Names missing from the returned mapping fall through to
    `container.resolve`.
    """

    __slots__ = ("_injector",)

    def __init__(self, container: Container, injector: Injector) -> None:
        super().__init__(container)
        self._injector = injector

    def lookup(self, name: str) -> object:
        local_values = self._injector(self._container)
        if name in local_values:
            return local_values[name]

        return self._container.resolve(name)
