from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from ._container import ResolutionMode
from ._cradle import InjectorCradle
from ._dependencies import parse_signature
from ._errors import CradlebindTypeError


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from ._container import Container


class ResolveSettings(Protocol):
    """The registration attributes read on every resolve call."""

    @property
    def resolution_mode(self) -> ResolutionMode | None: ...

    @property
    def injector(self) -> Callable[[Container], Mapping[str, object]] | None: ...


@dataclass(frozen=True)
class ResolveFunction:
    """Produces values from `target`, injecting its dependencies.

    `dependencies` and `accepts_cradle` are computed once, when the function
    is generated; a target that takes no positional argument is called
    without the cradle in proxy mode. The registration passed on each call is
    read afresh, so changing its mode or injector affects later resolutions
    only.
    """

    target: Callable[..., Any]
    dependencies: tuple[str, ...]
    accepts_cradle: bool = True

    def __call__(self, registration: ResolveSettings, container: Container) -> Any:
        mode = effective_resolution_mode(registration, container)
        injector = registration.injector

        if mode is not ResolutionMode.CLASSIC:
            if not self.accepts_cradle:
                return self.target()

            cradle = InjectorCradle(container, injector) if injector is not None else container.cradle
            return self.target(cradle)

        if not self.dependencies:
            return self.target()

        lookup = InjectorCradle(container, injector).lookup if injector is not None else container.resolve
        children = [lookup(name) for name in self.dependencies]
        return self.target(*children)


def effective_resolution_mode(registration: ResolveSettings, container: Container) -> ResolutionMode:
    """Registration mode, then container mode, then proxy."""
    if registration.resolution_mode is not None:
        return registration.resolution_mode

    container_mode = container.options.resolution_mode
    if container_mode is not None:
        return container_mode

    return ResolutionMode.PROXY


def generate_resolve(
    target: Callable[..., Any],
    dependency_parse_target: Callable[..., Any] | None = None,
    *,
    dependencies: Iterable[str] | None = None,
) -> ResolveFunction:
    """Build the resolve function for `target`.

    Dependency names are read from `dependency_parse_target` (default:
    `target` itself) unless `dependencies` lists them explicitly.
    """
    if isinstance(dependencies, str):
        msg = f"dependencies must be a sequence of names, not a string: {dependencies!r}"
        raise CradlebindTypeError(msg)

    parsed = parse_signature(dependency_parse_target or target)
    names = tuple(dependencies) if dependencies is not None else parsed.dependencies

    return ResolveFunction(target=target, dependencies=names, accepts_cradle=parsed.accepts_cradle)
