from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from ._container import ResolutionMode
from ._errors import NotCallableError
from ._resolve import generate_resolve


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from ._container import Container
    from ._resolve import ResolveFunction

    Injector = Callable[[Container], Mapping[str, object]]


logger = logging.getLogger(__name__)


class Lifetime(Enum):
    TRANSIENT = "transient"
    SCOPED = "scoped"
    SINGLETON = "singleton"


class ValueRegistration:
    """Registration that always resolves to the same pre-built value."""

    __slots__ = ("value",)

    def __init__(self, value: object) -> None:
        self.value = value

    @property
    def lifetime(self) -> Lifetime:
        return Lifetime.TRANSIENT

    def resolve(self, container: Container | None = None) -> Any:  # noqa: ARG002
        return self.value

    def __repr__(self) -> str:
        return f"ValueRegistration({self.value!r})"


class Registration:
    """Registration for a factory function or a class.

    `lifetime`, `resolution_mode` and `injector` can be changed at any time,
    directly or through the chainable setters; each `resolve` call reads the
    values current at that moment. The dependency names are fixed when the
    registration is built.

    Example:
      registration = as_class(UserService).scoped().classic()
      registration.inject(lambda c: {"timeout": 5})

    """

    def __init__(
        self,
        resolve_fn: ResolveFunction,
        *,
        lifetime: Lifetime = Lifetime.TRANSIENT,
        injector: Injector | None = None,
        resolution_mode: ResolutionMode | None = None,
    ) -> None:
        self._resolve_fn = resolve_fn
        self.lifetime = lifetime
        self.injector = injector
        self.resolution_mode = resolution_mode

    @property
    def dependencies(self) -> tuple[str, ...]:
        return self._resolve_fn.dependencies

    def resolve(self, container: Container) -> Any:
        """Produce a new value, resolving its dependencies from `container`."""
        return self._resolve_fn(self, container)

    def set_lifetime(self, lifetime: Lifetime) -> Registration:
        self.lifetime = lifetime
        return self

    def set_resolution_mode(self, resolution_mode: ResolutionMode | None) -> Registration:
        self.resolution_mode = resolution_mode
        return self

    def inject(self, injector: Injector | None) -> Registration:
        """Supply local values that take precedence over the container.

        `injector` is called with the container on every dependency lookup and
        returns a mapping of name to value.
        """
        self.injector = injector
        return self

    def transient(self) -> Registration:
        return self.set_lifetime(Lifetime.TRANSIENT)

    def scoped(self) -> Registration:
        return self.set_lifetime(Lifetime.SCOPED)

    def singleton(self) -> Registration:
        return self.set_lifetime(Lifetime.SINGLETON)

    def proxy(self) -> Registration:
        return self.set_resolution_mode(ResolutionMode.PROXY)

    def classic(self) -> Registration:
        return self.set_resolution_mode(ResolutionMode.CLASSIC)

    def __repr__(self) -> str:
        mode = self.resolution_mode.value if self.resolution_mode is not None else None
        return (
            f"Registration({_describe(self._resolve_fn.target)}, lifetime={self.lifetime.value}, "
            f"resolution_mode={mode}, dependencies={self.dependencies!r})"
        )


def as_value(value: object) -> ValueRegistration:
    """Register a value that is returned as-is on every resolution."""
    return ValueRegistration(value)


def as_function(
    fn: Callable[..., Any],
    *,
    lifetime: Lifetime | None = None,
    injector: Injector | None = None,
    resolution_mode: ResolutionMode | None = None,
    dependencies: Iterable[str] | None = None,
) -> Registration:
    """Register a factory; its result is the resolved value.

    In classic mode the factory's positional parameter names are resolved
    and passed in order. In proxy mode it receives the cradle.

    Example:
      as_function(lambda db, cache: Repo(db, cache)).classic()
      as_function(make_repo, lifetime=Lifetime.SCOPED)

    """
    if not callable(fn):
        raise NotCallableError("as_function", "function", type(fn).__name__)

    resolve_fn = generate_resolve(fn, dependencies=dependencies)
    return _build(resolve_fn, fn, lifetime=lifetime, injector=injector, resolution_mode=resolution_mode)


def as_class(
    cls: type,
    *,
    lifetime: Lifetime | None = None,
    injector: Injector | None = None,
    resolution_mode: ResolutionMode | None = None,
    dependencies: Iterable[str] | None = None,
) -> Registration:
    """Register a class; each resolution constructs a new instance.

    Dependency names come from the constructor parameters of `cls`.
    """
    if not callable(cls):
        raise NotCallableError("as_class", "class", type(cls).__name__)

    def construct(*args: Any) -> Any:
        return cls(*args)

    construct.__qualname__ = f"construct[{_describe(cls)}]"

    resolve_fn = generate_resolve(construct, cls, dependencies=dependencies)
    return _build(resolve_fn, cls, lifetime=lifetime, injector=injector, resolution_mode=resolution_mode)


def _build(
    resolve_fn: ResolveFunction,
    source: object,
    *,
    lifetime: Lifetime | None,
    injector: Injector | None,
    resolution_mode: ResolutionMode | None,
) -> Registration:
    options: dict[str, Any] = {"lifetime": Lifetime.TRANSIENT}
    options.update(
        (key, value)
        for key, value in {"lifetime": lifetime, "injector": injector, "resolution_mode": resolution_mode}.items()
        if value is not None
    )

    logger.debug("Registering %s with dependencies %s", _describe(source), resolve_fn.dependencies)
    return Registration(resolve_fn, **options)


def _describe(target: object) -> str:
    return getattr(target, "__qualname__", None) or repr(target)
