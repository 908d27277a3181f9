"""Registration and resolution building blocks for dependency injection.

This package turns values, factory functions and classes into registrations
whose `resolve(container)` produces a fully-wired instance. Dependencies are
injected either one by one, from the target's parameter names (classic mode),
or through a single cradle argument the target looks names up in (proxy mode).

Exports:
- `as_value`, `as_function`, `as_class`: registration builders.
- `Registration`, `ValueRegistration`: what the builders return. `Registration`
  has chainable setters (`scoped()`, `classic()`, `inject(...)`, ...).
- `Lifetime`, `ResolutionMode`: registration settings.
- `Container`, `ContainerOptions`: what a container must provide to resolve
  registrations.
- `Cradle`, `ContainerCradle`, `InjectorCradle`: name lookup views handed to
  proxy-mode targets.
- `CradlebindError`, `CradlebindTypeError`, `NotCallableError`: errors.
"""

from ._container import Container, ContainerOptions, ResolutionMode
from ._cradle import ContainerCradle, Cradle, InjectorCradle
from ._dependencies import TargetSignature, parse_dependencies, parse_signature
from ._errors import CradlebindError, CradlebindTypeError, NotCallableError
from ._registrations import Lifetime, Registration, ValueRegistration, as_class, as_function, as_value
from ._resolve import ResolveFunction, generate_resolve


__all__ = [
    "Container",
    "ContainerCradle",
    "ContainerOptions",
    "Cradle",
    "CradlebindError",
    "CradlebindTypeError",
    "InjectorCradle",
    "Lifetime",
    "NotCallableError",
    "Registration",
    "ResolutionMode",
    "ResolveFunction",
    "TargetSignature",
    "ValueRegistration",
    "as_class",
    "as_function",
    "as_value",
    "generate_resolve",
    "parse_dependencies",
    "parse_signature",
]
