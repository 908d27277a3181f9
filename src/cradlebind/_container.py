from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from ._cradle import Cradle


class ResolutionMode(Enum):
    CLASSIC = "classic"
    PROXY = "proxy"


@dataclass
class ContainerOptions:
    """Container-wide settings read by registrations at resolve time.

    `resolution_mode` is the default injection style for registrations that
    don't set their own. `None` means proxy mode.
    """

    resolution_mode: ResolutionMode | None = None


class _HasResolutionMode(Protocol):
    @property
    def resolution_mode(self) -> ResolutionMode | None: ...


@runtime_checkable
class Container(Protocol):
    """What a registration needs from the container that resolves it.

    - `options.resolution_mode`: container-wide default injection style
    - `resolve(name)`: produce the value registered under `name`, raising if unknown
    - `cradle`: name-indexed view equivalent to calling `resolve`
    """

    @property
    def options(self) -> _HasResolutionMode: ...

    @property
    def cradle(self) -> Cradle: ...

    def resolve(self, name: str) -> object: ...
