from __future__ import annotations

import inspect
import logging
import types
from typing import TYPE_CHECKING, Any, NamedTuple, Union, get_args, get_origin, get_type_hints

from ._cradle import Cradle


if TYPE_CHECKING:
    from collections.abc import Callable


logger = logging.getLogger(__name__)

_POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
_UNION_ORIGINS = (Union, types.UnionType)


class TargetSignature(NamedTuple):
    dependencies: tuple[str, ...]
    # whether the target can be called with one positional argument (the cradle)
    accepts_cradle: bool


def parse_signature(target: Callable[..., Any]) -> TargetSignature:
    """Read the dependency names of `target` and whether it accepts a cradle.

    The names are the target's positional parameters; for a class they come
    from its constructor, without `self`. `*args`, keyword-only parameters
    and `**kwargs` are never dependencies.

    No names are returned when the target takes no positional parameters,
    when its signature cannot be inspected, or when one of them is annotated
    with `Cradle` (also `Cradle | None`): such a target wants the whole cradle
    as a single argument rather than named dependencies.
    """
    try:
        sig = inspect.signature(target)
    except (TypeError, ValueError) as exc:
        logger.warning("Unable to read signature of %r (%s); assuming no dependencies", target, exc)
        return TargetSignature(dependencies=(), accepts_cradle=True)

    params = [p for p in sig.parameters.values() if p.kind in _POSITIONAL_KINDS]
    accepts_cradle = bool(params) or any(
        p.kind is inspect.Parameter.VAR_POSITIONAL for p in sig.parameters.values()
    )
    if not params:
        return TargetSignature(dependencies=(), accepts_cradle=accepts_cradle)

    hints = _get_type_hints(target)
    if any(_is_cradle_annotation(hints.get(p.name, p.annotation)) for p in params):
        return TargetSignature(dependencies=(), accepts_cradle=True)

    return TargetSignature(dependencies=tuple(p.name for p in params), accepts_cradle=True)


def parse_dependencies(target: Callable[..., Any]) -> tuple[str, ...]:
    """Return the names of the dependencies `target` declares, in order."""
    return parse_signature(target).dependencies


def _is_cradle_annotation(ann: object) -> bool:
    if ann is Cradle:
        return True

    if get_origin(ann) in _UNION_ORIGINS:
        return any(_is_cradle_annotation(arg) for arg in get_args(ann))

    # unevaluated annotation, e.g. when get_type_hints failed
    if isinstance(ann, str):
        return any(part.strip().rpartition(".")[2] == Cradle.__name__ for part in ann.split("|"))

    return False


def _get_type_hints(target: Callable[..., Any]) -> dict[str, Any]:
    hint_source = target
    if inspect.isclass(target):
        hint_source = inspect.getattr_static(target, "__init__", None) or target

    try:
        hints = get_type_hints(hint_source)
    except TypeError:
        hints = {}
    except NameError as exc:
        logger.warning(
            "'%s' name error retrieving %s type hints", exc.name, getattr(target, "__qualname__", repr(target))
        )
        hints = {}

    return hints
