from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from contextvars import ContextVar
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum, auto
from typing import Any, Final
from uuid import UUID

from errorgraph.capabilities import is_buffer_like, is_error_like, is_scalar, is_sequence, is_stream_like
from errorgraph.properties import COMMON_NAMES, COMMON_PROPERTIES, assign, define, ensure_capabilities, project
from errorgraph.registry import ErrorRegistry, error_registry

logger = logging.getLogger(__name__)

CIRCULAR: Final = "[Circular]"
BUFFER: Final = "[object Buffer]"
STREAM: Final = "[object Stream]"

_DROP: Final = object()

# ids of the objects whose custom serializer is currently running
_running_hooks: ContextVar[frozenset[int]] = ContextVar("errorgraph_running_hooks", default=frozenset())


class Direction(Enum):
    FORWARD = auto()
    REVERSE = auto()


def walk(
    from_: Any,
    seen: list[Any],
    to: Any = None,
    *,
    force_enumerable: bool,
    max_depth: float,
    depth: int,
    use_to_json: bool,
    direction: Direction,
    registry: ErrorRegistry = error_registry,
) -> Any:
    """Copy the graph rooted at ``from_`` into ``to``.

    Forward walks produce plain dicts and lists. Reverse walks instantiate an
    exception from ``registry`` wherever the source is error-like. ``seen``
    holds the ancestors of ``from_`` on the current branch only; every child
    receives its own extended copy.
    """
    # a seeded target is the reconstruction root and is never replaced by a custom serializer
    seeded = to is not None
    if to is None:
        to = _target(from_, direction, registry)

    seen = [*seen, from_]

    if depth >= max_depth:
        return _finish(to)

    if use_to_json and not seeded and (hook := custom_serializer(from_)) is not None and id(from_) not in _running_hooks.get():
        return _invoke(from_, hook)

    def convert(value: Any, next_depth: int) -> Any:
        if is_buffer_like(value):
            return BUFFER

        if is_stream_like(value):
            return STREAM

        if callable(value):
            return _DROP

        if is_scalar(value):
            return value

        if any(value is s for s in seen):
            return CIRCULAR

        return walk(
            value,
            seen,
            force_enumerable=force_enumerable,
            max_depth=max_depth,
            depth=next_depth,
            use_to_json=use_to_json,
            direction=direction,
            registry=registry,
        )

    for key, value in own_items(from_):
        # common properties of a reconstructed exception are written once, below
        if isinstance(to, BaseException) and key in COMMON_NAMES:
            continue

        converted = convert(value, depth + 1)
        if converted is _DROP:
            # keep the positions of the remaining elements
            if isinstance(to, list):
                assign(to, key, None)
            continue

        assign(to, key, converted)

    if not _projectable(from_, to):
        return _finish(to)

    # a cause chain stays at the depth of the error that carries it
    for prop, enumerable in COMMON_PROPERTIES:
        value = project(from_, prop)
        if value is None:
            continue

        converted = convert(value, depth)
        if converted is not _DROP:
            define(to, prop, converted, enumerable=force_enumerable or enumerable)

    return _finish(to)


def own_items(obj: Any) -> Iterator[tuple[Any, Any]]:
    match obj:
        case Mapping():
            yield from obj.items()
        case _ if is_sequence(obj):
            yield from enumerate(obj)
        case _:
            attrs = getattr(obj, "__dict__", None)
            if isinstance(attrs, Mapping):
                yield from ((k, v) for k, v in list(attrs.items()) if not (isinstance(k, str) and k.startswith("_")))


def custom_serializer(obj: Any) -> Callable[[], Any] | None:
    for attr in ("to_json", "toJSON"):
        hook = getattr(obj, attr, None)
        if callable(hook):
            return hook

    match obj:
        case datetime() | date() | time():
            return obj.isoformat
        case Decimal() | UUID():
            return obj.__str__
        case Enum():
            return lambda: obj.value
        case _:
            return None


def _invoke(obj: Any, hook: Callable[[], Any]) -> Any:
    token = _running_hooks.set(_running_hooks.get() | {id(obj)})
    try:
        logger.debug("using custom serializer of %s", type(obj).__name__)
        return hook()
    finally:
        _running_hooks.reset(token)


def _target(from_: Any, direction: Direction, registry: ErrorRegistry) -> Any:
    if is_sequence(from_):
        return []

    if direction is Direction.REVERSE and is_error_like(from_):
        return registry.get(project(from_, "name"))()

    return {}


def _projectable(from_: Any, to: Any) -> bool:
    return isinstance(from_, Mapping) or isinstance(to, BaseException) or is_error_like(from_)


def _finish(to: Any) -> Any:
    return ensure_capabilities(to) if isinstance(to, BaseException) else to
