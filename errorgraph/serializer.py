from __future__ import annotations

from typing import TYPE_CHECKING, Any

from errorgraph.capabilities import is_error_like, is_minimum_viable_serialized_error, is_scalar
from errorgraph.non_error import NonError
from errorgraph.options import Options
from errorgraph.properties import project
from errorgraph.registry import error_registry
from errorgraph.walker import Direction, walk

if TYPE_CHECKING:
    from errorgraph.models.error_like import SerializedError

__all__ = ["deserialize", "is_error_like", "is_minimum_viable_serialized_error", "serialize"]


def serialize(value: Any, options: Options | None = None, *, max_depth: float | None = None, use_to_json: bool | None = None) -> SerializedError | Any:
    opts = (options or Options()).merge(max_depth=max_depth, use_to_json=use_to_json)

    # a thrown callable is described, callables nested in an error are dropped
    if callable(value):
        name = getattr(value, "__name__", None)
        return f"[Function: {name if name and name != '<lambda>' else 'anonymous'}]"

    if is_scalar(value):
        return value

    return walk(
        value,
        [],
        force_enumerable=True,
        max_depth=opts.max_depth,
        depth=0,
        use_to_json=opts.use_to_json,
        direction=Direction.FORWARD,
    )


def deserialize(value: Any, options: Options | None = None, *, max_depth: float | None = None, use_to_json: bool | None = None) -> BaseException:
    opts = (options or Options()).merge(max_depth=max_depth, use_to_json=use_to_json)

    if isinstance(value, BaseException):
        return value

    if not is_minimum_viable_serialized_error(value):
        return NonError(value)

    return walk(
        value,
        [],
        error_registry.get(project(value, "name"))(),
        force_enumerable=False,
        max_depth=opts.max_depth,
        depth=0,
        use_to_json=opts.use_to_json,
        direction=Direction.REVERSE,
    )
