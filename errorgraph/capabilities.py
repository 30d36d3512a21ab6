from __future__ import annotations

import io
from collections.abc import Mapping
from typing import Any, TypeAlias, TypeGuard

from errorgraph.models.error_like import ErrorLike, Pipeable, Readable

Scalar: TypeAlias = str | int | float | bool | None

SCALARS = (str, int, float, bool, type(None))
SEQUENCES = (list, tuple, set, frozenset)
BUFFERS = (bytes, bytearray, memoryview)


def is_scalar(value: Any) -> TypeGuard[Scalar]:
    return isinstance(value, SCALARS)


def is_object(value: Any) -> bool:
    return not is_scalar(value) and not callable(value)


def is_sequence(value: Any) -> bool:
    return isinstance(value, SEQUENCES)


def is_buffer_like(value: Any) -> bool:
    return isinstance(value, BUFFERS)


def is_stream_like(value: Any) -> bool:
    if isinstance(value, io.IOBase):
        return True

    if not is_object(value) or isinstance(value, (Mapping, *SEQUENCES, *BUFFERS)):
        return False

    return (isinstance(value, Pipeable) and callable(value.pipe)) or (isinstance(value, Readable) and callable(value.read))


def is_error_like(value: Any) -> bool:
    match value:
        case BaseException():
            return True
        case Mapping():
            return "name" in value and "message" in value and "stack" in value
        case _ if is_object(value) and not is_sequence(value):
            return isinstance(value, ErrorLike)
        case _:
            return False


def is_minimum_viable_serialized_error(value: Any) -> bool:
    match value:
        case Mapping():
            return "message" in value
        case _ if is_object(value) and not is_sequence(value) and not is_buffer_like(value):
            return hasattr(value, "message")
        case _:
            return False
