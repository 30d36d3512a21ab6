from __future__ import annotations

from .errors import ErrorGraphError, ValidationError
from .logging import logger
from .models.error_like import ErrorLike, SerializedError
from .non_error import NonError
from .options import Options
from .registry import ErrorRegistry, error_constructors, error_registry
from .payload import PayloadCodec
from .serializer import deserialize, is_error_like, is_minimum_viable_serialized_error, serialize

__all__ = [
    "ErrorGraphError",
    "ErrorLike",
    "ErrorRegistry",
    "NonError",
    "Options",
    "PayloadCodec",
    "SerializedError",
    "ValidationError",
    "deserialize",
    "error_constructors",
    "error_registry",
    "is_error_like",
    "is_minimum_viable_serialized_error",
    "logger",
    "serialize",
]
