from __future__ import annotations

import json
import logging
import traceback
from collections.abc import Mapping
from typing import Any, Final

logger = logging.getLogger(__name__)

MAX_SAFE_INTEGER: Final = 2**53 - 1


class NonError(Exception):
    """Wraps a thrown value that is not an exception.

    The message is the JSON encoding of the value, with integers beyond the
    interoperable range rendered as strings. When the value cannot be encoded
    the message falls back to ``str(value)``.
    """

    def __init__(self, value: Any) -> None:
        message = self.prepare_message(value)
        super().__init__(message)
        self._value = value
        self.name = "NonError"
        self.message = message

    @property
    def value(self) -> Any:
        return self._value

    @property
    def stack(self) -> str:
        return "".join(traceback.format_exception(self, chain=False))

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self._value,))

    @staticmethod
    def prepare_message(value: Any) -> str:
        try:
            return json.dumps(_safe_integers(value, ()))
        except (TypeError, ValueError, RecursionError) as e:
            logger.debug("cannot encode %s as json (%s), falling back to str", type(value).__name__, e)
            return str(value)


def _safe_integers(value: Any, ancestors: tuple[int, ...]) -> Any:
    match value:
        case bool():
            return value
        case int() if not (-MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER):
            return str(value)
        case Mapping() | list() | tuple():
            if id(value) in ancestors:
                msg = "circular reference detected"
                raise ValueError(msg)

            ancestors = (*ancestors, id(value))
            if isinstance(value, Mapping):
                return {k: _safe_integers(v, ancestors) for k, v in value.items()}
            return [_safe_integers(v, ancestors) for v in value]
        case _:
            return value
