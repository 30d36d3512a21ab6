from __future__ import annotations

import logging
import traceback
from collections.abc import Mapping
from typing import Any, Final

logger = logging.getLogger(__name__)

COMMON_PROPERTIES: Final[tuple[tuple[str, bool], ...]] = (
    ("name", False),
    ("message", False),
    ("stack", False),
    ("code", True),
    ("cause", False),
)
COMMON_NAMES: Final = frozenset(prop for prop, _ in COMMON_PROPERTIES)

# attributes an exception manages itself, never overwritten from the wire
RESERVED: Final = frozenset({"args", "with_traceback", "add_note"})


def project(obj: Any, prop: str) -> Any:
    """Return the value of a common property on ``obj``, or ``None`` when it is undefined.

    Exceptions expose their capabilities through Python's own machinery, so an
    explicit instance attribute wins and the rest is derived: the class name,
    ``str(exc)``, the formatted traceback and ``__cause__``.
    """
    match obj:
        case BaseException():
            return _project_exception(obj, prop)
        case Mapping():
            return obj.get(prop)
        case _:
            return getattr(obj, prop, None)


def _project_exception(exc: BaseException, prop: str) -> Any:
    attrs = vars(exc)

    match prop:
        case "name":
            name = attrs.get("name")
            return name if isinstance(name, str) else type(exc).__name__
        case "message":
            return attrs["message"] if attrs.get("message") is not None else str(exc)
        case "stack":
            if attrs.get("stack") is not None:
                return attrs["stack"]
            return "".join(traceback.format_exception(exc, chain=False))
        case "cause":
            return exc.__cause__ if exc.__cause__ is not None else attrs.get("cause")
        case _:
            return getattr(exc, prop, None)


def define(to: Any, prop: str, value: Any, *, enumerable: bool) -> None:
    match to:
        case BaseException():
            _define_exception(to, prop, value)
        case dict():
            if enumerable or prop not in to:
                to[prop] = value
        case list():
            pass
        case _:
            setattr(to, prop, value)


def _define_exception(exc: BaseException, prop: str, value: Any) -> None:
    match prop:
        case "message":
            exc.args = (value,)
            exc.message = value  # type: ignore[attr-defined]
        case "cause" if isinstance(value, BaseException):
            exc.__cause__ = value
        case _:
            assign(exc, prop, value)


def assign(to: Any, key: Any, value: Any) -> None:
    match to:
        case dict():
            to[key if isinstance(key, str) else str(key)] = value
        case list():
            to.append(value)
        case _:
            if not isinstance(key, str) or not key.isidentifier() or key.startswith("__") or key in RESERVED:
                logger.debug("skipping reserved attribute %r on %s", key, type(to).__name__)
                return
            setattr(to, key, value)


def ensure_capabilities(exc: BaseException) -> BaseException:
    for prop in ("name", "message", "stack"):
        if vars(exc).get(prop) is None:
            _define_exception(exc, prop, project(exc, prop))
    return exc
