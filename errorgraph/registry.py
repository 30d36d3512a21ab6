from __future__ import annotations

import builtins
import logging
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, TypeAlias

from errorgraph.errors import ValidationError

logger = logging.getLogger(__name__)

ErrorFactory: TypeAlias = Callable[[], BaseException]

STANDARD_KINDS: tuple[type[BaseException], ...] = (
    ArithmeticError,
    AssertionError,
    AttributeError,
    BlockingIOError,
    BrokenPipeError,
    BufferError,
    ChildProcessError,
    ConnectionAbortedError,
    ConnectionError,
    ConnectionRefusedError,
    ConnectionResetError,
    EOFError,
    FileExistsError,
    FileNotFoundError,
    FloatingPointError,
    ImportError,
    IndentationError,
    IndexError,
    InterruptedError,
    IsADirectoryError,
    KeyError,
    LookupError,
    MemoryError,
    ModuleNotFoundError,
    NameError,
    NotADirectoryError,
    NotImplementedError,
    OSError,
    OverflowError,
    PermissionError,
    ProcessLookupError,
    RecursionError,
    ReferenceError,
    RuntimeError,
    SyntaxError,
    SystemError,
    TabError,
    TimeoutError,
    TypeError,
    UnboundLocalError,
    UnicodeError,
    ValueError,
    ZeroDivisionError,
)

# kinds that only exist on some interpreters
OPTIONAL_KINDS: tuple[str, ...] = (
    "EncodingWarning",
    "PythonFinalizationError",
)


class ErrorRegistry:
    def __init__(self, fallback: ErrorFactory = Exception) -> None:
        self._fallback = fallback
        self._factories: dict[str, ErrorFactory] = {}
        self._frozen = False

    def add(self, kind: ErrorFactory, name: str | None = None) -> None:
        if self._frozen:
            msg = "registry is frozen"
            raise ValidationError(msg)

        if not callable(kind):
            msg = f"kind must be an exception class or factory, got {type(kind).__name__}"
            raise ValidationError(msg)

        if not name and getattr(kind, "__name__", "<lambda>") == "<lambda>":
            msg = "name required when registering a lambda or anonymous factory"
            raise ValidationError(msg)

        name = name or kind.__name__
        if name in self._factories:
            msg = f"error kind {name} already registered"
            raise ValidationError(msg)

        self._factories[name] = kind

    def get(self, name: Any) -> ErrorFactory:
        if isinstance(name, str) and name in self._factories:
            return self._factories[name]

        logger.debug("error kind %r not registered, falling back to %s", name, getattr(self._fallback, "__name__", "fallback"))
        return self._fallback

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def view(self) -> Mapping[str, ErrorFactory]:
        return MappingProxyType(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)


def default_registry() -> ErrorRegistry:
    registry = ErrorRegistry()
    for kind in STANDARD_KINDS:
        registry.add(kind)

    for name in OPTIONAL_KINDS:
        kind = getattr(builtins, name, None)
        if isinstance(kind, type) and issubclass(kind, BaseException):
            registry.add(kind, name)

    registry.freeze()
    return registry


error_registry = default_registry()
error_constructors = error_registry.view()
