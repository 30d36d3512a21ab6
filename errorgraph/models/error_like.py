from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from typing_extensions import TypedDict


@runtime_checkable
class ErrorLike(Protocol):
    name: str
    message: str
    stack: str


@runtime_checkable
class Readable(Protocol):
    def read(self, *args: Any) -> Any: ...


@runtime_checkable
class Pipeable(Protocol):
    def pipe(self, *args: Any) -> Any: ...


class SerializedError(TypedDict, total=False):
    name: str
    message: str
    stack: str
    code: Any
    cause: Any
