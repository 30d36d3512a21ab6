from __future__ import annotations

from typing import Any


class ErrorGraphError(Exception):
    def __init__(self, mesg: str, code: int) -> None:
        super().__init__(mesg)
        self.mesg = mesg
        self.code = code

    def __str__(self) -> str:
        return f"[{self.code:03d}] {self.mesg}"

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.mesg, self.code))


# Error codes 100-199


class ValidationError(ErrorGraphError):
    def __init__(self, mesg: str) -> None:
        super().__init__(mesg, 100)

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.mesg,))
