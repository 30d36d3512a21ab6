from __future__ import annotations

import math
from dataclasses import dataclass

from errorgraph.errors import ValidationError


@dataclass(frozen=True)
class Options:
    max_depth: float = math.inf
    use_to_json: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not (isinstance(self.max_depth, int) or self.max_depth == math.inf):
            msg = f"max_depth must be `int` or `math.inf`, got {self.max_depth!r}"
            raise ValidationError(msg)

        if not (self.max_depth >= 0):
            msg = "max_depth must be greater than or equal to zero"
            raise ValidationError(msg)

        if not isinstance(self.use_to_json, bool):
            msg = f"use_to_json must be `bool`, got {type(self.use_to_json).__name__}"
            raise ValidationError(msg)

    def merge(self, *, max_depth: float | None = None, use_to_json: bool | None = None) -> Options:
        return Options(
            max_depth=max_depth if max_depth is not None else self.max_depth,
            use_to_json=use_to_json if use_to_json is not None else self.use_to_json,
        )
