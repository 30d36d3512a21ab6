from __future__ import annotations

import json
from typing import Any

from errorgraph.options import Options
from errorgraph.serializer import deserialize, serialize


class PayloadCodec:
    """Reads and writes the JSON text log collectors accept: ``{"data": <serialized error>}``."""

    def __init__(self, options: Options | None = None, key: str = "data") -> None:
        self._options = options or Options()
        self._key = key

    @property
    def options(self) -> Options:
        return self._options

    def encode(self, error: Any) -> str:
        return json.dumps({self._key: serialize(error, self._options)})

    def decode(self, payload: str | bytes) -> BaseException | None:
        match json.loads(payload):
            case {self._key: data}:
                return deserialize(data, self._options)
            case _:
                return None
