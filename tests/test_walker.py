from __future__ import annotations

import math
import threading
from datetime import date
from typing import Any

import pytest

from errorgraph import serialize
from errorgraph.registry import ErrorRegistry
from errorgraph.walker import CIRCULAR, Direction, custom_serializer, own_items, walk


def forward(value: Any, max_depth: float = math.inf) -> Any:
    return walk(value, [], force_enumerable=True, max_depth=max_depth, depth=0, use_to_json=True, direction=Direction.FORWARD)


def reverse(value: Any, to: Any = None, registry: ErrorRegistry | None = None) -> Any:
    kwargs = {"registry": registry} if registry else {}
    return walk(value, [], to, force_enumerable=False, max_depth=math.inf, depth=0, use_to_json=True, direction=Direction.REVERSE, **kwargs)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ({}, {}),
        ([], []),
        ({"a": [1, 2, {"b": "c"}]}, {"a": [1, 2, {"b": "c"}]}),
        ((1, (2, 3)), [1, [2, 3]]),
        (frozenset({1}), [1]),
    ],
)
def test_forward_targets(value: Any, expected: Any) -> None:
    assert forward(value) == expected


def test_forward_never_instantiates_errors() -> None:
    assert forward({"name": "TypeError", "message": "m", "stack": "s"}) == {"name": "TypeError", "message": "m", "stack": "s"}


def test_reverse_instantiates_errors() -> None:
    decoded = reverse({"name": "TypeError", "message": "m", "stack": "s"})

    assert isinstance(decoded, TypeError)
    assert decoded.args == ("m",)


def test_reverse_uses_registry() -> None:
    class QuotaError(Exception): ...

    registry = ErrorRegistry()
    registry.add(QuotaError)

    assert isinstance(reverse({"name": "QuotaError", "message": "m", "stack": "s"}, registry=registry), QuotaError)
    assert type(reverse({"name": "TypeError", "message": "m", "stack": "s"}, registry=registry)) is Exception


def test_reverse_seeded_target() -> None:
    seed = LookupError()
    assert reverse({"message": "m"}, seed) is seed
    assert seed.message == "m"


def test_reverse_plain_objects_keep_common_keys() -> None:
    assert reverse({"message": "m", "code": 1, "name": None}) == {"message": "m", "code": 1, "name": None}


def test_cycle_in_list() -> None:
    items: list[Any] = [1]
    items.append(items)

    assert forward({"items": items}) == {"items": [1, CIRCULAR]}


def test_cycle_through_several_levels() -> None:
    a: dict[str, Any] = {"name": "a"}
    b: dict[str, Any] = {"name": "b", "a": a}
    a["b"] = b

    assert forward(a) == {"name": "a", "b": {"name": "b", "a": CIRCULAR}}


def test_shared_objects_are_copied() -> None:
    shared = [1, 2]

    assert forward({"x": shared, "y": {"z": shared}}) == {"x": [1, 2], "y": {"z": [1, 2]}}


def test_depth_is_bounded_by_path_length() -> None:
    value = {f"k{i}": {"v": {"w": 1}} for i in range(10)}

    assert forward(value, max_depth=2) == {f"k{i}": {"v": {}} for i in range(10)}


def test_own_items() -> None:
    class Thing:
        def __init__(self) -> None:
            self.public = 1
            self._private = 2

    assert list(own_items(Thing())) == [("public", 1)]
    assert list(own_items({"a": 1})) == [("a", 1)]
    assert list(own_items(["a"])) == [(0, "a")]
    assert list(own_items(object())) == []


def test_custom_serializer() -> None:
    class CamelCase:
        def toJSON(self) -> str:  # noqa: N802
            return "camel"

    assert custom_serializer(date(2020, 1, 1))() == "2020-01-01"  # type: ignore[misc]
    assert custom_serializer(CamelCase())() == "camel"  # type: ignore[misc]
    assert custom_serializer({"to_json": "not a method"}) is None
    assert custom_serializer(ValueError()) is None


def test_custom_serializer_guard_is_per_thread() -> None:
    started = threading.Event()
    release = threading.Event()
    results: list[Any] = []

    class Slow:
        def to_json(self) -> str:
            started.set()
            release.wait(timeout=5)
            return "slow"

    slow = Slow()
    thread = threading.Thread(target=lambda: results.append(serialize({"v": slow})))
    thread.start()
    started.wait(timeout=5)

    # the other thread is inside slow.to_json, this one must still invoke it
    release.set()
    assert serialize({"v": slow}) == {"v": "slow"}

    thread.join(timeout=5)
    assert results == [{"v": "slow"}]
