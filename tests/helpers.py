from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest
from kungfu import Ok, Error, Result

from transmute import codec as K
from transmute.codec import DecodeError


def ok_value(r: Result[Any, Any]) -> Any:
    match r:
        case Ok(v):
            return v
        case Error(e):
            pytest.fail(f"expected Ok, got Error({e!r})")


def errors_of(r: Result[Any, Any]) -> tuple[DecodeError, ...]:
    match r:
        case Error(errs):
            assert errs, "error collection must not be empty"
            return errs
        case Ok(v):
            pytest.fail(f"expected Error, got Ok({v!r})")


def round_trip(codec: K.Codec[Any], value: Any) -> Any:
    return ok_value(K.decode(codec)(K.encode(codec)(value)))


# ═══════════════════════════════════════════════════════════════════════════════
# Sample domain
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class User:
    name: str
    age: int
    tags: list[str]


USER = (
    K.record(User, arity=3)
    .field("name", K.attr("name"), K.string())
    .field("age", K.attr("age"), K.integer())
    .field("tags", K.attr("tags"), K.list_of(K.string()))
    .build()
)


@dataclass(frozen=True, slots=True)
class Open:
    at: int


@dataclass(frozen=True, slots=True)
class Close:
    reason: str


type DoorEvent = Open | Close

DOOR_EVENT: K.Codec[DoorEvent] = K.enum(
    lambda e: type(e).__name__,
    [
        ("Open", K.record(Open, arity=1).field("at", K.attr("at"), K.integer()).build()),
        (
            "Close",
            K.record(Close, arity=1).field("reason", K.attr("reason"), K.string()).build(),
        ),
    ],
)
