"""Shared infrastructure for examples."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from kungfu import Ok, Error, Result

from transmute import codec as K


# Types
@dataclass(frozen=True, slots=True)
class UserId:
    value: int


@dataclass(frozen=True, slots=True)
class User:
    id: UserId
    name: str
    email: str
    tier: str = "standard"


# Codecs
USER_ID = K.integer().map(UserId, lambda uid: uid.value)

USER = (
    K.record(User, arity=4)
    .field("id", K.attr("id"), USER_ID)
    .field("name", K.attr("name"), K.string())
    .field("email", K.attr("email"), K.string())
    .field("tier", K.attr("tier"), K.string())
    .build()
)


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def show(result: Result[object, K.DecodeErrors]) -> None:
    match result:
        case Ok(value):
            print(f"  ok: {value}")
        case Error(errors):
            for e in errors:
                print(f"  error: {e}")


def setup_logging() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
