"""
Record builder — assemble an object codec field by field.

    point = (
        K.record(Point, arity=2)
        .field("x", K.attr("x"), K.integer())
        .field("y", K.attr("y"), K.integer())
        .build()
    )

Field order is call order: it fixes both the encoded field order and the
positional order the constructor receives.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Final

from kungfu import Result, Ok, Error

from transmute import value as V
from transmute import descriptor as D
from transmute.codec._codec import Codec
from transmute.codec._errors import (
    DecodeError,
    DecodeErrorKind,
    Decoded,
    collect,
    mismatch,
    prefixed,
)

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Accessors
# ═══════════════════════════════════════════════════════════════════════════════


class Absent(Enum):
    """Marker returned by an accessor when a field has no value on an instance."""

    ABSENT = auto()


ABSENT: Final = Absent.ABSENT

type Accessor[R, T] = Callable[[R], Result[T, Absent]]
"""Partial getter used for encoding: Ok(value) or Error(ABSENT)."""


def present[R, T](getter: Callable[[R], T]) -> Accessor[R, T]:
    """Lift a total getter into an accessor that is always Ok."""

    def accessor(instance: R) -> Result[T, Absent]:
        return Ok(getter(instance))

    return accessor


def attr(name: str) -> Accessor[Any, Any]:
    """Accessor reading an attribute of the instance."""

    def accessor(instance: Any) -> Result[Any, Absent]:
        return Ok(getattr(instance, name))

    return accessor


# ═══════════════════════════════════════════════════════════════════════════════
# Builder Errors
# ═══════════════════════════════════════════════════════════════════════════════


class BuilderConsumedError(RuntimeError):
    """A builder handle was used after .field() or .build() consumed it."""


@dataclass(slots=True)
class _Linear:
    consumed: bool = False

    def consume(self, where: str) -> None:
        if self.consumed:
            raise BuilderConsumedError(
                f"RecordBuilder already consumed; call {where}() on the builder "
                "returned by the previous step"
            )
        self.consumed = True


# ═══════════════════════════════════════════════════════════════════════════════
# Record Builder
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class _Field:
    name: str
    accessor: Accessor[Any, Any]
    codec: Codec[Any]


@dataclass(frozen=True, slots=True)
class RecordBuilder[R]:
    """
    Linear builder for a record codec.

    Every .field() returns a fresh builder and retires this one,
    so a half-built record can't be continued twice.
    """

    _constructor: Callable[..., R]
    _arity: int
    _fields: tuple[_Field, ...] = ()
    _linear: _Linear = dataclasses.field(default_factory=_Linear)

    def field[T](
        self,
        name: str,
        accessor: Accessor[R, T],
        codec: Codec[T],
    ) -> RecordBuilder[R]:
        """Append a field. A rejected duplicate leaves this builder usable."""
        if any(f.name == name for f in self._fields):
            raise ValueError(f"Duplicate field name: {name!r}")

        self._linear.consume("field")

        return RecordBuilder(
            _constructor=self._constructor,
            _arity=self._arity,
            _fields=(*self._fields, _Field(name, accessor, codec)),
        )

    def build(self) -> Codec[R]:
        """Finalize into an immutable codec."""
        self._linear.consume("build")

        if len(self._fields) != self._arity:
            raise ValueError(
                f"Record declared with arity {self._arity}, "
                f"but {len(self._fields)} field(s) were added"
            )

        fields = self._fields
        constructor = self._constructor

        def encoder(instance: R) -> V.Value:
            encoded: list[tuple[str, V.Value]] = []
            for f in fields:
                match f.accessor(instance):
                    case Ok(v):
                        encoded.append((f.name, f.codec.encoder(v)))
                    case Error(_):
                        encoded.append((f.name, V.Null()))
            return V.Object(tuple(encoded))

        def decoder(raw: V.Value) -> Decoded[R]:
            match raw:
                case V.Object():
                    pass
                case _:
                    return mismatch("object", V.label(raw))

            match collect(_decode_field(f, raw) for f in fields):
                case Ok(values):
                    return Ok(constructor(*values))
                case Error(errs):
                    return Error(errs)

        descriptor = D.Object(tuple((f.name, f.codec.descriptor) for f in fields))
        logger.debug(
            "Built record codec for %s: %s",
            getattr(constructor, "__qualname__", constructor),
            D.render(descriptor),
        )
        return Codec(encoder=encoder, decoder=decoder, descriptor=descriptor)


def _decode_field(f: _Field, obj: V.Object) -> Decoded[Any]:
    raw = obj.get(f.name)
    if raw is None:
        return Error(
            (DecodeError(DecodeErrorKind.MISSING_FIELD, f.name, "nothing", (f.name,)),)
        )
    match f.codec.decoder(raw):
        case Error(errs):
            return Error(prefixed(errs, f.name))
        case ok:
            return ok


# ═══════════════════════════════════════════════════════════════════════════════
# record() — Entry Point
# ═══════════════════════════════════════════════════════════════════════════════


def record[R](constructor: Callable[..., R], arity: int) -> RecordBuilder[R]:
    """
    Start a record codec.

    constructor receives exactly `arity` positional values, one per field,
    in the order the fields are added.

    Example:
        @dataclass(frozen=True, slots=True)
        class User:
            name: str
            age: int

        user = (
            K.record(User, arity=2)
            .field("name", K.attr("name"), K.string())
            .field("age", K.attr("age"), K.integer())
            .build()
        )

    An accessor may return Error(K.ABSENT) instead; the field is then
    encoded as null.
    """
    if arity < 0:
        raise ValueError(f"arity must be non-negative, got {arity}")
    return RecordBuilder(_constructor=constructor, _arity=arity)


__all__ = (
    "Absent",
    "ABSENT",
    "Accessor",
    "present",
    "attr",
    "BuilderConsumedError",
    "RecordBuilder",
    "record",
)
