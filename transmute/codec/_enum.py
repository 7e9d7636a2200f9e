"""
Enum codec — closed sum types by tag dispatch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from kungfu import Error

from transmute import value as V
from transmute import descriptor as D
from transmute.codec._codec import Codec
from transmute.codec._errors import (
    DecodeError,
    DecodeErrorKind,
    Decoded,
    mismatch,
)

logger = logging.getLogger(__name__)


class UnknownVariantError(LookupError):
    """tag_of() produced a tag that has no variant codec."""

    def __init__(self, tag: str, known: Sequence[str]) -> None:
        super().__init__(f"No variant for tag {tag!r}; known tags: {'/'.join(known)}")
        self.tag = tag
        self.known = tuple(known)


def enum[T](
    tag_of: Callable[[T], str],
    variants: Sequence[tuple[str, Codec[Any]]],
) -> Codec[T]:
    """
    Codec for a closed sum type.

    Each variant codec encodes/decodes the whole instance of that variant;
    the tag travels alongside as Enum(tag, payload).

    Example:
        @dataclass(frozen=True, slots=True)
        class Open:
            at: int

        @dataclass(frozen=True, slots=True)
        class Close:
            reason: str

        door_event = K.enum(
            lambda e: type(e).__name__,
            [
                ("Open", K.record(Open, 1).field("at", K.attr("at"), K.integer()).build()),
                ("Close", K.record(Close, 1).field("reason", K.attr("reason"), K.string()).build()),
            ],
        )

    Raises:
        ValueError: two variants share a tag.
    """
    table: dict[str, Codec[Any]] = {}
    for tag, codec in variants:
        if tag in table:
            raise ValueError(f"Duplicate enum tag: {tag!r}")
        table[tag] = codec

    tags = tuple(table)
    expected = "/".join(tags)

    def encoder(instance: T) -> V.Value:
        tag = tag_of(instance)
        codec = table.get(tag)
        if codec is None:
            raise UnknownVariantError(tag, tags)
        return V.Enum(tag, codec.encoder(instance))

    def decoder(raw: V.Value) -> Decoded[T]:
        match raw:
            case V.Enum(tag, payload):
                codec = table.get(tag)
                if codec is None:
                    return Error(
                        (DecodeError(DecodeErrorKind.UNKNOWN_TAG, expected, tag),)
                    )
                return codec.decoder(payload)
            case _:
                return mismatch("enum", V.label(raw))

    descriptor = D.Enum(tuple((tag, codec.descriptor) for tag, codec in table.items()))
    logger.debug("Built enum codec with variants %s", expected)
    return Codec(encoder=encoder, decoder=decoder, descriptor=descriptor)


__all__ = ("UnknownVariantError", "enum")
