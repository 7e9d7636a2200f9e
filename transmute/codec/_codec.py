"""
Codec — encoder, decoder and descriptor for one application type.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Ok, Error

from transmute import value as V
from transmute import descriptor as D
from transmute.codec._errors import Decoded

# ═══════════════════════════════════════════════════════════════════════════════
# Function Types
# ═══════════════════════════════════════════════════════════════════════════════

type Encoder[T] = Callable[[T], V.Value]
type Decoder[T] = Callable[[V.Value], Decoded[T]]


# ═══════════════════════════════════════════════════════════════════════════════
# Codec
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Codec[T]:
    """
    Immutable encoder/decoder pair plus its type descriptor.

    Built once, usually at import time, then shared freely.
    Encoding never fails; decoding returns Result[T, DecodeErrors].
    """

    encoder: Encoder[T]
    decoder: Decoder[T]
    descriptor: D.Descriptor

    def map[U](
        self,
        decode: Callable[[T], U],
        encode: Callable[[U], T],
    ) -> Codec[U]:
        """
        Reuse this codec for a wrapper type. Descriptor is unchanged.

        Example:
            user_id = K.integer().map(UserId, lambda uid: uid.value)
        """
        inner_encode = self.encoder
        inner_decode = self.decoder

        def encoder(value: U) -> V.Value:
            return inner_encode(encode(value))

        def decoder(raw: V.Value) -> Decoded[U]:
            match inner_decode(raw):
                case Ok(v):
                    return Ok(decode(v))
                case Error(errs):
                    return Error(errs)

        return Codec(encoder=encoder, decoder=decoder, descriptor=self.descriptor)


# ═══════════════════════════════════════════════════════════════════════════════
# Facade
# ═══════════════════════════════════════════════════════════════════════════════


def encode[T](codec: Codec[T]) -> Encoder[T]:
    """Encoding function of a codec."""
    return codec.encoder


def decode[T](codec: Codec[T]) -> Decoder[T]:
    """Decoding function of a codec."""
    return codec.decoder


def type_descriptor[T](codec: Codec[T]) -> D.Descriptor:
    """Structural descriptor of a codec, available without any value."""
    return codec.descriptor


__all__ = (
    "Encoder",
    "Decoder",
    "Codec",
    "encode",
    "decode",
    "type_descriptor",
)
