"""
Composite codecs — list, optional, result, dict.

Aggregate decoders (list, dict) never stop at the first bad element:
every element is decoded and all errors are reported together.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from kungfu import Result, Ok, Error, Option, Some, Nothing

from transmute import value as V
from transmute import descriptor as D
from transmute.codec._codec import Codec
from transmute.codec._errors import (
    DecodeError,
    Decoded,
    collect,
    mismatch,
    prefixed,
)

# ═══════════════════════════════════════════════════════════════════════════════
# list_of()
# ═══════════════════════════════════════════════════════════════════════════════


def list_of[T](of: Codec[T]) -> Codec[list[T]]:
    """
    Codec for a sequence. Decodes to a list, in original order.

    Each element error is located at its index.
    """
    encode_item = of.encoder
    decode_item = of.decoder

    def encoder(items: Sequence[T]) -> V.Value:
        return V.List(tuple(encode_item(item) for item in items))

    def decoder(raw: V.Value) -> Decoded[list[T]]:
        match raw:
            case V.List(items):
                return collect(_at(decode_item(item), i) for i, item in enumerate(items))
            case _:
                return mismatch("list", V.label(raw))

    return Codec(encoder=encoder, decoder=decoder, descriptor=D.List(of.descriptor))


# ═══════════════════════════════════════════════════════════════════════════════
# optional()
# ═══════════════════════════════════════════════════════════════════════════════


def optional[T](of: Codec[T]) -> Codec[Option[T]]:
    """
    Codec for kungfu Option.

    Nothing() encodes to an explicit absent tag, it is never dropped.
    """
    encode_inner = of.encoder
    decode_inner = of.decoder

    def encoder(opt: Option[T]) -> V.Value:
        match opt:
            case Some(v):
                return V.Optional(encode_inner(v))
            case _:
                return V.Optional(None)

    def decoder(raw: V.Value) -> Decoded[Option[T]]:
        match raw:
            case V.Optional(None):
                return Ok(Nothing())
            case V.Optional(inner) if inner is not None:
                match decode_inner(inner):
                    case Ok(v):
                        return Ok(Some(v))
                    case Error(errs):
                        return Error(errs)
            case _:
                return mismatch("optional", V.label(raw))

    return Codec(encoder=encoder, decoder=decoder, descriptor=D.Optional(of.descriptor))


# ═══════════════════════════════════════════════════════════════════════════════
# result()
# ═══════════════════════════════════════════════════════════════════════════════


def result[T, E](ok: Codec[T], error: Codec[E]) -> Codec[Result[T, E]]:
    """
    Codec for kungfu Result. Dispatches on the ok/error side.

    Inner errors are located under "ok" or "error".
    """

    def encoder(res: Result[T, E]) -> V.Value:
        match res:
            case Ok(v):
                return V.ResultValue(True, ok.encoder(v))
            case Error(e):
                return V.ResultValue(False, error.encoder(e))

    def decoder(raw: V.Value) -> Decoded[Result[T, E]]:
        match raw:
            case V.ResultValue(True, inner):
                match ok.decoder(inner):
                    case Ok(v):
                        return Ok(Ok(v))
                    case Error(errs):
                        return Error(prefixed(errs, "ok"))
            case V.ResultValue(False, inner):
                match error.decoder(inner):
                    case Ok(e):
                        return Ok(Error(e))
                    case Error(errs):
                        return Error(prefixed(errs, "error"))
            case _:
                return mismatch("result", V.label(raw))

    return Codec(
        encoder=encoder,
        decoder=decoder,
        descriptor=D.Result(ok.descriptor, error.descriptor),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# dict_of()
# ═══════════════════════════════════════════════════════════════════════════════


def dict_of[K, T](key: Codec[K], value: Codec[T]) -> Codec[dict[K, T]]:
    """
    Codec for a mapping.

    Decoding visits every entry. Key errors are located at (i, "key"),
    value errors at (i, "value"); all of them are merged in entry order.
    Duplicate decoded keys collapse, the last one wins.
    """

    def encoder(mapping: Mapping[K, T]) -> V.Value:
        return V.Dict(
            tuple((key.encoder(k), value.encoder(v)) for k, v in mapping.items())
        )

    def decoder(raw: V.Value) -> Decoded[dict[K, T]]:
        match raw:
            case V.Dict(entries):
                pass
            case _:
                return mismatch("dict", V.label(raw))

        pairs: list[tuple[K, T]] = []
        errors: list[DecodeError] = []

        for i, (raw_key, raw_value) in enumerate(entries):
            key_result = key.decoder(raw_key)
            value_result = value.decoder(raw_value)

            match key_result, value_result:
                case Ok(k), Ok(v):
                    pairs.append((k, v))
                case _:
                    if isinstance(key_result, Error):
                        errors.extend(_errors_of(key_result, i, "key"))
                    if isinstance(value_result, Error):
                        errors.extend(_errors_of(value_result, i, "value"))

        if errors:
            return Error(tuple(errors))
        return Ok(dict(pairs))

    return Codec(
        encoder=encoder,
        decoder=decoder,
        descriptor=D.Dict(key.descriptor, value.descriptor),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════════


def _at[T](r: Decoded[T], index: int) -> Decoded[T]:
    match r:
        case Error(errs):
            return Error(prefixed(errs, index))
        case _:
            return r


def _errors_of(r: Decoded[object], index: int, side: str) -> list[DecodeError]:
    match r:
        case Error(errs):
            return [e.at(side).at(index) for e in errs]
        case _:
            return []


__all__ = ("list_of", "optional", "result", "dict_of")
