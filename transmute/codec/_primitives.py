"""
Primitive codecs — string, bool, float, int, null.
"""

from __future__ import annotations

from kungfu import Ok

from transmute import value as V
from transmute import descriptor as D
from transmute.codec._codec import Codec
from transmute.codec._errors import Decoded, mismatch


def _decode_string(raw: V.Value) -> Decoded[str]:
    match raw:
        case V.String(s):
            return Ok(s)
        case _:
            return mismatch("string", V.label(raw))


def _decode_bool(raw: V.Value) -> Decoded[bool]:
    match raw:
        case V.Bool(b):
            return Ok(b)
        case _:
            return mismatch("bool", V.label(raw))


def _decode_float(raw: V.Value) -> Decoded[float]:
    match raw:
        case V.Float(f):
            return Ok(f)
        case _:
            return mismatch("float", V.label(raw))


def _decode_int(raw: V.Value) -> Decoded[int]:
    match raw:
        case V.Int(i):
            return Ok(i)
        case _:
            return mismatch("int", V.label(raw))


def _decode_null(raw: V.Value) -> Decoded[None]:
    match raw:
        case V.Null():
            return Ok(None)
        case _:
            return mismatch("null", V.label(raw))


_STRING: Codec[str] = Codec(encoder=V.String, decoder=_decode_string, descriptor=D.String())
_BOOL: Codec[bool] = Codec(encoder=V.Bool, decoder=_decode_bool, descriptor=D.Bool())
_FLOAT: Codec[float] = Codec(encoder=V.Float, decoder=_decode_float, descriptor=D.Float())
_INT: Codec[int] = Codec(encoder=V.Int, decoder=_decode_int, descriptor=D.Int())
_NULL: Codec[None] = Codec(
    encoder=lambda _: V.Null(),
    decoder=_decode_null,
    descriptor=D.Null(),
)


def string() -> Codec[str]:
    return _STRING


def boolean() -> Codec[bool]:
    return _BOOL


def floating() -> Codec[float]:
    return _FLOAT


def integer() -> Codec[int]:
    return _INT


def null() -> Codec[None]:
    return _NULL


__all__ = ("string", "boolean", "floating", "integer", "null")
