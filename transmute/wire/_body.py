"""
Body helpers — what a request dispatcher needs from a codec.

    res = decode_body(raw_bytes, order_codec)   # Ok(Order) | Error(DecodeErrors)
    res = decode_query(params, lookup_codec)    # GET: fields from the query string
    text = encode_body(receipt, receipt_codec)  # JSON text
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from kungfu import Ok, Error

from transmute import descriptor as D
from transmute.codec import Codec, DecodeError, DecodeErrorKind, DecodeErrors, Decoded
from transmute.wire._json import DEFAULT_FORMAT, JsonFormat, from_json, to_json


def _lift[T](data: Any, codec: Codec[T], fmt: JsonFormat) -> Decoded[T]:
    match from_json(data, codec.descriptor, fmt):
        case Ok(raw):
            return codec.decoder(raw)
        case Error(errs):
            return Error(errs)


def decode_body[T](
    payload: str | bytes,
    codec: Codec[T],
    fmt: JsonFormat = DEFAULT_FORMAT,
) -> Decoded[T]:
    """
    Decode a JSON request payload through a codec.

    An empty payload reads as JSON null. Malformed JSON, including nesting
    too deep for the parser, is a single shape-mismatch error at the root.
    """
    try:
        text = payload.decode("utf-8") if isinstance(payload, bytes) else payload
        data: Any = json.loads(text) if text.strip() else None
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        return Error(
            (
                DecodeError(
                    DecodeErrorKind.SHAPE_MISMATCH,
                    "json document",
                    f"malformed payload ({type(e).__name__})",
                ),
            )
        )

    return _lift(data, codec, fmt)


def _query_value(raw: str, desc: D.Descriptor) -> Any:
    match desc:
        case D.String() | D.Optional(D.String()):
            return raw
        case _:
            try:
                return json.loads(raw)
            except (json.JSONDecodeError, RecursionError):
                return raw


def decode_query[T](
    params: Iterable[tuple[str, str]],
    codec: Codec[T],
    fmt: JsonFormat = DEFAULT_FORMAT,
) -> Decoded[T]:
    """
    Decode query string pairs through an object codec.

    Each field reads its parameter as JSON, except string fields which take
    the raw text. A list field collects every repetition of its parameter;
    any other field takes the last one. Codecs that are not objects see null.

    Example:
        decode_query([("id", "3"), ("tag", "a"), ("tag", "b")], lookup_codec)
    """
    grouped: dict[str, list[str]] = {}
    for key, raw in params:
        grouped.setdefault(key, []).append(raw)

    desc = codec.descriptor
    if not isinstance(desc, D.Object):
        return _lift(None, codec, fmt)

    data: dict[str, Any] = {}
    for name, field_desc in desc.fields:
        if name not in grouped:
            continue
        match field_desc:
            case D.List(of) | D.Optional(D.List(of)):
                data[name] = [_query_value(raw, of) for raw in grouped[name]]
            case _:
                data[name] = _query_value(grouped[name][-1], field_desc)

    return _lift(data, codec, fmt)


def encode_body[T](value: T, codec: Codec[T], fmt: JsonFormat = DEFAULT_FORMAT) -> str:
    """Encode a value through a codec into JSON text."""
    return json.dumps(
        to_json(codec.encoder(value), fmt, codec.descriptor),
        ensure_ascii=False,
    )


def summarize(errors: DecodeErrors, limit: int = 5) -> str:
    """Human-readable summary for a client error response."""
    shown = "; ".join(str(e) for e in errors[:limit])
    hidden = len(errors) - limit
    if hidden > 0:
        shown += f" (and {hidden} more)"
    return f"Invalid request body: {shown}"


def errors_to_json(errors: DecodeErrors) -> list[dict[str, Any]]:
    return [
        {
            "kind": e.kind.name.lower(),
            "path": e.render_path(),
            "expected": e.expected,
            "actual": e.actual,
            "message": str(e),
        }
        for e in errors
    ]


__all__ = ("decode_body", "decode_query", "encode_body", "summarize", "errors_to_json")
