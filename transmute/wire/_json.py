"""
JSON bridge — structured values to JSON data and back.

Plain JSON has no optional, result or enum tags, so reading it is
descriptor-directed. Layout:

    Optional   absent -> null, present -> inner
    Result     {"ok": x} | {"error": x}
    Enum       {"tag": "Open", "payload": x}
    Dict       {"k": v, ...} for string keys, else [[k, v], ...]
    Object     {"name": v, ...}

Keys are configurable through JsonFormat.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from kungfu import Ok, Error

from transmute import value as V
from transmute import descriptor as D
from transmute.codec import DecodeError, DecodeErrorKind, Decoded, collect

type JsonData = None | bool | int | float | str | list[JsonData] | dict[str, JsonData]

# ═══════════════════════════════════════════════════════════════════════════════
# JsonFormat — Configuration
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class JsonFormat:
    """
    JSON layout configuration.

    Example:
        fmt = JsonFormat().with_enum_keys(tag="type", payload="data")

    Note: Immutable — each method returns new JsonFormat.
    """

    tag_key: str = "tag"
    payload_key: str = "payload"
    ok_key: str = "ok"
    error_key: str = "error"

    def with_enum_keys(self, *, tag: str, payload: str) -> JsonFormat:
        """Keys of the enum wrapper object."""
        if tag == payload:
            raise ValueError("tag and payload keys must differ")
        return replace(self, tag_key=tag, payload_key=payload)

    def with_result_keys(self, *, ok: str, error: str) -> JsonFormat:
        """Keys of the result wrapper object."""
        if ok == error:
            raise ValueError("ok and error keys must differ")
        return replace(self, ok_key=ok, error_key=error)


DEFAULT_FORMAT = JsonFormat()


# ═══════════════════════════════════════════════════════════════════════════════
# to_json() — Value → JSON Data
# ═══════════════════════════════════════════════════════════════════════════════


def to_json(
    value: V.Value,
    fmt: JsonFormat = DEFAULT_FORMAT,
    desc: D.Descriptor | None = None,
) -> JsonData:
    """
    Lower a structured value into JSON-compatible data.

    With a descriptor, a dict's layout follows its key descriptor, so an
    empty map keyed by non-strings is still written as []. Without one the
    layout is inferred from the keys present.
    """
    match value:
        case V.Bool(b):
            return b
        case V.String(s):
            return s
        case V.Int(i):
            return i
        case V.Float(f):
            return f
        case V.Null():
            return None
        case V.List(items):
            of = desc.of if isinstance(desc, D.List) else None
            return [to_json(item, fmt, of) for item in items]
        case V.Dict(entries):
            if isinstance(desc, D.Dict):
                key_desc, val_desc = desc.key, desc.value
                as_object = isinstance(key_desc, D.String)
            else:
                key_desc = val_desc = None
                as_object = all(isinstance(k, V.String) for k, _ in entries)
            if as_object:
                return {k.value: to_json(v, fmt, val_desc) for k, v in entries}  # type: ignore[union-attr]
            return [[to_json(k, fmt, key_desc), to_json(v, fmt, val_desc)] for k, v in entries]
        case V.Optional(inner):
            of = desc.of if isinstance(desc, D.Optional) else None
            return None if inner is None else to_json(inner, fmt, of)
        case V.ResultValue(is_ok, inner):
            key = fmt.ok_key if is_ok else fmt.error_key
            side: D.Descriptor | None = None
            if isinstance(desc, D.Result):
                side = desc.ok if is_ok else desc.error
            return {key: to_json(inner, fmt, side)}
        case V.Object(fields):
            field_descs = dict(desc.fields) if isinstance(desc, D.Object) else {}
            return {name: to_json(v, fmt, field_descs.get(name)) for name, v in fields}
        case V.Enum(tag, payload):
            variant = desc.variant(tag) if isinstance(desc, D.Enum) else None
            return {fmt.tag_key: tag, fmt.payload_key: to_json(payload, fmt, variant)}


# ═══════════════════════════════════════════════════════════════════════════════
# from_json() — JSON Data → Value
# ═══════════════════════════════════════════════════════════════════════════════


def json_label(data: Any) -> str:
    """Label of raw JSON data, in the structured value vocabulary."""
    match data:
        case None:
            return "null"
        case bool():
            return "bool"
        case int():
            return "int"
        case float():
            return "float"
        case str():
            return "string"
        case list():
            return "list"
        case dict():
            return "object"
        case _:
            return type(data).__name__


def _mismatch(desc: D.Descriptor, data: Any) -> Decoded[V.Value]:
    return Error(
        (DecodeError(DecodeErrorKind.SHAPE_MISMATCH, D.label(desc), json_label(data)),)
    )


def _located(r: Decoded[V.Value], *segments: str | int) -> Decoded[V.Value]:
    match r:
        case Error(errs):
            out = errs
            for segment in reversed(segments):
                out = tuple(e.at(segment) for e in out)
            return Error(out)
        case _:
            return r


def _failures(r: Decoded[V.Value]) -> tuple[DecodeError, ...]:
    match r:
        case Error(errs):
            return errs
        case _:
            return ()


def from_json(
    data: Any,
    desc: D.Descriptor,
    fmt: JsonFormat = DEFAULT_FORMAT,
) -> Decoded[V.Value]:
    """
    Lift JSON data into a structured value shaped by `desc`.

    A missing object field is a missing-field error, unless it is optional,
    in which case it reads as absent. Unknown object keys are dropped.
    Ints are accepted where floats are expected; bools never count as numbers.
    """
    match desc:
        case D.Bool():
            return Ok(V.Bool(data)) if isinstance(data, bool) else _mismatch(desc, data)
        case D.String():
            return Ok(V.String(data)) if isinstance(data, str) else _mismatch(desc, data)
        case D.Int():
            if isinstance(data, int) and not isinstance(data, bool):
                return Ok(V.Int(data))
            return _mismatch(desc, data)
        case D.Float():
            if isinstance(data, (int, float)) and not isinstance(data, bool):
                return Ok(V.Float(float(data)))
            return _mismatch(desc, data)
        case D.Null():
            return Ok(V.Null()) if data is None else _mismatch(desc, data)
        case D.List(of):
            if not isinstance(data, list):
                return _mismatch(desc, data)
            match collect(_located(from_json(item, of, fmt), i) for i, item in enumerate(data)):
                case Ok(items):
                    return Ok(V.List(tuple(items)))
                case Error(errs):
                    return Error(errs)
        case D.Dict(key, val):
            return _dict_from_json(data, desc, key, val, fmt)
        case D.Optional(of):
            if data is None:
                return Ok(V.Optional(None))
            match from_json(data, of, fmt):
                case Ok(inner):
                    return Ok(V.Optional(inner))
                case err:
                    return err
        case D.Result(ok, error):
            return _result_from_json(data, desc, ok, error, fmt)
        case D.Object(fields):
            if not isinstance(data, dict):
                return _mismatch(desc, data)
            lifted = collect(_field_from_json(data, name, d, fmt) for name, d in fields)
            match lifted:
                case Ok(values):
                    return Ok(V.Object(tuple(zip((name for name, _ in fields), values))))
                case Error(errs):
                    return Error(errs)
        case D.Enum():
            return _enum_from_json(data, desc, fmt)


def _field_from_json(
    data: dict[str, Any],
    name: str,
    desc: D.Descriptor,
    fmt: JsonFormat,
) -> Decoded[V.Value]:
    if name not in data and not isinstance(desc, D.Optional):
        return Error(
            (DecodeError(DecodeErrorKind.MISSING_FIELD, name, "nothing", (name,)),)
        )
    return _located(from_json(data.get(name), desc, fmt), name)


def _dict_from_json(
    data: Any,
    desc: D.Dict,
    key: D.Descriptor,
    val: D.Descriptor,
    fmt: JsonFormat,
) -> Decoded[V.Value]:
    pairs: list[tuple[Any, Any]]
    if isinstance(data, dict):
        pairs = list(data.items())
    elif isinstance(data, list) and all(
        isinstance(p, list) and len(p) == 2 for p in data
    ):
        pairs = [(p[0], p[1]) for p in data]
    else:
        return _mismatch(desc, data)

    entries: list[tuple[V.Value, V.Value]] = []
    errors: list[DecodeError] = []
    for i, (raw_key, raw_value) in enumerate(pairs):
        match from_json(raw_key, key, fmt), from_json(raw_value, val, fmt):
            case Ok(k), Ok(v):
                entries.append((k, v))
            case key_result, value_result:
                errors.extend(_failures(_located(key_result, i, "key")))
                errors.extend(_failures(_located(value_result, i, "value")))

    if errors:
        return Error(tuple(errors))
    return Ok(V.Dict(tuple(entries)))


def _result_from_json(
    data: Any,
    desc: D.Result,
    ok: D.Descriptor,
    error: D.Descriptor,
    fmt: JsonFormat,
) -> Decoded[V.Value]:
    if not isinstance(data, dict) or len(data) != 1:
        return _mismatch(desc, data)
    if fmt.ok_key in data:
        inner = _located(from_json(data[fmt.ok_key], ok, fmt), fmt.ok_key)
        is_ok = True
    elif fmt.error_key in data:
        inner = _located(from_json(data[fmt.error_key], error, fmt), fmt.error_key)
        is_ok = False
    else:
        return _mismatch(desc, data)
    match inner:
        case Ok(v):
            return Ok(V.ResultValue(is_ok, v))
        case err:
            return err


def _enum_from_json(data: Any, desc: D.Enum, fmt: JsonFormat) -> Decoded[V.Value]:
    if not isinstance(data, dict) or not isinstance(data.get(fmt.tag_key), str):
        return _mismatch(desc, data)
    tag: str = data[fmt.tag_key]
    variant = desc.variant(tag)
    if variant is None:
        return Error(
            (DecodeError(DecodeErrorKind.UNKNOWN_TAG, "/".join(desc.tags()), tag),)
        )
    match from_json(data.get(fmt.payload_key), variant, fmt):
        case Ok(payload):
            return Ok(V.Enum(tag, payload))
        case err:
            return err


# ═══════════════════════════════════════════════════════════════════════════════
# to_json_schema() — Descriptor Export
# ═══════════════════════════════════════════════════════════════════════════════


def to_json_schema(desc: D.Descriptor, fmt: JsonFormat = DEFAULT_FORMAT) -> dict[str, Any]:
    """
    JSON Schema of the JSON layout a descriptor reads and writes.

    Example:
        to_json_schema(D.List(D.Int()))
        # {"type": "array", "items": {"type": "integer"}}
    """
    match desc:
        case D.Bool():
            return {"type": "boolean"}
        case D.String():
            return {"type": "string"}
        case D.Int():
            return {"type": "integer"}
        case D.Float():
            return {"type": "number"}
        case D.Null():
            return {"type": "null"}
        case D.List(of):
            return {"type": "array", "items": to_json_schema(of, fmt)}
        case D.Dict(D.String(), val):
            return {"type": "object", "additionalProperties": to_json_schema(val, fmt)}
        case D.Dict(key, val):
            return {
                "type": "array",
                "items": {
                    "type": "array",
                    "prefixItems": [to_json_schema(key, fmt), to_json_schema(val, fmt)],
                    "minItems": 2,
                    "maxItems": 2,
                },
            }
        case D.Optional(of):
            return {"anyOf": [to_json_schema(of, fmt), {"type": "null"}]}
        case D.Result(ok, error):
            return {
                "oneOf": [
                    _single_key_object(fmt.ok_key, to_json_schema(ok, fmt)),
                    _single_key_object(fmt.error_key, to_json_schema(error, fmt)),
                ]
            }
        case D.Object(fields):
            return {
                "type": "object",
                "properties": {name: to_json_schema(d, fmt) for name, d in fields},
                "required": [name for name, d in fields if not isinstance(d, D.Optional)],
            }
        case D.Enum(variants):
            return {
                "oneOf": [
                    {
                        "type": "object",
                        "properties": {
                            fmt.tag_key: {"const": tag},
                            fmt.payload_key: to_json_schema(d, fmt),
                        },
                        "required": [fmt.tag_key],
                    }
                    for tag, d in variants
                ]
            }


def _single_key_object(key: str, schema: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {key: schema},
        "required": [key],
        "additionalProperties": False,
    }


__all__ = (
    "JsonData",
    "JsonFormat",
    "DEFAULT_FORMAT",
    "to_json",
    "from_json",
    "json_label",
    "to_json_schema",
)
