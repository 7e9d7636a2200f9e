from __future__ import annotations

import logging

import pytest

from transmute import codec as K
from transmute import descriptor as D
from transmute import value as V
from transmute.codec import DecodeErrorKind

from tests.helpers import DOOR_EVENT, Close, Open, errors_of, ok_value, round_trip


def test_enum_round_trip_each_variant() -> None:
    assert round_trip(DOOR_EVENT, Open(at=5)) == Open(at=5)
    assert round_trip(DOOR_EVENT, Close(reason="wind")) == Close(reason="wind")


def test_enum_encodes_tag_and_payload() -> None:
    assert K.encode(DOOR_EVENT)(Open(at=5)) == V.Enum(
        "Open", V.Object((("at", V.Int(5)),))
    )


def test_enum_descriptor_lists_variants_in_order() -> None:
    assert K.type_descriptor(DOOR_EVENT) == D.Enum(
        (
            ("Open", D.Object((("at", D.Int()),))),
            ("Close", D.Object((("reason", D.String()),))),
        )
    )


def test_unknown_tag_lists_known_tags() -> None:
    errs = errors_of(K.decode(DOOR_EVENT)(V.Enum("Unknown", V.Null())))

    assert len(errs) == 1
    assert errs[0].kind is DecodeErrorKind.UNKNOWN_TAG
    assert errs[0].expected == "Open/Close"
    assert errs[0].actual == "Unknown"


def test_variant_errors_are_returned_unchanged() -> None:
    errs = errors_of(K.decode(DOOR_EVENT)(V.Enum("Open", V.Object((("at", V.String("x")),)))))

    assert [(e.path, e.expected) for e in errs] == [(("at",), "int")]


def test_non_enum_value_is_shape_mismatch() -> None:
    errs = errors_of(K.decode(DOOR_EVENT)(V.String("Open")))
    assert (errs[0].kind, errs[0].expected) == (DecodeErrorKind.SHAPE_MISMATCH, "enum")


def test_enum_over_primitive_variants() -> None:
    codec: K.Codec[int | str] = K.enum(
        lambda v: "num" if isinstance(v, int) else "text",
        [("num", K.integer()), ("text", K.string())],
    )

    assert ok_value(K.decode(codec)(V.Enum("num", V.Int(3)))) == 3
    assert round_trip(codec, "hi") == "hi"


def test_unmatched_tag_at_encode_raises() -> None:
    codec = K.enum(lambda _: "Ajar", [("Open", K.integer())])

    with pytest.raises(K.UnknownVariantError) as exc:
        K.encode(codec)(1)

    assert exc.value.tag == "Ajar"
    assert exc.value.known == ("Open",)


def test_duplicate_tags_are_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate enum tag"):
        K.enum(lambda _: "a", [("a", K.integer()), ("a", K.string())])


def test_construction_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="transmute.codec._enum"):
        K.enum(lambda _: "x", [("x", K.null()), ("y", K.null())])

    assert "x/y" in caplog.text
