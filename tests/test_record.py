from __future__ import annotations

from dataclasses import dataclass

import pytest
from kungfu import Ok, Error, Result

from transmute import codec as K
from transmute import descriptor as D
from transmute import value as V
from transmute.codec import DecodeErrorKind

from tests.helpers import USER, User, errors_of, ok_value, round_trip


def test_record_round_trip_reconstructs_exact_instance() -> None:
    alice = User("Alice", 30, ["admin", "ops"])

    assert round_trip(USER, alice) == alice


def test_record_encodes_fields_in_declared_order() -> None:
    encoded = K.encode(USER)(User("Bob", 41, []))

    assert encoded == V.Object(
        (
            ("name", V.String("Bob")),
            ("age", V.Int(41)),
            ("tags", V.List(())),
        )
    )
    assert K.type_descriptor(USER) == D.Object(
        (("name", D.String()), ("age", D.Int()), ("tags", D.List(D.String())))
    )


def test_missing_field_is_reported_at_its_path() -> None:
    raw = V.Object((("name", V.String("Alice")), ("tags", V.List(()))))

    errs = errors_of(K.decode(USER)(raw))

    assert len(errs) == 1
    assert errs[0].kind is DecodeErrorKind.MISSING_FIELD
    assert errs[0].path == ("age",)
    assert str(errs[0]) == "$.age: missing field 'age'"


def test_all_field_errors_are_accumulated() -> None:
    raw = V.Object(
        (
            ("name", V.Int(1)),
            ("tags", V.List((V.String("a"), V.Bool(True)))),
        )
    )

    errs = errors_of(K.decode(USER)(raw))

    assert [(e.kind, e.path) for e in errs] == [
        (DecodeErrorKind.SHAPE_MISMATCH, ("name",)),
        (DecodeErrorKind.MISSING_FIELD, ("age",)),
        (DecodeErrorKind.SHAPE_MISMATCH, ("tags", 1)),
    ]


def test_field_lookup_ignores_input_order_and_extra_fields() -> None:
    raw = V.Object(
        (
            ("extra", V.Null()),
            ("tags", V.List(())),
            ("age", V.Int(3)),
            ("name", V.String("Cy")),
        )
    )

    assert ok_value(K.decode(USER)(raw)) == User("Cy", 3, [])


def test_non_object_fails_once_at_root() -> None:
    errs = errors_of(K.decode(USER)(V.List(())))

    assert len(errs) == 1
    assert (errs[0].expected, errs[0].actual, errs[0].path) == ("object", "list", ())


def test_absent_accessor_encodes_null() -> None:
    @dataclass(frozen=True, slots=True)
    class Reading:
        sensor: str
        value: float | None

    def value_of(r: Reading) -> Result[float | None, K.Absent]:
        return Ok(r.value) if r.value is not None else Error(K.ABSENT)

    codec = (
        K.record(Reading, arity=2)
        .field("sensor", K.attr("sensor"), K.string())
        .field("value", value_of, K.floating())
        .build()
    )

    assert K.encode(codec)(Reading("t1", None)) == V.Object(
        (("sensor", V.String("t1")), ("value", V.Null()))
    )
    assert round_trip(codec, Reading("t1", 1.5)) == Reading("t1", 1.5)


def test_present_lifts_total_getter() -> None:
    @dataclass(frozen=True, slots=True)
    class Box:
        size: int

    codec = K.record(Box, arity=1).field("size", K.present(lambda b: b.size), K.integer()).build()

    assert round_trip(codec, Box(4)) == Box(4)


def test_nested_record_error_paths() -> None:
    @dataclass(frozen=True, slots=True)
    class Team:
        lead: User
        members: list[User]

    team = (
        K.record(Team, arity=2)
        .field("lead", K.attr("lead"), USER)
        .field("members", K.attr("members"), K.list_of(USER))
        .build()
    )
    sample = Team(User("A", 1, []), [User("B", 2, ["x"])])
    assert round_trip(team, sample) == sample

    raw = K.encode(team)(sample)
    assert isinstance(raw, V.Object)
    lead = raw.get("lead")
    assert lead is not None
    broken_member = V.Object((("name", V.String("B")), ("tags", V.List(()))))
    broken = V.Object((("lead", lead), ("members", V.List((broken_member,)))))

    errs = errors_of(K.decode(team)(broken))
    assert [e.path for e in errs] == [("members", 0, "age")]
    assert errs[0].render_path() == "$.members[0].age"


def test_empty_record() -> None:
    @dataclass(frozen=True, slots=True)
    class Ping:
        pass

    codec = K.record(Ping, arity=0).build()

    assert K.encode(codec)(Ping()) == V.Object()
    assert ok_value(K.decode(codec)(V.Object())) == Ping()


# ═══════════════════════════════════════════════════════════════════════════════
# Builder contract
# ═══════════════════════════════════════════════════════════════════════════════


def test_build_checks_declared_arity() -> None:
    builder = K.record(User, arity=3).field("name", K.attr("name"), K.string())

    with pytest.raises(ValueError, match="arity 3"):
        builder.build()


def test_duplicate_field_name_is_rejected() -> None:
    builder = K.record(User, arity=3).field("name", K.attr("name"), K.string())

    with pytest.raises(ValueError, match="Duplicate field"):
        builder.field("name", K.attr("name"), K.string())


def test_builder_survives_rejected_duplicate() -> None:
    builder = K.record(User, arity=3).field("name", K.attr("name"), K.string())

    with pytest.raises(ValueError, match="Duplicate field"):
        builder.field("name", K.attr("name"), K.string())
    with pytest.raises(ValueError, match="Duplicate field"):
        builder.field("name", K.attr("name"), K.string())

    codec = (
        builder.field("age", K.attr("age"), K.integer())
        .field("tags", K.attr("tags"), K.list_of(K.string()))
        .build()
    )
    assert round_trip(codec, User("Ann", 3, ["x"])) == User("Ann", 3, ["x"])


def test_builder_cannot_be_forked() -> None:
    start = K.record(User, arity=3)
    start.field("name", K.attr("name"), K.string())

    with pytest.raises(K.BuilderConsumedError):
        start.field("age", K.attr("age"), K.integer())


def test_builder_cannot_be_reused_after_build() -> None:
    @dataclass(frozen=True, slots=True)
    class Flag:
        on: bool

    builder = K.record(Flag, arity=1).field("on", K.attr("on"), K.boolean())
    builder.build()

    with pytest.raises(K.BuilderConsumedError):
        builder.build()


def test_negative_arity_is_rejected() -> None:
    with pytest.raises(ValueError):
        K.record(User, arity=-1)
