"""
Structured values — the tagged union every codec produces and consumes.
"""

from __future__ import annotations

from dataclasses import dataclass

# ═══════════════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Bool:
    value: bool


@dataclass(frozen=True, slots=True)
class String:
    value: str


@dataclass(frozen=True, slots=True)
class Int:
    value: int


@dataclass(frozen=True, slots=True)
class Float:
    value: float


@dataclass(frozen=True, slots=True)
class Null:
    pass


# ═══════════════════════════════════════════════════════════════════════════════
# Containers
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class List:
    items: tuple[Value, ...] = ()


@dataclass(frozen=True, slots=True)
class Dict:
    """
    Key/value pairs. Keys are structured values themselves,
    so any key codec can be used.
    """

    entries: tuple[tuple[Value, Value], ...] = ()


@dataclass(frozen=True, slots=True)
class Optional:
    """
    Explicit optional slot.

    Note: value=None is the absent tag, not a missing field.
    """

    value: Value | None = None

    @property
    def is_present(self) -> bool:
        return self.value is not None


@dataclass(frozen=True, slots=True)
class ResultValue:
    """Ok or error side of a result, chosen by is_ok."""

    is_ok: bool
    value: Value


@dataclass(frozen=True, slots=True)
class Object:
    """
    Ordered named fields. Names are unique within one object.
    """

    fields: tuple[tuple[str, Value], ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for name, _ in self.fields:
            if name in seen:
                raise ValueError(f"Duplicate field name in object: {name!r}")
            seen.add(name)

    def get(self, name: str) -> Value | None:
        for field_name, field_value in self.fields:
            if field_name == name:
                return field_value
        return None

    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.fields)


@dataclass(frozen=True, slots=True)
class Enum:
    """Tagged variant. The tag only means something to the codec that made it."""

    tag: str
    payload: Value


# ═══════════════════════════════════════════════════════════════════════════════
# Union + labels
# ═══════════════════════════════════════════════════════════════════════════════

type Value = (
    Bool | String | Int | Float | Null | List | Dict | Optional | ResultValue | Object | Enum
)


def label(value: Value) -> str:
    """Short tag name of a value, as used in decode error messages."""
    match value:
        case Bool():
            return "bool"
        case String():
            return "string"
        case Int():
            return "int"
        case Float():
            return "float"
        case Null():
            return "null"
        case List():
            return "list"
        case Dict():
            return "dict"
        case Optional():
            return "optional"
        case ResultValue():
            return "result"
        case Object():
            return "object"
        case Enum():
            return "enum"


__all__ = (
    "Bool",
    "String",
    "Int",
    "Float",
    "Null",
    "List",
    "Dict",
    "Optional",
    "ResultValue",
    "Object",
    "Enum",
    "Value",
    "label",
)
