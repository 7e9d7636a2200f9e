"""
Type descriptors — shape-only mirror of structured values.
"""

from __future__ import annotations

from dataclasses import dataclass

from transmute import value as V

# ═══════════════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Bool:
    pass


@dataclass(frozen=True, slots=True)
class String:
    pass


@dataclass(frozen=True, slots=True)
class Int:
    pass


@dataclass(frozen=True, slots=True)
class Float:
    pass


@dataclass(frozen=True, slots=True)
class Null:
    pass


# ═══════════════════════════════════════════════════════════════════════════════
# Containers
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class List:
    of: Descriptor


@dataclass(frozen=True, slots=True)
class Dict:
    key: Descriptor
    value: Descriptor


@dataclass(frozen=True, slots=True)
class Optional:
    of: Descriptor


@dataclass(frozen=True, slots=True)
class Result:
    ok: Descriptor
    error: Descriptor


@dataclass(frozen=True, slots=True)
class Object:
    fields: tuple[tuple[str, Descriptor], ...] = ()

    def get(self, name: str) -> Descriptor | None:
        for field_name, desc in self.fields:
            if field_name == name:
                return desc
        return None


@dataclass(frozen=True, slots=True)
class Enum:
    variants: tuple[tuple[str, Descriptor], ...] = ()

    def tags(self) -> tuple[str, ...]:
        return tuple(tag for tag, _ in self.variants)

    def variant(self, tag: str) -> Descriptor | None:
        for variant_tag, desc in self.variants:
            if variant_tag == tag:
                return desc
        return None


type Descriptor = (
    Bool | String | Int | Float | Null | List | Dict | Optional | Result | Object | Enum
)


# ═══════════════════════════════════════════════════════════════════════════════
# label() / render()
# ═══════════════════════════════════════════════════════════════════════════════


def label(desc: Descriptor) -> str:
    """Short tag name, same vocabulary as value.label()."""
    match desc:
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
        case Result():
            return "result"
        case Object():
            return "object"
        case Enum():
            return "enum"


def render(desc: Descriptor) -> str:
    """
    Compact one-line rendering for docs and debugging.

    Example:
        render(Object((("id", Int()), ("tags", List(String())))))
        # "{id: int, tags: list<string>}"
    """
    match desc:
        case List(of):
            return f"list<{render(of)}>"
        case Dict(key, value):
            return f"dict<{render(key)}, {render(value)}>"
        case Optional(of):
            return f"optional<{render(of)}>"
        case Result(ok, error):
            return f"result<{render(ok)}, {render(error)}>"
        case Object(fields):
            inner = ", ".join(f"{name}: {render(d)}" for name, d in fields)
            return "{" + inner + "}"
        case Enum(variants):
            return " | ".join(f"{tag}({render(d)})" for tag, d in variants)
        case _:
            return label(desc)


# ═══════════════════════════════════════════════════════════════════════════════
# conforms() — Value/Descriptor Congruence
# ═══════════════════════════════════════════════════════════════════════════════


def conforms(value: V.Value, desc: Descriptor) -> bool:
    """
    Check that a structured value has the shape the descriptor promises.

    Object values must carry exactly the described fields, in order.
    """
    match desc, value:
        case Bool(), V.Bool():
            return True
        case String(), V.String():
            return True
        case Int(), V.Int():
            return True
        case Float(), V.Float():
            return True
        case Null(), V.Null():
            return True
        case List(of), V.List(items):
            return all(conforms(item, of) for item in items)
        case Dict(key, val), V.Dict(entries):
            return all(conforms(k, key) and conforms(v, val) for k, v in entries)
        case Optional(of), V.Optional(inner):
            return inner is None or conforms(inner, of)
        case Result(ok, error), V.ResultValue(is_ok, inner):
            return conforms(inner, ok if is_ok else error)
        case Object(fields), V.Object(values):
            if tuple(name for name, _ in fields) != tuple(name for name, _ in values):
                return False
            return all(conforms(v, d) for (_, d), (_, v) in zip(fields, values))
        case Enum(), V.Enum(tag, payload):
            variant = desc.variant(tag)
            return variant is not None and conforms(payload, variant)
        case _:
            return False


__all__ = (
    "Bool",
    "String",
    "Int",
    "Float",
    "Null",
    "List",
    "Dict",
    "Optional",
    "Result",
    "Object",
    "Enum",
    "Descriptor",
    "label",
    "render",
    "conforms",
)
