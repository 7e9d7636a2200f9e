"""
Value — the structured value model.

    from transmute import value as V

    v = V.Object((("name", V.String("Alice")), ("age", V.Int(30))))
    V.label(v)  # "object"
"""

from transmute.value._value import (
    Bool,
    String,
    Int,
    Float,
    Null,
    List,
    Dict,
    Optional,
    ResultValue,
    Object,
    Enum,
    Value,
    label,
)

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
