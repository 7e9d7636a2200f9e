"""
Descriptor — structural type descriptors for schema introspection.

    from transmute import descriptor as D

    d = D.Object((("id", D.Int()), ("tags", D.List(D.String()))))
    D.render(d)          # "{id: int, tags: list<string>}"
    D.conforms(value, d) # shape check
"""

from transmute.descriptor._descriptor import (
    Bool,
    String,
    Int,
    Float,
    Null,
    List,
    Dict,
    Optional,
    Result,
    Object,
    Enum,
    Descriptor,
    label,
    render,
    conforms,
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
    "Result",
    "Object",
    "Enum",
    "Descriptor",
    "label",
    "render",
    "conforms",
)
