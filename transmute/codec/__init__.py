"""
Codec — composable encoders/decoders with type descriptors.

    from transmute import codec as K

    point = (
        K.record(Point, arity=2)
        .field("x", K.attr("x"), K.integer())
        .field("y", K.attr("y"), K.integer())
        .build()
    )

    raw = K.encode(point)(Point(1, 2))   # V.Object(...)
    res = K.decode(point)(raw)           # Ok(Point(1, 2)) | Error(DecodeErrors)
    K.type_descriptor(point)             # D.Object(...)
"""

from transmute.codec._errors import (
    PathSegment,
    DecodeErrorKind,
    DecodeError,
    DecodeErrors,
    Decoded,
    collect,
)
from transmute.codec._codec import (
    Encoder,
    Decoder,
    Codec,
    encode,
    decode,
    type_descriptor,
)
from transmute.codec._primitives import (
    string,
    boolean,
    floating,
    integer,
    null,
)
from transmute.codec._composite import (
    list_of,
    optional,
    result,
    dict_of,
)
from transmute.codec._record import (
    Absent,
    ABSENT,
    Accessor,
    present,
    attr,
    BuilderConsumedError,
    RecordBuilder,
    record,
)
from transmute.codec._enum import UnknownVariantError, enum

__all__ = (
    # Errors
    "PathSegment",
    "DecodeErrorKind",
    "DecodeError",
    "DecodeErrors",
    "Decoded",
    "collect",
    # Codec & facade
    "Encoder",
    "Decoder",
    "Codec",
    "encode",
    "decode",
    "type_descriptor",
    # Primitives
    "string",
    "boolean",
    "floating",
    "integer",
    "null",
    # Composites
    "list_of",
    "optional",
    "result",
    "dict_of",
    # Records
    "Absent",
    "ABSENT",
    "Accessor",
    "present",
    "attr",
    "BuilderConsumedError",
    "RecordBuilder",
    "record",
    # Enums
    "UnknownVariantError",
    "enum",
)
