"""
transmute — composable codecs between Python values and structured values.

    from transmute import value as V       # Structured value model
    from transmute import descriptor as D  # Type descriptors
    from transmute import codec as K       # Codecs, builders, facade
    from transmute import wire as W        # JSON bridge + HTTP exposure
"""

from transmute import value
from transmute import descriptor
from transmute import codec
from transmute import wire
from transmute._types import (
    Value,
    Descriptor,
    Codec,
    DecodeError,
    DecodeErrors,
    Decoded,
)

__version__ = "0.1.0"

__all__ = (
    "value",
    "descriptor",
    "codec",
    "wire",
    "Value",
    "Descriptor",
    "Codec",
    "DecodeError",
    "DecodeErrors",
    "Decoded",
)
