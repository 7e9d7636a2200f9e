"""
Core types for transmute.

Re-exports from kungfu + the structured value / descriptor unions.
"""

from __future__ import annotations

# Re-export from kungfu
from kungfu import Result, Ok, Error, Option, Some, Nothing

from transmute.value import Value
from transmute.descriptor import Descriptor
from transmute.codec import Codec, DecodeError, DecodeErrors, Decoded

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    # Model
    "Value",
    "Descriptor",
    # Codec
    "Codec",
    "DecodeError",
    "DecodeErrors",
    "Decoded",
)
