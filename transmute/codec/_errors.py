"""
Decode errors and the accumulating fold used by aggregate decoders.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum, auto

from kungfu import Result, Ok, Error

# ═══════════════════════════════════════════════════════════════════════════════
# DecodeError
# ═══════════════════════════════════════════════════════════════════════════════

type PathSegment = str | int


class DecodeErrorKind(Enum):
    """Kinds of decode failures."""

    SHAPE_MISMATCH = auto()  # Observed tag differs from the required one
    MISSING_FIELD = auto()  # Object lacks a declared field
    UNKNOWN_TAG = auto()  # Enum tag not in the variant list


@dataclass(frozen=True, slots=True)
class DecodeError:
    """
    One located decode failure.

    path: field names and list indices from the root to the failure.
    """

    kind: DecodeErrorKind
    expected: str
    actual: str
    path: tuple[PathSegment, ...] = ()

    def at(self, segment: PathSegment) -> DecodeError:
        """Prepend a path segment (used when bubbling up from a child)."""
        return replace(self, path=(segment, *self.path))

    def render_path(self) -> str:
        out = "$"
        for segment in self.path:
            if isinstance(segment, int):
                out += f"[{segment}]"
            else:
                out += f".{segment}"
        return out

    def __str__(self) -> str:
        if self.kind is DecodeErrorKind.MISSING_FIELD:
            return f"{self.render_path()}: missing field {self.expected!r}"
        return f"{self.render_path()}: expected {self.expected}, got {self.actual}"


type DecodeErrors = tuple[DecodeError, ...]
"""Non-empty on failure."""

type Decoded[T] = Result[T, DecodeErrors]


def mismatch(expected: str, actual: str) -> Error[DecodeErrors]:
    """Single shape-mismatch failure at the root path."""
    return Error((DecodeError(DecodeErrorKind.SHAPE_MISMATCH, expected, actual),))


def prefixed(errors: DecodeErrors, segment: PathSegment) -> DecodeErrors:
    return tuple(e.at(segment) for e in errors)


# ═══════════════════════════════════════════════════════════════════════════════
# collect() — Fold Without Short-Circuit
# ═══════════════════════════════════════════════════════════════════════════════


def collect[T](results: Iterable[Decoded[T]]) -> Decoded[list[T]]:
    """
    Fold decode results into one.

    Visits every result. The first failure switches the fold to error mode
    for good, but later results are still inspected for more errors.
    """
    values: list[T] = []
    errors: list[DecodeError] = []

    for r in results:
        match r:
            case Ok(v):
                if not errors:
                    values.append(v)
            case Error(errs):
                errors.extend(errs)

    if errors:
        return Error(tuple(errors))
    return Ok(values)


__all__ = (
    "PathSegment",
    "DecodeErrorKind",
    "DecodeError",
    "DecodeErrors",
    "Decoded",
    "mismatch",
    "prefixed",
    "collect",
)
