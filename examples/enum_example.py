"""
Enum codec — closed sum type with tag dispatch, plus JSON rendering.

Run: python -m examples.enum_example
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from transmute import codec as K
from transmute import value as V
from transmute import wire as W
from examples._infra import banner, setup_logging, show


@dataclass(frozen=True, slots=True)
class Card:
    last4: str


@dataclass(frozen=True, slots=True)
class Invoice:
    due_days: int


@dataclass(frozen=True, slots=True)
class Cash:
    pass


type Payment = Card | Invoice | Cash


PAYMENT: K.Codec[Payment] = K.enum(
    lambda p: type(p).__name__.lower(),
    [
        ("card", K.record(Card, 1).field("last4", K.attr("last4"), K.string()).build()),
        ("invoice", K.record(Invoice, 1).field("due_days", K.attr("due_days"), K.integer()).build()),
        ("cash", K.record(Cash, 0).build()),
    ],
)


def main() -> None:
    setup_logging()

    banner("Encode each variant")
    for p in (Card("4242"), Invoice(30), Cash()):
        raw = K.encode(PAYMENT)(p)
        print(f"  {p!r:28} → {json.dumps(W.to_json(raw))}")

    banner("Decode unknown tag")
    show(K.decode(PAYMENT)(V.Enum("crypto", V.Null())))

    banner("Decode from JSON text")
    show(W.decode_body('{"tag": "invoice", "payload": {"due_days": 14}}', PAYMENT))
    show(W.decode_body('{"tag": "invoice", "payload": {"due_days": "soon"}}', PAYMENT))

    banner("JSON Schema")
    print(json.dumps(W.to_json_schema(K.type_descriptor(PAYMENT)), indent=2))


if __name__ == "__main__":
    main()
