"""
Codec basics — primitives, composites, records, error accumulation.

Run: python -m examples.codec_basic_example
"""

from __future__ import annotations

from kungfu import Some, Nothing

from transmute import codec as K
from transmute import descriptor as D
from transmute import value as V
from examples._infra import USER, User, UserId, banner, setup_logging, show


def main() -> None:
    setup_logging()

    banner("Record round-trip")
    alice = User(UserId(1), "Alice", "alice@example.com", "gold")
    raw = K.encode(USER)(alice)
    print(f"  encoded: {raw}")
    show(K.decode(USER)(raw))
    print(f"  descriptor: {D.render(K.type_descriptor(USER))}")

    banner("All field errors at once")
    broken = V.Object(
        (
            ("id", V.String("1")),
            ("name", V.Int(0)),
            ("tier", V.String("gold")),
        )
    )
    show(K.decode(USER)(broken))

    banner("List error accumulation")
    scores = K.list_of(K.integer())
    show(K.decode(scores)(V.List((V.Int(1), V.String("two"), V.Int(3), V.Null()))))

    banner("Optional")
    nick = K.optional(K.string())
    print(f"  Some: {K.encode(nick)(Some('al'))}")
    print(f"  Nothing: {K.encode(nick)(Nothing())}")

    banner("Dict with mixed failures")
    ages = K.dict_of(K.string(), K.integer())
    show(
        K.decode(ages)(
            V.Dict(((V.Int(1), V.Int(30)), (V.String("bob"), V.Float(4.5))))
        )
    )


if __name__ == "__main__":
    main()
