from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from transmute.wire._types import BodyCodec, Exposure, Handler, Trigger


@dataclass(slots=True)
class Endpoint:
    handler: Handler[Any, Any]
    exposures: list[Exposure] = field(default_factory=list[Exposure])

    @classmethod
    def from_handler(cls, handler: Handler[Any, Any]) -> Endpoint:
        return cls(handler=handler)

    def expose(self, trigger: Trigger, codec: BodyCodec) -> Endpoint:
        return Endpoint(
            handler=self.handler, exposures=[*self.exposures, (trigger, codec)]
        )


def endpoint(handler: Handler[Any, Any]) -> Endpoint:
    """
    Wrap an async handler Req -> Resp.

    Example:
        async def place_order(order: Order) -> Receipt: ...

        endp = endpoint(place_order).expose(
            HTTPRouteTrigger("POST", "/orders"),
            RequestResponseCodec(order_codec, receipt_codec),
        )
    """
    return Endpoint.from_handler(handler)
