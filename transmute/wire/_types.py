from collections.abc import Awaitable, Callable
from typing import Any

from transmute.wire.codecs.rrc import RequestResponseCodec
from transmute.wire.triggers.http import HTTPRouteTrigger


# only HTTP routes with JSON bodies for now
type Trigger = HTTPRouteTrigger
type BodyCodec = RequestResponseCodec[Any, Any]
type Exposure = tuple[Trigger, BodyCodec]
type Handler[Req, Resp] = Callable[[Req], Awaitable[Resp]]
