"""
Wire — expose codec-typed handlers via triggers and body codecs.

    from transmute import codec as K
    from transmute.wire import endpoint, application
    from transmute.wire.triggers.http import HTTPRouteTrigger
    from transmute.wire.codecs.rrc import RequestResponseCodec

    # async def place_order(order: Order) -> Receipt: ...
    # endp = endpoint(place_order).expose(
    #     HTTPRouteTrigger("POST", "/orders"),
    #     RequestResponseCodec(order_codec, receipt_codec),
    # )
    # app = application().mount(endp)

    # from transmute.wire.contrib import fastapi
    # fapp = fastapi.from_application(app)
"""

from transmute.wire._endpoint import (
    Endpoint,
    endpoint,
)
from transmute.wire._app import Application, application
from transmute.wire._types import (
    Trigger,
    BodyCodec,
    Exposure,
    Handler,
)
from transmute.wire._json import (
    JsonData,
    JsonFormat,
    DEFAULT_FORMAT,
    to_json,
    from_json,
    json_label,
    to_json_schema,
)
from transmute.wire._body import (
    decode_body,
    decode_query,
    encode_body,
    summarize,
    errors_to_json,
)

# Common codecs and triggers
from transmute.wire.codecs.rrc import RequestResponseCodec
from transmute.wire.triggers.http import (
    HTTPRouteTrigger,
    Method,
    Path,
    Header,
    Headers,
)

# Subpackages
from transmute.wire import codecs, triggers, contrib

__all__ = (
    # Core API
    "Endpoint",
    "endpoint",
    "Application",
    "application",
    "Trigger",
    "BodyCodec",
    "Exposure",
    "Handler",
    # JSON bridge
    "JsonData",
    "JsonFormat",
    "DEFAULT_FORMAT",
    "to_json",
    "from_json",
    "json_label",
    "to_json_schema",
    # Body helpers
    "decode_body",
    "decode_query",
    "encode_body",
    "summarize",
    "errors_to_json",
    # Built-ins
    "RequestResponseCodec",
    "HTTPRouteTrigger",
    "Method",
    "Path",
    "Header",
    "Headers",
    # Subpackages
    "codecs",
    "triggers",
    "contrib",
)
