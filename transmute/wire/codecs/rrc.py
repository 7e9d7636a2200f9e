from dataclasses import dataclass
from typing import Any

from transmute.codec import Codec
from transmute.wire._json import DEFAULT_FORMAT, JsonFormat, to_json_schema


@dataclass(frozen=True, slots=True)
class RequestResponseCodec[Req, Resp]:
    """Pairs the request body codec with the response body codec."""

    request: Codec[Req]
    response: Codec[Resp]
    format: JsonFormat = DEFAULT_FORMAT

    def request_schema(self) -> dict[str, Any]:
        return to_json_schema(self.request.descriptor, self.format)

    def response_schema(self) -> dict[str, Any]:
        return to_json_schema(self.response.descriptor, self.format)
