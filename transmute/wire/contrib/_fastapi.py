import logging
from dataclasses import dataclass
from typing import Any

import fastapi
from fastapi.responses import JSONResponse
from kungfu import Ok, Error

from transmute import descriptor as D
from transmute.codec import Decoded
from transmute.wire._app import Application
from transmute.wire._body import decode_body, decode_query, encode_body, errors_to_json, summarize
from transmute.wire._endpoint import Endpoint
from transmute.wire._json import to_json_schema
from transmute.wire._types import BodyCodec, Handler
from transmute.wire.triggers.http import Path

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


@dataclass(frozen=True, slots=True)
class CompiledRoute:
    method: str
    path: Path
    handler: Any
    codec: BodyCodec

    def openapi_extra(self) -> dict[str, Any] | None:
        if self.method == "GET":
            return self._query_parameters()
        return {
            "requestBody": {
                "required": True,
                "content": {JSON_MEDIA_TYPE: {"schema": self.codec.request_schema()}},
            }
        }

    def _query_parameters(self) -> dict[str, Any] | None:
        desc = self.codec.request.descriptor
        if not isinstance(desc, D.Object) or not desc.fields:
            return None
        return {
            "parameters": [
                {
                    "name": name,
                    "in": "query",
                    "required": not isinstance(field_desc, D.Optional),
                    "schema": to_json_schema(field_desc, self.codec.format),
                }
                for name, field_desc in desc.fields
            ]
        }

    def responses(self) -> dict[int | str, dict[str, Any]]:
        return {
            200: {"content": {JSON_MEDIA_TYPE: {"schema": self.codec.response_schema()}}},
            422: {"description": "Request did not match the expected shape"},
        }


def make_handler(handler: Handler[Any, Any], codec: BodyCodec, method: str, route: str) -> Any:
    async def _route_handler(request: fastapi.Request) -> fastapi.Response:
        decoded: Decoded[Any]
        if method == "GET":
            params = request.query_params.multi_items()
            decoded = decode_query(params, codec.request, codec.format)
        else:
            decoded = decode_body(await request.body(), codec.request, codec.format)

        match decoded:
            case Error(errors):
                logger.info("%s rejected: %d decode error(s)", route, len(errors))
                return JSONResponse(
                    status_code=422,
                    content={"detail": summarize(errors), "errors": errors_to_json(errors)},
                )
            case Ok(req):
                pass

        try:
            resp = await handler(req)
        except Exception:
            logger.exception("%s handler failed", route)
            raise

        return fastapi.Response(
            content=encode_body(resp, codec.response, codec.format),
            media_type=JSON_MEDIA_TYPE,
        )

    _route_handler.__name__ = getattr(handler, "__name__", "route_handler")
    return _route_handler


def compile_to_fastapi_route(endp: Endpoint) -> list[CompiledRoute]:
    routes: list[CompiledRoute] = []

    for trigger, codec in endp.exposures:
        route = f"{trigger.method} {trigger.path}"

        # GET reads its request from the query string
        if trigger.method == "GET" and not isinstance(
            codec.request.descriptor, (D.Object, D.Null, D.Optional)
        ):
            raise ValueError(
                f"{route}: GET request codec must be an object, null or optional, "
                f"got {D.render(codec.request.descriptor)}"
            )

        routes.append(
            CompiledRoute(
                method=trigger.method,
                path=trigger.path,
                handler=make_handler(endp.handler, codec, trigger.method, route),
                codec=codec,
            )
        )

    return routes


def add_endpoint_to_app(
    app: fastapi.FastAPI,
    endp: Endpoint,
) -> None:
    for compiled in compile_to_fastapi_route(endp):
        app.add_api_route(
            compiled.path,
            compiled.handler,
            methods=[compiled.method],
            openapi_extra=compiled.openapi_extra(),
            responses=compiled.responses(),
        )


def from_application(app: Application) -> fastapi.FastAPI:
    f_app = fastapi.FastAPI()

    for endp in app.endpoints:
        add_endpoint_to_app(f_app, endp)

    return f_app
