from __future__ import annotations

from dataclasses import dataclass

import pytest
from fastapi.testclient import TestClient
from kungfu import Option, Some

from transmute import codec as K
from transmute import wire as W
from transmute.wire.contrib import fastapi as wire_fastapi

from tests.helpers import USER, User


@dataclass(frozen=True, slots=True)
class Greeting:
    text: str
    tag_count: int


GREETING = (
    K.record(Greeting, arity=2)
    .field("text", K.attr("text"), K.string())
    .field("tag_count", K.attr("tag_count"), K.integer())
    .build()
)


async def greet(user: User) -> Greeting:
    return Greeting(text=f"Hello, {user.name}", tag_count=len(user.tags))


@dataclass(frozen=True, slots=True)
class Lookup:
    id: int
    fields: list[str]
    nick: Option[str]


LOOKUP = (
    K.record(Lookup, arity=3)
    .field("id", K.attr("id"), K.integer())
    .field("fields", K.attr("fields"), K.list_of(K.string()))
    .field("nick", K.attr("nick"), K.optional(K.string()))
    .build()
)


async def lookup(q: Lookup) -> Greeting:
    match q.nick:
        case Some(nick):
            text = f"#{q.id} aka {nick}"
        case _:
            text = f"#{q.id}"
    return Greeting(text=text, tag_count=len(q.fields))


def lookup_endpoint() -> W.Endpoint:
    return W.endpoint(lookup).expose(
        W.HTTPRouteTrigger("GET", "/users"),
        W.RequestResponseCodec(LOOKUP, GREETING),
    )


def make_app() -> W.Application:
    endp = W.endpoint(greet).expose(
        W.HTTPRouteTrigger("POST", "/greet"),
        W.RequestResponseCodec(USER, GREETING),
    )
    return W.application().mount(endp, lookup_endpoint())


@pytest.fixture
def client() -> TestClient:
    return TestClient(wire_fastapi.from_application(make_app()))


def test_valid_body_is_decoded_and_response_encoded(client: TestClient) -> None:
    resp = client.post("/greet", json={"name": "Ann", "age": 30, "tags": ["a", "b"]})

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"text": "Hello, Ann", "tag_count": 2}


def test_invalid_body_maps_to_422_with_all_errors(client: TestClient) -> None:
    resp = client.post("/greet", json={"name": "Ann", "tags": [1, "b", 3]})

    assert resp.status_code == 422
    body = resp.json()
    assert body["detail"].startswith("Invalid request body:")
    assert [e["path"] for e in body["errors"]] == ["$.age", "$.tags[0]", "$.tags[2]"]


def test_missing_field_maps_to_422(client: TestClient) -> None:
    resp = client.post("/greet", json={"name": "Ann", "tags": []})

    assert resp.status_code == 422
    assert resp.json()["errors"][0]["kind"] == "missing_field"


def test_openapi_publishes_body_schemas(client: TestClient) -> None:
    spec = client.get("/openapi.json").json()
    op = spec["paths"]["/greet"]["post"]

    request_schema = op["requestBody"]["content"]["application/json"]["schema"]
    assert request_schema["required"] == ["name", "age", "tags"]
    response_schema = op["responses"]["200"]["content"]["application/json"]["schema"]
    assert set(response_schema["properties"]) == {"text", "tag_count"}


def test_compile_lists_one_route_per_exposure() -> None:
    endp = (
        W.endpoint(greet)
        .expose(W.HTTPRouteTrigger("POST", "/greet"), W.RequestResponseCodec(USER, GREETING))
        .expose(W.HTTPRouteTrigger("PUT", "/greet"), W.RequestResponseCodec(USER, GREETING))
    )

    routes = wire_fastapi.compile_to_fastapi_route(endp)

    assert [(r.method, r.path) for r in routes] == [("POST", "/greet"), ("PUT", "/greet")]


def test_application_rejects_duplicate_routes() -> None:
    app = make_app()
    again = W.endpoint(greet).expose(
        W.HTTPRouteTrigger("POST", "/greet"),
        W.RequestResponseCodec(USER, GREETING),
    )

    with pytest.raises(ValueError, match="already mounted"):
        app.mount(again)
    assert app.routes() == [("POST", "/greet"), ("GET", "/users")]


def test_trigger_validates_method_and_path() -> None:
    with pytest.raises(ValueError):
        W.HTTPRouteTrigger("FETCH", "/x")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        W.HTTPRouteTrigger("GET", "x")


def test_get_request_is_decoded_from_query_string(client: TestClient) -> None:
    resp = client.get("/users", params={"id": 3, "fields": ["a", "b"], "nick": "ann"})

    assert resp.status_code == 200
    assert resp.json() == {"text": "#3 aka ann", "tag_count": 2}


def test_get_optional_query_parameter_may_be_omitted(client: TestClient) -> None:
    resp = client.get("/users", params={"id": 7, "fields": "x"})

    assert resp.status_code == 200
    assert resp.json() == {"text": "#7", "tag_count": 1}


def test_get_with_bad_query_maps_to_422(client: TestClient) -> None:
    resp = client.get("/users", params={"id": "seven"})

    assert resp.status_code == 422
    assert [(e["kind"], e["path"]) for e in resp.json()["errors"]] == [
        ("shape_mismatch", "$.id"),
        ("missing_field", "$.fields"),
    ]


def test_openapi_lists_query_parameters_for_get(client: TestClient) -> None:
    op = client.get("/openapi.json").json()["paths"]["/users"]["get"]

    assert "requestBody" not in op
    assert [(p["name"], p["in"], p["required"]) for p in op["parameters"]] == [
        ("id", "query", True),
        ("fields", "query", True),
        ("nick", "query", False),
    ]


def test_get_requires_a_query_shaped_request_codec() -> None:
    endp = W.endpoint(greet).expose(
        W.HTTPRouteTrigger("GET", "/greet"),
        W.RequestResponseCodec(K.list_of(K.string()), GREETING),
    )

    with pytest.raises(ValueError, match="GET request codec"):
        wire_fastapi.compile_to_fastapi_route(endp)
