from dataclasses import dataclass

from transmute import codec as K
from transmute import wire as W
from transmute.wire import endpoint, application
from transmute.wire.contrib import fastapi
from examples._infra import USER, User


@dataclass(frozen=True, slots=True)
class Summary:
    text: str
    premium: bool


SUMMARY = (
    K.record(Summary, arity=2)
    .field("text", K.attr("text"), K.string())
    .field("premium", K.attr("premium"), K.boolean())
    .build()
)


async def summarize_user(user: User) -> Summary:
    return Summary(
        text=f"{user.name} <{user.email}>",
        premium=user.tier in ("gold", "platinum"),
    )


endp = endpoint(summarize_user).expose(
    trigger=W.triggers.http.HTTPRouteTrigger(path="/summary", method="POST"),
    codec=W.codecs.RequestResponseCodec(request=USER, response=SUMMARY),
)

app = application().mount(endp)


fastapi_app = fastapi.from_application(app)
# Run yourself with uvicorn and look at the docs!
