from dataclasses import dataclass, field
from typing import Literal, get_args


type Method = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]
type Path = str
type Header = str
type Headers = frozenset[str]

METHODS: frozenset[str] = frozenset(get_args(Method.__value__))


@dataclass(frozen=True, slots=True)
class HTTPRouteTrigger:
    """Route the dispatcher listens on. Matching itself is the framework's job."""

    method: Method
    path: Path
    headers: Headers = field(default_factory=lambda: frozenset())

    def __post_init__(self) -> None:
        if self.method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method}")
        if not self.path.startswith("/"):
            raise ValueError(f"Route path must start with '/': {self.path!r}")
