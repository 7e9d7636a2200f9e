from typing import Self

from transmute.wire._endpoint import Endpoint


class Application:
    """Collection of endpoints handed to a web framework adapter."""

    def __init__(self) -> None:
        self.endpoints: list[Endpoint] = []

    def routes(self) -> list[tuple[str, str]]:
        """(method, path) of every exposure, in mount order."""
        return [
            (trigger.method, trigger.path)
            for endp in self.endpoints
            for trigger, _ in endp.exposures
        ]

    def mount(self, *endps: Endpoint) -> Self:
        """Add endpoints. A (method, path) pair may only be exposed once."""
        taken = set(self.routes())
        for endp in endps:
            for trigger, _ in endp.exposures:
                route = (trigger.method, trigger.path)
                if route in taken:
                    raise ValueError(f"Route already mounted: {route[0]} {route[1]}")
                taken.add(route)
        self.endpoints.extend(endps)
        return self


def application() -> Application:
    return Application()
