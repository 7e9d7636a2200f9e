"""
FastAPI integration for transmute.wire (optional dependency).

    from transmute.wire.contrib import fastapi
    # fapp = fastapi.from_application(app)
"""

from ._fastapi import (
    CompiledRoute,
    add_endpoint_to_app,
    from_application,
    compile_to_fastapi_route,
)

__all__ = (
    "CompiledRoute",
    "add_endpoint_to_app",
    "from_application",
    "compile_to_fastapi_route",
)
