"""
Triggers — describe how endpoints are exposed (e.g., HTTP routes).

    from transmute.wire.triggers.http import HTTPRouteTrigger

    http = HTTPRouteTrigger("POST", "/orders")
"""

from transmute.wire.triggers import http


__all__ = ("http",)
