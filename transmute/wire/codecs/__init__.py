"""
Codecs — bind request/response body codecs to an endpoint.

    from transmute.wire.codecs import RequestResponseCodec

    codec = RequestResponseCodec(order_codec, receipt_codec)
"""

from transmute.wire.codecs.rrc import RequestResponseCodec

__all__ = ("RequestResponseCodec",)
