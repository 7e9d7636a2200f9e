"""
Contrib — optional integrations. Access integrations via submodules.

    from transmute.wire.contrib import fastapi
    # app = fastapi.from_application(Application())

Submodules import their framework eagerly; install the matching extra
(e.g. transmute[fastapi]) before importing them.
"""

__all__ = ("fastapi",)
