# taskhub/adapters/api/__init__.py
"""
HTTP adapter (FastAPI).

Translates JSON requests into use-case calls and DomainErrors into
``{"code", "message"}`` responses. No business rule lives here.
"""
