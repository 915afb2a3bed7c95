# tests/__init__.py
"""
Test Suite for TaskHub.

Organization:
- `core`: Domain models, value objects and use cases, with mocked ports.
- `adapters`: SQL repositories against a temporary SQLite file, and the HTTP API end to end.
- `shared`: Configuration loading.
"""
