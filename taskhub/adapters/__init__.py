# taskhub/adapters/__init__.py
"""
Infrastructure Adapters.

This package contains the concrete implementations around the core:
- `api`: The Primary Adapter (Driving) - FastAPI web server.
- `persistence`: Secondary Adapter (Driven) - SQLAlchemy repositories.

In Hexagonal Architecture, dependencies point INWARD. These modules depend on
`taskhub.core`, but `taskhub.core` never imports from here.
"""
