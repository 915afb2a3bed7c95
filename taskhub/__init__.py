# taskhub/__init__.py
"""
TaskHub - a small User/Task backend.

This package follows Hexagonal Architecture (Ports & Adapters): ``core``
holds the domain and use cases, ``adapters`` holds the SQLAlchemy and
FastAPI implementations, ``shared`` holds cross-cutting concerns.
"""

__version__ = "1.0.0"
