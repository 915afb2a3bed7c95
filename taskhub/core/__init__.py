# taskhub/core/__init__.py
"""
Core Domain Layer.

This package contains the pure business logic and entities of the system.
It follows the Hexagonal Architecture (Ports & Adapters) pattern:
- No dependencies on frameworks (FastAPI) or on infrastructure (SQLAlchemy).
- Defines Interfaces (Ports) that the persistence adapters must implement.
"""
