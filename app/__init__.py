"""
Book Catalog API Application Package

A small layered CRUD service for book records.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and declarative base
- exceptions.py: Error taxonomy shared by the repository and HTTP layers
- main.py: FastAPI application factory, exception handlers, lifespan
- dependencies.py: Explicit wiring of session -> repository -> service
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas and the response envelope
- repositories/: Data access layer wrapping the ORM
- services/: Use-case layer and rate limiting
- routers/: API route handlers
"""

__version__ = "0.1.0"
