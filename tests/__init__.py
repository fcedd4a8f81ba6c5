"""
Test Suite for the Book Catalog API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_books.py: HTTP tests for /api/v1/books endpoints
- test_repository.py: SQLAlchemyBookRepository against SQLite
- test_services.py: BookService delegation with a mocked repository
- test_schemas.py: Request schema bounds
- test_config.py: Settings parsing and validation
- test_app.py: Envelope, error mapping, health and rate limit handling

Running Tests:
    pytest
    pytest tests/test_books.py
    pytest -v
"""
