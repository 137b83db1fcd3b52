"""Test suite for the auth service.

Test structure follows the test pyramid:
- unit/: Unit tests - Handlers, domain logic and adapters in isolation
- integration/: Integration tests - Real bcrypt/JWT, PostgreSQL repositories
- api/: API endpoint tests - HTTP endpoints through the FastAPI app

Repository tests need TEST_DATABASE_URL and are skipped without it.
"""
