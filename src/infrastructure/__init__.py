"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Account and token stores (PostgreSQL repositories, in-process stores)
- Password hashing and access tokens
- Notification senders
- Session issuer

Structure:
- persistence/: Database models, repositories and in-memory stores
- security/: bcrypt password service, JWT service
- email/: Notification senders
- session/: Credentials session issuer
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
