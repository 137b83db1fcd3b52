"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses and handlers (login, email verification,
  password reset)
- dtos/: Validated inputs and handler results
- services/: Application services shared by handlers (token generation)

The application layer orchestrates domain logic through protocols; it never
imports infrastructure.
"""
