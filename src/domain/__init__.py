"""Domain layer - Pure business logic.

This layer contains the account and token entities, enums, protocols
(ports) and validators. The domain layer has NO dependencies on any web
framework or infrastructure.

Structure:
- entities/: Domain entities (Account, AuthToken, TwoFactorConfirmation, Session)
- enums/: TokenKind, LoginOutcome
- errors/: Errors returned as data (SessionError)
- protocols/: Domain protocols (repository interfaces, service interfaces)
- validators/ and types.py: Input validation shared by commands and schemas

The domain layer defines WHAT the business does, not HOW it's implemented.
"""
