"""Application services shared by command handlers."""

from src.application.services.token_generator import TokenGenerator

__all__ = [
    "TokenGenerator",
]
