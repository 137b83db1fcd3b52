"""SessionIssuerProtocol - establishes a session for validated identity.

The login flow decides *whether* a caller may proceed; the issuer performs
the credential check and produces the session. Failures are returned as a
tagged result, never raised:

    - SessionError(code=CREDENTIALS_INVALID): bad or missing password
    - SessionError(code=SESSION_FAILED): sign-in refused for another reason

Infrastructure faults (store unreachable) may still raise; the caller is
the error boundary.
"""

from typing import Protocol

from src.core.result import Result
from src.domain.entities.account import Account
from src.domain.entities.session import Session
from src.domain.errors.session_error import SessionError


class SessionIssuerProtocol(Protocol):
    """Session issuance interface.

    Implementations:
        - CredentialsSessionIssuer: bcrypt check + signed access token
    """

    async def establish(
        self, account: Account, password: str
    ) -> Result[Session, SessionError]:
        """Check credentials and establish a session.

        Args:
            account: Account resolved by the login flow.
            password: Plaintext password submitted by the caller.

        Returns:
            Success(Session) or Failure(SessionError).
        """
        ...
