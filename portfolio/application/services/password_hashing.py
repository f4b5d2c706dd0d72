"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from portfolio.domain.users.exceptions import CorruptCredentialError
from portfolio.domain.users.repositories import PasswordHasher

# scrypt is memory-hard with a tunable work factor; werkzeug salts every call.
DEFAULT_METHOD = "scrypt"


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, method: str = DEFAULT_METHOD) -> None:
        self._method = method

    def hash(self, password: str) -> str:
        if not password:
            raise ValueError("password_blank")
        return str(generate_password_hash(password, method=self._method))

    def verify(self, password: str, hashed: str) -> bool:
        """Check ``password`` against a stored hash.

        Returns False on mismatch. Raises CorruptCredentialError when the
        stored value is not a ``method$salt$digest`` hash werkzeug can use.
        """
        if not password:
            return False
        if not hashed or hashed.count("$") < 2:
            raise CorruptCredentialError("stored hash is not in method$salt$digest form")
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError) as exc:
            raise CorruptCredentialError(str(exc)) from exc
