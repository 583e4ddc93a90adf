"""Board passwords and board-scoped session credentials.

A credential is an HS256 JWT whose only claim of interest is ``board_id``.
Holding a valid credential for a board grants full read/write access to that
board; the board password is the only access boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache

import bcrypt
import jwt

from taskboard.config import Settings, settings as default_settings
from taskboard.errors import AuthError

# bcrypt only looks at the first 72 bytes of a password.
BCRYPT_MAX_PASSWORD_BYTES = 72


@dataclass(frozen=True)
class Credential:
    token: str
    board_id: str
    issued_at: datetime
    expires_at: datetime


class IdentityBroker:
    """Hashes board passwords and issues/verifies credentials.

    The signing secret is fixed for the lifetime of the broker; there is no
    rotation.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        token_ttl: timedelta = timedelta(hours=24),
        bcrypt_rounds: int = 12,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.token_ttl = token_ttl
        self._bcrypt_rounds = bcrypt_rounds

    @classmethod
    def from_settings(cls, config: Settings) -> "IdentityBroker":
        return cls(
            secret_key=config.JWT_SECRET_KEY,
            algorithm=config.JWT_ALGORITHM,
            token_ttl=timedelta(minutes=config.JWT_ACCESS_TOKEN_EXPIRE_MINUTES),
            bcrypt_rounds=config.BCRYPT_ROUNDS,
        )

    # ========== Passwords ==========

    def hash_password(self, plaintext: str) -> str:
        """Return a salted bcrypt hash. Callers enforce the password policy first."""
        salt = bcrypt.gensalt(rounds=self._bcrypt_rounds)
        return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password_hash: str, plaintext: str) -> bool:
        encoded = plaintext.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False

    # ========== Credentials ==========

    def issue_credential(self, board_id: str) -> Credential:
        issued_at = datetime.now(timezone.utc)
        expires_at = issued_at + self.token_ttl
        claims = {
            "board_id": board_id,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(claims, self._secret_key, algorithm=self._algorithm)
        return Credential(token=token, board_id=board_id, issued_at=issued_at, expires_at=expires_at)

    def verify_credential(self, token: str | None) -> str:
        """Return the board ID bound to ``token``.

        Raises:
            AuthError: reason ``missing`` when no token was presented,
                ``invalid`` for a bad signature, malformed token, expiry or
                missing ``board_id`` claim.
        """
        if not token:
            raise AuthError("Authorization required", reason=AuthError.MISSING)

        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.PyJWTError as exc:
            raise AuthError("Invalid token", reason=AuthError.INVALID) from exc

        board_id = claims.get("board_id")
        if not isinstance(board_id, str) or not board_id:
            raise AuthError("Invalid token", reason=AuthError.INVALID)
        return board_id


@lru_cache(maxsize=1)
def get_identity_broker() -> IdentityBroker:
    """Process-wide broker built once from the loaded settings."""
    return IdentityBroker.from_settings(default_settings)
