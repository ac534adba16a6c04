"""Authentication service for JWT and password handling."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from mesto.config import Settings
from mesto.errors import InvalidTokenError

BCRYPT_ROUNDS = 8

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__default_rounds=BCRYPT_ROUNDS
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    A malformed or empty hash never matches.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


@dataclass(frozen=True)
class TokenClaim:
    """Decoded payload of a verified bearer token."""

    user_id: str
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(self, settings: Settings):
        self._secret = settings.signing_secret
        self._algorithm = settings.jwt_algorithm
        self._lifetime = timedelta(minutes=settings.jwt_expiration_minutes)

    def issue(self, user_id: str, issued_at: datetime | None = None) -> str:
        """Create a token for ``user_id`` that expires after the configured lifetime."""
        issued_at = issued_at or datetime.now(UTC)
        to_encode = {
            "sub": user_id,
            "iat": issued_at,
            "exp": issued_at + self._lifetime,
        }
        return jwt.encode(to_encode, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaim:
        """Decode and validate a token.

        Raises:
            InvalidTokenError: bad signature, wrong secret, expired or malformed
                token, or a payload missing one of the required claims.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require_sub": True, "require_iat": True, "require_exp": True},
            )
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        user_id = payload.get("sub")
        if not user_id:
            raise InvalidTokenError("Token subject is empty")

        return TokenClaim(
            user_id=user_id,
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
