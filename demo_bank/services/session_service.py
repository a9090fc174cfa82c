"""
Session service: login and bearer-token verification.

A session is a signed HS256 JWT carrying the user id and an
expiry. Nothing is stored server-side, so verifying a token
needs only the signing secret.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt
from sqlalchemy.orm import Session

from demo_bank.config import Settings, get_settings
from demo_bank.exceptions import (
    InvalidCredential,
    InvalidCredentials,
    MissingCredential,
)
from demo_bank.logging_config import get_logger, log_event
from demo_bank.models.user import User
from demo_bank.services.ledger_store import LedgerStore

logger = get_logger(__name__)

# bcrypt only looks at the first 72 bytes and recent releases
# refuse anything longer.
BCRYPT_MAX_BYTES = 72


def hash_password(password: str, rounds: int = 12) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
    except ValueError:
        # Stored hash is not a bcrypt hash
        return False


@dataclass(frozen=True)
class IssuedSession:
    token: str
    user: User
    expires_at: datetime


class SessionService:

    ALGORITHM = "HS256"

    def __init__(self, db: Session, settings: Settings | None = None):
        self.store = LedgerStore(db)
        self.settings = settings or get_settings()
        if not self.settings.JWT_SECRET:
            raise ValueError("JWT secret cannot be empty")

    def issue(self, email: str, password: str) -> IssuedSession:
        """
        Log a user in.

        Unknown email and wrong password raise the same
        InvalidCredentials error with the same message.
        """
        user = self.store.get_user_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            log_event(
                logger, "warning", "Login failed",
                action="login", resource=email,
            )
            raise InvalidCredentials()

        now = datetime.now(tz=timezone.utc)
        expires_at = now + timedelta(hours=self.settings.TOKEN_EXPIRE_HOURS)
        token = jwt.encode(
            {"sub": str(user.id), "iat": now, "exp": expires_at},
            self.settings.JWT_SECRET,
            algorithm=self.ALGORITHM,
        )

        log_event(
            logger, "info", "Login succeeded",
            user_id=user.id, action="login", resource=email,
        )
        return IssuedSession(token=token, user=user, expires_at=expires_at)

    def verify(self, credential: str | None) -> int:
        """
        Return the user id a token was issued for.

        Raises MissingCredential for an absent token and
        InvalidCredential for anything that fails to decode,
        has expired, or was signed with a different secret.
        """
        if not credential:
            raise MissingCredential()

        try:
            payload = jwt.decode(
                credential,
                self.settings.JWT_SECRET,
                algorithms=[self.ALGORITHM],
                options={"require": ["exp", "sub"]},
            )
            return int(payload["sub"])
        except (jwt.InvalidTokenError, KeyError, TypeError, ValueError) as e:
            raise InvalidCredential() from e
