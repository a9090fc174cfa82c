"""
Request dependencies shared by the authenticated endpoints.
"""

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from demo_bank.exceptions import BankError, InvalidCredential
from demo_bank.models.base import get_db
from demo_bank.services.session_service import SessionService


def bearer_token(authorization: str | None) -> str | None:
    """
    Pull the token out of an "Authorization: Bearer <token>" header.

    Returns None when there is no token at all. A header with some
    other scheme is a credential, just not a valid one.
    """
    if not authorization:
        return None
    parts = authorization.split(" ", 1)
    if len(parts) < 2 or not parts[1].strip():
        return None
    if parts[0].lower() != "bearer":
        raise InvalidCredential()
    return parts[1].strip()


def get_current_user_id(
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> int:
    """Authenticate the request and return the caller's user id."""
    try:
        token = bearer_token(authorization)
        return SessionService(db).verify(token)
    except BankError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
