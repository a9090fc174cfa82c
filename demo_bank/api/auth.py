"""
Login endpoint.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from demo_bank.exceptions import BankError
from demo_bank.models.base import get_db
from demo_bank.services.session_service import SessionService
from demo_bank.schemas.auth import LoginRequest, LoginResponse, UserResponse

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
):
    """
    Exchange email and password for a bearer token.

    The token is valid for TOKEN_EXPIRE_HOURS (24 by default).
    """
    service = SessionService(db)
    try:
        session = service.issue(request.email, request.password)
    except BankError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

    return LoginResponse(
        token=session.token,
        user=UserResponse.model_validate(session.user),
    )
