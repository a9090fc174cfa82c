"""
Account endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from demo_bank.api.dependencies import get_current_user_id
from demo_bank.exceptions import BankError
from demo_bank.models.base import get_db
from demo_bank.services.query_service import QueryService
from demo_bank.schemas.account import AccountResponse

router = APIRouter(prefix="/api", tags=["Accounts"])


@router.get("/accounts", response_model=list[AccountResponse])
def list_accounts(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """List the caller's accounts with their current balances."""
    service = QueryService(db)
    try:
        accounts = service.list_accounts(user_id)
    except BankError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return [AccountResponse.model_validate(a) for a in accounts]
