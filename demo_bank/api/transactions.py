"""
Transaction endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from demo_bank.api.dependencies import get_current_user_id
from demo_bank.exceptions import BankError
from demo_bank.models.base import get_db
from demo_bank.services.query_service import QueryService
from demo_bank.services.transfer_service import TransferService
from demo_bank.schemas.account import AccountResponse
from demo_bank.schemas.transaction import (
    TransactionResponse,
    TransferRequest,
    TransferResponse,
)

router = APIRouter(prefix="/api", tags=["Transactions"])


@router.get("/transactions", response_model=list[TransactionResponse])
def list_transactions(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """List all of the caller's transactions, newest first."""
    service = QueryService(db)
    try:
        transactions = service.list_transactions(user_id)
    except BankError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return [TransactionResponse.model_validate(t) for t in transactions]


@router.post("/transfer", response_model=TransferResponse)
def transfer(
    request: TransferRequest,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Transfer money between two of the caller's accounts.

    Returns the updated accounts and the full transaction list.
    The service commits on success and rolls back on failure.
    """
    service = TransferService(db)
    try:
        result = service.transfer(user_id, request)
    except BankError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

    return TransferResponse(
        message="Transfer successful",
        accounts=[AccountResponse.model_validate(a) for a in result.accounts],
        transactions=[
            TransactionResponse.model_validate(t) for t in result.transactions
        ],
    )
