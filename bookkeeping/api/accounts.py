"""
Chart of accounts API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bookkeeping.models.base import get_db
from bookkeeping.services.account_service import AccountService
from bookkeeping.schemas.account import AccountCreate, AccountResponse

router = APIRouter(tags=["Accounts"])


@router.get("/accounts", response_model=list[AccountResponse])
def list_accounts(db: Session = Depends(get_db)):
    """List the chart of accounts ordered by code."""
    return AccountService(db).list_accounts()


@router.post("/accounts", response_model=AccountResponse, status_code=201)
def create_account(
    request: AccountCreate,
    db: Session = Depends(get_db),
):
    """Add an account to the chart of accounts."""
    service = AccountService(db)
    try:
        account = service.create_account(request)
        db.commit()
        return account
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
