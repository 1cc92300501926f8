"""
Journal API endpoints.

The API layer is thin — it handles HTTP concerns (status codes,
response formatting) and delegates all business logic to the
LedgerService.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bookkeeping.errors import NotFoundError
from bookkeeping.models.base import get_db
from bookkeeping.services.ledger_service import LedgerService
from bookkeeping.schemas.journal import (
    JournalEntryCreate,
    JournalEntryResponse,
    PostEntryResponse,
    TrialBalanceResponse,
)

router = APIRouter(tags=["Journal"])


@router.get("/journal", response_model=list[JournalEntryResponse])
def list_entries(db: Session = Depends(get_db)):
    """
    List journal entries, newest first.

    Each line carries the code and name of its account.
    """
    return LedgerService(db).get_entries()


@router.get("/journal/{entry_id}", response_model=JournalEntryResponse)
def get_entry(entry_id: int, db: Session = Depends(get_db)):
    try:
        return LedgerService(db).get_entry(entry_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/journal", response_model=PostEntryResponse)
def post_entry(
    request: JournalEntryCreate,
    db: Session = Depends(get_db),
):
    """
    Post a journal entry.

    Lines must be non-empty, reference existing accounts, and
    total debits must equal total credits. A rejected entry
    leaves no rows behind.
    """
    service = LedgerService(db)
    try:
        entry = service.post_entry(request)
        db.commit()
        return PostEntryResponse(entry_id=entry.id)
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/trial-balance", response_model=TrialBalanceResponse)
def trial_balance(db: Session = Depends(get_db)):
    """Debit and credit totals for every account, plus grand totals."""
    return TrialBalanceResponse.model_validate(
        LedgerService(db).compute_trial_balance()
    )
