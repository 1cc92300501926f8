"""
Inventory API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bookkeeping.errors import NotFoundError
from bookkeeping.models.base import get_db
from bookkeeping.services.inventory_service import InventoryService
from bookkeeping.schemas.inventory import (
    ItemCreate,
    ItemResponse,
    ItemCreatedResponse,
    InventoryTxnCreate,
    InventoryTxnResponse,
    InventoryTxnPostedResponse,
)

router = APIRouter(tags=["Inventory"])


@router.get("/items", response_model=list[ItemResponse])
def list_items(db: Session = Depends(get_db)):
    return InventoryService(db).list_items()


@router.post("/items", response_model=ItemCreatedResponse)
def create_item(
    request: ItemCreate,
    db: Session = Depends(get_db),
):
    service = InventoryService(db)
    try:
        item = service.create_item(request)
        db.commit()
        return ItemCreatedResponse(id=item.id)
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get(
    "/items/{item_id}/transactions",
    response_model=list[InventoryTxnResponse],
)
def list_item_transactions(item_id: int, db: Session = Depends(get_db)):
    """Transactions recorded against an item, oldest first."""
    try:
        return InventoryService(db).get_transactions(item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/inventory/txn", response_model=InventoryTxnPostedResponse)
def record_txn(
    request: InventoryTxnCreate,
    db: Session = Depends(get_db),
):
    """
    Record a purchase or sale.

    The journal entry, the transaction row and the item update
    are committed together.
    """
    service = InventoryService(db)
    try:
        txn = service.record_txn(request)
        db.commit()
        return InventoryTxnPostedResponse(entry_id=txn.journal_id)
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
