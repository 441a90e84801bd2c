"""
Transaction API endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from bank_ledger.exceptions import InvalidOperationError, NotFoundError
from bank_ledger.models.base import get_db
from bank_ledger.services.transaction_service import TransactionService
from bank_ledger.schemas.transaction import (
    DepositRequest,
    WithdrawalRequest,
    TransferRequest,
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/transactions", tags=["Transactions"])


def _created(response: Response, txn):
    response.headers["Location"] = f"/api/transactions/{txn.transaction_id}"
    return txn


@router.post("/withdrawal", response_model=TransactionResponse, status_code=201)
def withdraw(
    request: WithdrawalRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    """Withdraw money from an account."""
    service = TransactionService(db)
    try:
        txn = service.process_withdrawal(request)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidOperationError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    return _created(response, txn)


@router.post("/deposit", response_model=TransactionResponse, status_code=201)
def deposit(
    request: DepositRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    """Deposit money into an account."""
    service = TransactionService(db)
    try:
        txn = service.process_deposit(request)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    return _created(response, txn)


@router.post("/transfer", response_model=TransactionResponse, status_code=201)
def transfer(
    request: TransferRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    """Transfer money between two accounts."""
    service = TransactionService(db)
    try:
        txn = service.process_transfer(request)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidOperationError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    return _created(response, txn)


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(transaction_id: int, db: Session = Depends(get_db)):
    """Get transaction details."""
    txn = TransactionService(db).find_one(transaction_id)
    if not txn:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return txn


@router.get("", response_model=list[TransactionResponse])
def get_all_transactions(db: Session = Depends(get_db)):
    return TransactionService(db).find_all()


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    request: TransactionCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    """Record a transaction without moving any money."""
    service = TransactionService(db)
    try:
        txn = service.create_transaction(request)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    return _created(response, txn)


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: int,
    request: TransactionUpdate,
    db: Session = Depends(get_db),
):
    service = TransactionService(db)
    try:
        txn = service.update_transaction(transaction_id, request)
        db.commit()
        return txn
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(transaction_id: int, db: Session = Depends(get_db)):
    service = TransactionService(db)
    try:
        service.delete(transaction_id)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
