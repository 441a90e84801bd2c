"""
Bank API endpoints, including the reporting figures.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from bank_ledger.exceptions import NotFoundError
from bank_ledger.models.base import get_db
from bank_ledger.services.bank_service import BankService
from bank_ledger.schemas.account import AccountResponse
from bank_ledger.schemas.bank import (
    BankCreate,
    BankUpdate,
    BankResponse,
    BankSummaryResponse,
    AmountResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/banks", tags=["Banks"])


@router.get("", response_model=list[BankResponse])
def get_all_banks(db: Session = Depends(get_db)):
    logger.debug("REST request to get all banks")
    return BankService(db).find_all()


@router.post("", response_model=BankResponse, status_code=201)
def create_bank(
    request: BankCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    """Create a new bank."""
    logger.debug("REST request to create bank: %s", request)
    bank = BankService(db).create_bank(request)
    db.commit()
    response.headers["Location"] = f"/api/banks/{bank.bank_id}"
    return bank


# Static paths are declared before /{bank_id} so they are not
# captured as an id.

@router.get("/accounts", response_model=list[AccountResponse])
def get_all_accounts(db: Session = Depends(get_db)):
    """Every account known to the system."""
    return BankService(db).get_all_accounts()


@router.get("/summary", response_model=BankSummaryResponse)
def get_summary(db: Session = Depends(get_db)):
    """Fee and transfer totals computed over all transactions."""
    return BankService(db).get_reporting_summary()


@router.get("/total-fee-amount", response_model=AmountResponse)
def get_total_fee_amount(db: Session = Depends(get_db)):
    amount = BankService(db).calculate_total_transaction_fee_amount()
    return AmountResponse(amount=amount)


@router.get("/total-transfer-amount", response_model=AmountResponse)
def get_total_transfer_amount(db: Session = Depends(get_db)):
    amount = BankService(db).calculate_total_transfer_amount()
    return AmountResponse(amount=amount)


@router.get("/{bank_id}", response_model=BankResponse)
def get_bank(bank_id: int, db: Session = Depends(get_db)):
    logger.debug("REST request to get bank by ID: %s", bank_id)
    bank = BankService(db).find_one(bank_id)
    if not bank:
        raise HTTPException(status_code=404, detail="Bank not found")
    return bank


@router.put("/{bank_id}", response_model=BankResponse)
def update_bank(
    bank_id: int,
    request: BankUpdate,
    db: Session = Depends(get_db),
):
    """Replace every mutable field of a bank."""
    service = BankService(db)
    try:
        bank = service.update_bank(bank_id, request)
        db.commit()
        return bank
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{bank_id}", status_code=204)
def delete_bank(bank_id: int, db: Session = Depends(get_db)):
    """Delete a bank. Its accounts and their transactions go with it."""
    service = BankService(db)
    try:
        service.delete(bank_id)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
