"""
Account API endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from bank_ledger.exceptions import NotFoundError
from bank_ledger.models.base import get_db
from bank_ledger.services.account_service import AccountService
from bank_ledger.schemas.account import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bank", tags=["Accounts"])


@router.get("/accounts/{account_id}", response_model=AccountResponse)
def get_account(account_id: int, db: Session = Depends(get_db)):
    """Get account details."""
    logger.debug("REST request to get account by ID: %s", account_id)
    account = AccountService(db).find_one(account_id)
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")
    return account


@router.get("/accounts", response_model=list[AccountResponse])
def get_all_accounts(db: Session = Depends(get_db)):
    logger.debug("REST request to get all accounts")
    return AccountService(db).find_all()


@router.post("/accounts", response_model=AccountResponse, status_code=201)
def create_account(
    request: AccountCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    """Open an account at an existing bank."""
    service = AccountService(db)
    try:
        account = service.create_account(request)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    response.headers["Location"] = f"/api/bank/accounts/{account.account_id}"
    return account


@router.put("/accounts/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: int,
    request: AccountUpdate,
    db: Session = Depends(get_db),
):
    service = AccountService(db)
    try:
        account = service.update_account(account_id, request)
        db.commit()
        return account
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/accounts/{account_id}", status_code=204)
def delete_account(account_id: int, db: Session = Depends(get_db)):
    """Delete an account and every transaction that references it."""
    service = AccountService(db)
    try:
        service.delete(account_id)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
