"""
Tests for the TransactionService money movements and CRUD.
"""

from decimal import Decimal

import pytest

from bank_ledger.exceptions import InvalidOperationError, NotFoundError
from bank_ledger.models.account import Account
from bank_ledger.models.enums import FeeStrategy, TransactionReason
from bank_ledger.services.fees import FeePolicy
from bank_ledger.services.transaction_service import TransactionService
from bank_ledger.schemas.transaction import (
    DepositRequest,
    WithdrawalRequest,
    TransferRequest,
    TransactionCreate,
    TransactionUpdate,
)


def balance_of(db_session, account_id):
    db_session.expire_all()
    return db_session.get(Account, account_id).balance


# --- Deposit Tests ---

class TestDeposit:

    def test_deposit_credits_fee_adjusted_amount(self, db_session, make_account):
        account = make_account("1000.00")
        service = TransactionService(db_session)

        service.process_deposit(DepositRequest(
            account_id=account.account_id, amount=Decimal("500.00"),
        ))
        db_session.commit()

        # (500 - 10) * 1.05 = 514.50
        assert balance_of(db_session, account.account_id) == Decimal("1514.50")

    def test_deposit_records_raw_amount(self, db_session, make_account):
        account = make_account("0")
        service = TransactionService(db_session)

        txn = service.process_deposit(DepositRequest(
            account_id=account.account_id, amount=Decimal("200.00"),
        ))
        db_session.commit()

        assert txn.transaction_id is not None
        assert txn.amount == Decimal("200.00")
        assert txn.transaction_reason == "Deposit"
        assert txn.reason == TransactionReason.DEPOSIT
        assert txn.originating_account_id == account.account_id
        assert txn.resulting_account_id is None

    def test_deposit_has_no_funds_check(self, db_session, make_account):
        account = make_account("-50.00")
        service = TransactionService(db_session)

        service.process_deposit(DepositRequest(
            account_id=account.account_id, amount=Decimal("30.00"),
        ))
        db_session.commit()

        # (30 - 10) * 1.05 = 21
        assert balance_of(db_session, account.account_id) == Decimal("-29.00")

    def test_deposit_to_missing_account(self, db_session):
        service = TransactionService(db_session)
        with pytest.raises(NotFoundError, match="Account not found"):
            service.process_deposit(DepositRequest(
                account_id=999, amount=Decimal("10"),
            ))


# --- Withdrawal Tests ---

class TestWithdrawal:

    def test_withdrawal_debits_fee_inclusive_total(
        self, db_session, make_account
    ):
        account = make_account("1000.00")
        service = TransactionService(db_session)

        txn = service.process_withdrawal(WithdrawalRequest(
            account_id=account.account_id, amount=Decimal("200.00"),
        ))
        db_session.commit()

        # (200 + 10) * 1.05 = 220.50
        assert balance_of(db_session, account.account_id) == Decimal("779.50")
        assert txn.amount == Decimal("-200.00")
        assert txn.reason == TransactionReason.WITHDRAWAL
        assert txn.resulting_account_id is None

    def test_funds_check_ignores_fee(self, db_session, make_account):
        """Balance equal to the amount is enough, even though fees overdraw."""
        account = make_account("100.00")
        service = TransactionService(db_session)

        service.process_withdrawal(WithdrawalRequest(
            account_id=account.account_id, amount=Decimal("100.00"),
        ))
        db_session.commit()

        assert balance_of(db_session, account.account_id) == Decimal("-15.50")

    def test_insufficient_funds_rejected(self, db_session, make_account):
        account = make_account("99.99")
        service = TransactionService(db_session)

        with pytest.raises(InvalidOperationError, match="Insufficient funds"):
            service.process_withdrawal(WithdrawalRequest(
                account_id=account.account_id, amount=Decimal("100.00"),
            ))
        db_session.rollback()

        assert balance_of(db_session, account.account_id) == Decimal("99.99")
        assert service.find_all() == []

    def test_withdrawal_from_missing_account(self, db_session):
        service = TransactionService(db_session)
        with pytest.raises(NotFoundError, match="Account not found"):
            service.process_withdrawal(WithdrawalRequest(
                account_id=42, amount=Decimal("1"),
            ))


# --- Transfer Tests ---

class TestTransfer:

    def test_transfer_moves_money(self, db_session, make_account):
        source = make_account("1000.00", "alice")
        target = make_account("500.00", "bob")
        service = TransactionService(db_session)

        txn = service.process_transfer(TransferRequest(
            source_account_id=source.account_id,
            destination_account_id=target.account_id,
            amount=Decimal("100.00"),
        ))
        db_session.commit()

        # Source pays (100 + 10) * 1.05 = 115.50, target gets exactly 100
        assert balance_of(db_session, source.account_id) == Decimal("884.50")
        assert balance_of(db_session, target.account_id) == Decimal("600.00")
        assert txn.amount == Decimal("-100.00")
        assert txn.originating_account_id == source.account_id
        assert txn.resulting_account_id == target.account_id
        assert txn.transaction_reason == "Transfer"

    def test_transfer_checks_fee_inclusive_total(self, db_session, make_account):
        # 90 is affordable but 90 plus fees (105) is not
        source = make_account("100.00", "alice")
        target = make_account("0", "bob")
        service = TransactionService(db_session)

        with pytest.raises(InvalidOperationError, match="Insufficient funds"):
            service.process_transfer(TransferRequest(
                source_account_id=source.account_id,
                destination_account_id=target.account_id,
                amount=Decimal("90.00"),
            ))
        db_session.rollback()

        assert balance_of(db_session, source.account_id) == Decimal("100.00")
        assert balance_of(db_session, target.account_id) == Decimal("0")

    def test_transfer_with_exact_funds(self, db_session, make_account):
        source = make_account("115.50", "alice")
        target = make_account("0", "bob")
        service = TransactionService(db_session)

        service.process_transfer(TransferRequest(
            source_account_id=source.account_id,
            destination_account_id=target.account_id,
            amount=Decimal("100.00"),
        ))
        db_session.commit()

        assert balance_of(db_session, source.account_id) == Decimal("0")

    def test_missing_source_account(self, db_session, make_account):
        target = make_account()
        service = TransactionService(db_session)
        with pytest.raises(NotFoundError, match="Source account not found"):
            service.process_transfer(TransferRequest(
                source_account_id=999,
                destination_account_id=target.account_id,
                amount=Decimal("1"),
            ))

    def test_missing_target_account(self, db_session, make_account):
        source = make_account()
        service = TransactionService(db_session)
        with pytest.raises(NotFoundError, match="Target account not found"):
            service.process_transfer(TransferRequest(
                source_account_id=source.account_id,
                destination_account_id=999,
                amount=Decimal("1"),
            ))


# --- Flat fee strategy ---

class TestFlatFeeStrategy:

    def policy(self):
        return FeePolicy(strategy=FeeStrategy.FLAT)

    def test_deposit(self, db_session, make_account):
        account = make_account("0")
        service = TransactionService(db_session, fee_policy=self.policy())

        txn = service.process_deposit(DepositRequest(
            account_id=account.account_id, amount=Decimal("200.00"),
        ))
        db_session.commit()

        assert balance_of(db_session, account.account_id) == Decimal("190.00")
        assert txn.amount == Decimal("200.00")

    def test_withdrawal_checks_fee_inclusive_total(
        self, db_session, make_account
    ):
        account = make_account("100.00")
        service = TransactionService(db_session, fee_policy=self.policy())

        with pytest.raises(InvalidOperationError):
            service.process_withdrawal(WithdrawalRequest(
                account_id=account.account_id, amount=Decimal("100.00"),
            ))

    def test_transfer(self, db_session, make_account):
        source = make_account("1000.00", "alice")
        target = make_account("0", "bob")
        service = TransactionService(db_session, fee_policy=self.policy())

        service.process_transfer(TransferRequest(
            source_account_id=source.account_id,
            destination_account_id=target.account_id,
            amount=Decimal("200.00"),
        ))
        db_session.commit()

        assert balance_of(db_session, source.account_id) == Decimal("790.00")
        assert balance_of(db_session, target.account_id) == Decimal("200.00")


# --- CRUD Tests ---

class TestTransactionCrud:

    def test_create_with_free_text_reason(self, db_session, make_account):
        account = make_account()
        service = TransactionService(db_session)

        txn = service.create_transaction(TransactionCreate(
            amount=Decimal("12.00"),
            originating_account_id=account.account_id,
            transaction_reason="Correction",
        ))
        db_session.commit()

        assert txn.transaction_reason == "Correction"
        assert txn.reason == TransactionReason.OTHER
        # Manual records never touch balances
        assert balance_of(db_session, account.account_id) == Decimal("1000.00")

    def test_create_with_missing_account(self, db_session):
        service = TransactionService(db_session)
        with pytest.raises(NotFoundError):
            service.create_transaction(TransactionCreate(
                amount=Decimal("1"),
                originating_account_id=999,
                transaction_reason="Deposit",
            ))

    def test_update_replaces_all_fields(self, db_session, make_account):
        source = make_account("1000.00", "alice")
        target = make_account("0", "bob")
        service = TransactionService(db_session)
        txn = service.process_deposit(DepositRequest(
            account_id=source.account_id, amount=Decimal("50"),
        ))
        db_session.commit()

        updated = service.update_transaction(txn.transaction_id, TransactionUpdate(
            amount=Decimal("-75"),
            originating_account_id=source.account_id,
            resulting_account_id=target.account_id,
            transaction_reason="Transfer",
        ))
        db_session.commit()

        assert updated.amount == Decimal("-75")
        assert updated.resulting_account_id == target.account_id
        assert updated.reason == TransactionReason.TRANSFER

    def test_update_missing_transaction(self, db_session, make_account):
        account = make_account()
        service = TransactionService(db_session)
        with pytest.raises(NotFoundError, match="Transaction not found"):
            service.update_transaction(999, TransactionUpdate(
                amount=Decimal("1"),
                originating_account_id=account.account_id,
                transaction_reason="Deposit",
            ))
        assert service.find_all() == []

    def test_find_and_delete(self, db_session, make_account):
        account = make_account()
        service = TransactionService(db_session)
        txn = service.process_deposit(DepositRequest(
            account_id=account.account_id, amount=Decimal("20"),
        ))
        db_session.commit()

        assert service.find_one(txn.transaction_id) is txn
        assert len(service.find_all()) == 1

        service.delete(txn.transaction_id)
        db_session.commit()

        assert service.find_one(txn.transaction_id) is None

    def test_delete_missing_transaction(self, db_session):
        service = TransactionService(db_session)
        with pytest.raises(NotFoundError):
            service.delete(123)
