"""create banks, accounts and transactions

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "banks",
        sa.Column("bank_id", sa.Integer(), primary_key=True),
        sa.Column("bank_name", sa.String(255), nullable=False),
        sa.Column("total_transaction_fee_amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("total_transfer_amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("transaction_flat_fee_amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("transaction_percent_fee_value", sa.Numeric(19, 4), nullable=False),
    )
    op.create_table(
        "accounts",
        sa.Column("account_id", sa.Integer(), primary_key=True),
        sa.Column("user_name", sa.String(255), nullable=False),
        sa.Column("balance", sa.Numeric(19, 4), nullable=False),
        sa.Column(
            "bank_id",
            sa.Integer(),
            sa.ForeignKey("banks.bank_id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index("ix_accounts_bank_id", "accounts", ["bank_id"])
    op.create_table(
        "transactions",
        sa.Column("transaction_id", sa.Integer(), primary_key=True),
        sa.Column("amount", sa.Numeric(19, 4), nullable=False),
        sa.Column(
            "originating_account_id",
            sa.Integer(),
            sa.ForeignKey("accounts.account_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "resulting_account_id",
            sa.Integer(),
            sa.ForeignKey("accounts.account_id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("transaction_reason", sa.String(255), nullable=False),
    )
    op.create_index(
        "ix_transactions_originating_account_id",
        "transactions",
        ["originating_account_id"],
    )
    op.create_index(
        "ix_transactions_resulting_account_id",
        "transactions",
        ["resulting_account_id"],
    )


def downgrade() -> None:
    op.drop_table("transactions")
    op.drop_table("accounts")
    op.drop_table("banks")
