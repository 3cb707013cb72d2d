"""003: create wallets, wallet_transactions, withdrawals

Revision ID: 003
Revises: 002
Create Date: 2026-10-01

All amounts are BIGINT paise. wallet_transactions and withdrawals are
append-only (withdrawals only move status forward, updated by the payout job).
"""
from typing import Sequence, Union

from alembic import op

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE wallets (
            user_id         VARCHAR(64)     PRIMARY KEY,
            balance         BIGINT          NOT NULL DEFAULT 0,
            total_earned    BIGINT          NOT NULL DEFAULT 0,
            pending_amount  BIGINT          NOT NULL DEFAULT 0,
            version         BIGINT          NOT NULL DEFAULT 0,
            created_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_wallets_balance_gte_0 CHECK (balance >= 0),
            CONSTRAINT ck_wallets_pending_gte_0 CHECK (pending_amount >= 0)
        );
    """)
    op.execute("""
        CREATE TRIGGER trg_wallets_updated_at
            BEFORE UPDATE ON wallets
            FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
    """)

    op.execute("""
        CREATE TABLE wallet_transactions (
            id              BIGSERIAL       PRIMARY KEY,
            user_id         VARCHAR(64)     NOT NULL REFERENCES wallets (user_id),
            type            VARCHAR(16)     NOT NULL,
            amount_paise    BIGINT          NOT NULL,
            balance_after   BIGINT          NOT NULL,
            description     VARCHAR(500),
            reference_id    VARCHAR(64),
            created_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_wallet_tx_type CHECK (type IN ('credit', 'debit', 'withdrawal'))
        );
    """)
    op.execute(
        "CREATE INDEX idx_wallet_tx_user_id ON wallet_transactions (user_id, id DESC);"
    )

    op.execute("""
        CREATE TABLE withdrawals (
            id              BIGSERIAL       PRIMARY KEY,
            user_id         VARCHAR(64)     NOT NULL REFERENCES wallets (user_id),
            amount_paise    BIGINT          NOT NULL,
            status          VARCHAR(16)     NOT NULL DEFAULT 'pending',
            requested_at    TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            processed_at    TIMESTAMPTZ,
            CONSTRAINT ck_withdrawals_amount_gt_0 CHECK (amount_paise > 0),
            CONSTRAINT ck_withdrawals_status CHECK (
                status IN ('pending', 'processing', 'completed', 'failed')
            )
        );
    """)
    op.execute("CREATE INDEX idx_withdrawals_user_id ON withdrawals (user_id, id DESC);")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS withdrawals CASCADE;")
    op.execute("DROP TABLE IF EXISTS wallet_transactions CASCADE;")
    op.execute("DROP TABLE IF EXISTS wallets CASCADE;")
