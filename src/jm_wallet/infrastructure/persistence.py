"""LedgerService — concrete implementation of LedgerServiceProtocol.

Balance mutation is one atomic UPDATE ... RETURNING guarded by
`balance >= :amount`; zero rows back means the wallet is missing or short.
Every withdrawal appends one withdrawals row (pending) and one
wallet_transactions row (negative amount) in the same transaction.

Transaction ownership: the CALLER commits or rolls back.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.jm_common.database import translate_db_errors
from src.jm_common.enums import TransactionType, WithdrawalStatus
from src.jm_common.errors import InsufficientFundsError, PersistenceError, WalletNotFoundError
from src.jm_wallet.domain.models import Transaction, WalletSnapshot, WithdrawalRecord

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

_GET_WALLET_SQL = text("""
    SELECT user_id, balance, total_earned, pending_amount
    FROM wallets
    WHERE user_id = :user_id
""")

_LIST_TRANSACTIONS_SQL = text("""
    SELECT id, user_id, type, amount_paise, description, reference_id, created_at
    FROM wallet_transactions
    WHERE user_id = :user_id
    ORDER BY id DESC
""")

_LIST_WITHDRAWALS_SQL = text("""
    SELECT id, user_id, amount_paise, status, requested_at, processed_at
    FROM withdrawals
    WHERE user_id = :user_id
    ORDER BY id DESC
""")

_DEBIT_WALLET_SQL = text("""
    UPDATE wallets
    SET balance = balance - :amount,
        version = version + 1,
        updated_at = NOW()
    WHERE user_id = :user_id AND balance >= :amount
    RETURNING user_id, balance, total_earned, pending_amount
""")

_INSERT_WITHDRAWAL_SQL = text("""
    INSERT INTO withdrawals (user_id, amount_paise, status)
    VALUES (:user_id, :amount, :status)
    RETURNING id, user_id, amount_paise, status, requested_at, processed_at
""")

_INSERT_TRANSACTION_SQL = text("""
    INSERT INTO wallet_transactions
        (user_id, type, amount_paise, balance_after, description, reference_id)
    VALUES
        (:user_id, :type, :amount, :balance_after, :description, :reference_id)
    RETURNING id
""")


# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------

def _row_to_wallet(row: object) -> WalletSnapshot:
    return WalletSnapshot(
        user_id=str(row.user_id),  # type: ignore[attr-defined]
        balance=row.balance,  # type: ignore[attr-defined]
        total_earned=row.total_earned,  # type: ignore[attr-defined]
        pending_amount=row.pending_amount,  # type: ignore[attr-defined]
    )


def _row_to_transaction(row: object) -> Transaction:
    return Transaction(
        id=row.id,  # type: ignore[attr-defined]
        user_id=str(row.user_id),  # type: ignore[attr-defined]
        type=row.type,  # type: ignore[attr-defined]
        amount_paise=row.amount_paise,  # type: ignore[attr-defined]
        description=row.description,  # type: ignore[attr-defined]
        reference_id=row.reference_id,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
    )


def _row_to_withdrawal(row: object) -> WithdrawalRecord:
    return WithdrawalRecord(
        id=row.id,  # type: ignore[attr-defined]
        user_id=str(row.user_id),  # type: ignore[attr-defined]
        amount_paise=row.amount_paise,  # type: ignore[attr-defined]
        status=row.status,  # type: ignore[attr-defined]
        requested_at=row.requested_at,  # type: ignore[attr-defined]
        processed_at=row.processed_at,  # type: ignore[attr-defined]
    )


# ---------------------------------------------------------------------------
# Ledger service
# ---------------------------------------------------------------------------

class LedgerService:
    async def get_wallet(self, db: AsyncSession, user_id: str) -> WalletSnapshot | None:
        with translate_db_errors("get_wallet"):
            result = await db.execute(_GET_WALLET_SQL, {"user_id": user_id})
            row = result.fetchone()
        return _row_to_wallet(row) if row else None

    async def get_transactions(self, db: AsyncSession, user_id: str) -> list[Transaction]:
        with translate_db_errors("get_transactions"):
            result = await db.execute(_LIST_TRANSACTIONS_SQL, {"user_id": user_id})
            rows = result.fetchall()
        return [_row_to_transaction(row) for row in rows]

    async def get_withdrawal_history(
        self, db: AsyncSession, user_id: str
    ) -> list[WithdrawalRecord]:
        with translate_db_errors("get_withdrawal_history"):
            result = await db.execute(_LIST_WITHDRAWALS_SQL, {"user_id": user_id})
            rows = result.fetchall()
        return [_row_to_withdrawal(row) for row in rows]

    async def withdraw(
        self, db: AsyncSession, user_id: str, amount_paise: int
    ) -> WithdrawalRecord:
        with translate_db_errors("withdraw"):
            result = await db.execute(
                _DEBIT_WALLET_SQL, {"user_id": user_id, "amount": amount_paise}
            )
            row = result.fetchone()
            if row is None:
                wallet_result = await db.execute(_GET_WALLET_SQL, {"user_id": user_id})
                wallet_row = wallet_result.fetchone()
                if wallet_row is None:
                    raise WalletNotFoundError(user_id)
                raise InsufficientFundsError(amount_paise, wallet_row.balance or 0)
            wallet = _row_to_wallet(row)

            withdrawal_result = await db.execute(
                _INSERT_WITHDRAWAL_SQL,
                {
                    "user_id": user_id,
                    "amount": amount_paise,
                    "status": WithdrawalStatus.PENDING.value,
                },
            )
            withdrawal_row = withdrawal_result.fetchone()
            if withdrawal_row is None:
                raise PersistenceError("withdraw", "withdrawal insert returned no rows")
            withdrawal = _row_to_withdrawal(withdrawal_row)

            await db.execute(
                _INSERT_TRANSACTION_SQL,
                {
                    "user_id": user_id,
                    "type": TransactionType.WITHDRAWAL.value,
                    "amount": -amount_paise,
                    "balance_after": wallet.balance,
                    "description": "Withdrawal to bank account",
                    "reference_id": str(withdrawal.id),
                },
            )
        return withdrawal
