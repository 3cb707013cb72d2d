# tests/unit/test_wallet_persistence.py
"""Unit tests for LedgerService using MagicMock AsyncSession."""
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.jm_common.errors import InsufficientFundsError, WalletNotFoundError
from src.jm_wallet.infrastructure.persistence import LedgerService


def _make_wallet_row(balance: int | None = 500000):
    row = MagicMock()
    row.user_id = "finder-1"
    row.balance = balance
    row.total_earned = 900000
    row.pending_amount = 0
    return row


def _make_withdrawal_row(amount: int = 100000):
    row = MagicMock()
    row.id = 11
    row.user_id = "finder-1"
    row.amount_paise = amount
    row.status = "pending"
    row.requested_at = datetime.now(UTC)
    row.processed_at = None
    return row


def _result(one=None, all_=None):
    result_mock = MagicMock()
    result_mock.fetchone.return_value = one
    result_mock.fetchall.return_value = all_ or []
    return result_mock


@pytest.fixture
def db():
    return MagicMock()


class TestReads:
    @pytest.mark.asyncio
    async def test_get_wallet_found(self, db):
        db.execute = AsyncMock(return_value=_result(one=_make_wallet_row()))
        wallet = await LedgerService().get_wallet(db, "finder-1")
        assert wallet.balance == 500000

    @pytest.mark.asyncio
    async def test_get_wallet_missing(self, db):
        db.execute = AsyncMock(return_value=_result(one=None))
        assert await LedgerService().get_wallet(db, "finder-1") is None

    @pytest.mark.asyncio
    async def test_withdrawal_history(self, db):
        db.execute = AsyncMock(return_value=_result(all_=[_make_withdrawal_row()]))
        history = await LedgerService().get_withdrawal_history(db, "finder-1")
        assert [w.id for w in history] == [11]


class TestWithdraw:
    @pytest.mark.asyncio
    async def test_debits_records_withdrawal_and_transaction(self, db):
        db.execute = AsyncMock(
            side_effect=[
                _result(one=_make_wallet_row(balance=400000)),
                _result(one=_make_withdrawal_row()),
                _result(),
            ]
        )

        withdrawal = await LedgerService().withdraw(db, "finder-1", 100000)

        assert withdrawal.id == 11
        assert db.execute.await_count == 3
        tx_params = db.execute.call_args_list[2].args[1]
        assert tx_params["type"] == "withdrawal"
        assert tx_params["amount"] == -100000
        assert tx_params["balance_after"] == 400000
        assert tx_params["reference_id"] == "11"

    @pytest.mark.asyncio
    async def test_insufficient_funds(self, db):
        db.execute = AsyncMock(
            side_effect=[_result(one=None), _result(one=_make_wallet_row(balance=500))]
        )

        with pytest.raises(InsufficientFundsError) as exc_info:
            await LedgerService().withdraw(db, "finder-1", 100000)

        assert exc_info.value.code == 2001

    @pytest.mark.asyncio
    async def test_missing_wallet(self, db):
        db.execute = AsyncMock(side_effect=[_result(one=None), _result(one=None)])

        with pytest.raises(WalletNotFoundError):
            await LedgerService().withdraw(db, "finder-1", 100000)
