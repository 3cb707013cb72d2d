# tests/unit/test_job_persistence.py
"""Unit tests for JobRepository using MagicMock AsyncSession."""
from datetime import UTC, date, datetime, time
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
from sqlalchemy.exc import OperationalError

from src.jm_common.errors import PersistenceError
from src.jm_job.infrastructure.persistence import JobRepository, row_to_posting


def _make_job_row(**kwargs):
    row = MagicMock()
    row.id = kwargs.get("id", "job-1")
    row.title = kwargs.get("title", "Gardener")
    row.description = "Trim hedges"
    row.budget_paise = kwargs.get("budget_paise", 150000)
    row.posted_by = kwargs.get("posted_by", "poster-1")
    row.poster_name = "Asha"
    row.status = kwargs.get("status", "active")
    row.category = "gardening"
    row.roles_responsibilities = None
    row.start_date = date(2026, 5, 1)
    row.end_date = None
    row.start_time = time(9, 0)
    row.end_time = None
    row.created_at = datetime.now(UTC)
    return row


@pytest.fixture
def db():
    return MagicMock()


class TestRowToPosting:
    def test_ids_stringified(self):
        poster = UUID("12345678-1234-5678-1234-567812345678")
        posting = row_to_posting(_make_job_row(posted_by=poster))
        assert posting.posted_by == str(poster)
        assert posting.start_time == time(9, 0)


class TestListActivePostings:
    @pytest.mark.asyncio
    async def test_returns_postings_and_filters_active(self, db):
        result_mock = MagicMock()
        result_mock.fetchall.return_value = [_make_job_row(id="j2"), _make_job_row(id="j1")]
        db.execute = AsyncMock(return_value=result_mock)

        postings = await JobRepository().list_active_postings(db)

        assert [p.id for p in postings] == ["j2", "j1"]
        assert db.execute.call_args.args[1] == {"status": "active"}

    @pytest.mark.asyncio
    async def test_driver_error_translated(self, db):
        db.execute = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("gone")))

        with pytest.raises(PersistenceError) as exc_info:
            await JobRepository().list_active_postings(db)

        assert exc_info.value.operation == "list_active_postings"


class TestGetPosting:
    @pytest.mark.asyncio
    async def test_found(self, db):
        result_mock = MagicMock()
        result_mock.fetchone.return_value = _make_job_row(status="completed")
        db.execute = AsyncMock(return_value=result_mock)

        posting = await JobRepository().get_posting(db, "job-1")

        assert posting is not None
        assert posting.status == "completed"
        assert posting.budget_paise == 150000

    @pytest.mark.asyncio
    async def test_not_found(self, db):
        result_mock = MagicMock()
        result_mock.fetchone.return_value = None
        db.execute = AsyncMock(return_value=result_mock)

        assert await JobRepository().get_posting(db, "missing") is None
