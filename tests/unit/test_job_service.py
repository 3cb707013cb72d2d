# tests/unit/test_job_service.py
"""Unit tests for JobBrowserService with mocked repositories."""
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.jm_common.errors import JobNotFoundError
from src.jm_engagement.domain.models import Application, EngagementBoard, Negotiation
from src.jm_job.application.service import JobBrowserService
from src.jm_job.domain.models import JobPosting


def _make_posting(job_id: str, title: str, category: str) -> JobPosting:
    return JobPosting(
        id=job_id,
        title=title,
        description=f"{title} needed",
        budget_paise=200000,
        posted_by="poster-1",
        poster_name="Asha",
        status="active",
        category=category,
        created_at=datetime.now(UTC),
    )


def _make_service(postings, board=None, posting=None):
    repo = MagicMock()
    repo.list_active_postings = AsyncMock(return_value=postings)
    repo.get_posting = AsyncMock(return_value=posting)
    engagements = MagicMock()
    engagements.get_board = AsyncMock(return_value=board or EngagementBoard())
    return JobBrowserService(repo=repo, engagements=engagements), repo, engagements


class TestBrowse:
    @pytest.mark.asyncio
    async def test_filters_and_annotates(self):
        tutor = _make_posting("j1", "Tutor", "tutor")
        delivery = _make_posting("j2", "Delivery", "delivery")
        painter = _make_posting("j3", "Painter", "painting")
        board = EngagementBoard(
            pending_applications=[
                Application(
                    id="a1", job=tutor, finder_id="f1", finder_name="Ravi",
                    status="pending", applied_at=datetime.now(UTC), message="hi",
                )
            ],
            confirmed=[
                Negotiation(
                    id="n1", job=delivery, finder_id="f1", finder_name="Ravi",
                    proposed_amount_paise=150000, status="accepted",
                    created_at=datetime.now(UTC), message="ok",
                )
            ],
        )
        svc, _, engagements = _make_service([tutor, delivery, painter], board)

        resp = await svc.browse(MagicMock(), "f1")

        engagements.get_board.assert_awaited_once()
        assert resp.total == 3
        flags = {i.job.id: (i.has_applied, i.has_negotiated, i.can_engage) for i in resp.items}
        assert flags == {
            "j1": (True, False, False),
            "j2": (False, True, False),
            "j3": (False, False, True),
        }

    @pytest.mark.asyncio
    async def test_query_and_category_echoed(self):
        svc, _, _ = _make_service(
            [_make_posting("j1", "Tutor", "tutor"), _make_posting("j2", "Delivery", "delivery")]
        )

        resp = await svc.browse(MagicMock(), "f1", query="TUT", category="tutor")

        assert [i.job.id for i in resp.items] == ["j1"]
        assert resp.query == "TUT"
        assert resp.category == "tutor"

    @pytest.mark.asyncio
    async def test_empty_catalogue(self):
        svc, _, _ = _make_service([])
        resp = await svc.browse(MagicMock(), "f1")
        assert resp.items == []
        assert resp.total == 0


class TestGetJob:
    @pytest.mark.asyncio
    async def test_returns_job(self):
        posting = _make_posting("j1", "Tutor", "tutor")
        svc, _, _ = _make_service([], posting=posting)

        job = await svc.get_job(MagicMock(), "j1")

        assert job.id == "j1"
        assert job.budget_display == "₹2,000.00"

    @pytest.mark.asyncio
    async def test_missing_raises(self):
        svc, _, _ = _make_service([], posting=None)
        with pytest.raises(JobNotFoundError):
            await svc.get_job(MagicMock(), "nope")
