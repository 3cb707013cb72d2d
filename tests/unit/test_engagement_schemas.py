# tests/unit/test_engagement_schemas.py
"""Unit tests for jm_engagement request/response schemas."""
from datetime import UTC, date, datetime

from src.jm_engagement.application.schemas import (
    ContactDetailsIn,
    EngagementBoardResponse,
    EngagementItem,
    SubmissionResponse,
    SubmitNegotiationRequest,
)
from src.jm_engagement.domain.models import (
    Application,
    EngagementBoard,
    Negotiation,
    SubmissionResult,
)
from src.jm_job.domain.models import JobPosting


def _make_job(status: str = "active") -> JobPosting:
    return JobPosting(
        id="job-1",
        title="Cook",
        description="Weekend cooking",
        budget_paise=300000,
        posted_by="poster-1",
        poster_name="Asha",
        status=status,
        category="cooking",
        created_at=datetime(2026, 3, 1, tzinfo=UTC),
        start_date=date(2026, 3, 7),
    )


def _make_app(status: str = "approved", job_status: str = "active") -> Application:
    return Application(
        id="a1",
        job=_make_job(job_status),
        finder_id="f1",
        finder_name="Ravi",
        status=status,
        applied_at=datetime(2026, 3, 2, tzinfo=UTC),
        message="hi",
    )


def _make_neg(status: str = "accepted", job_status: str = "completed") -> Negotiation:
    return Negotiation(
        id="n1",
        job=_make_job(job_status),
        finder_id="f1",
        finder_name="Ravi",
        proposed_amount_paise=250050,
        status=status,
        created_at=datetime(2026, 3, 2, tzinfo=UTC),
        message="lower?",
    )


class TestContactDetailsIn:
    def test_defaults_and_to_domain(self):
        contact = ContactDetailsIn().to_domain()
        assert contact.distance == "5 km"
        assert contact.time_to_reach == "30 mins"

    def test_values_kept_verbatim(self):
        contact = ContactDetailsIn(email=" a@b.c ", phone="+91 98765").to_domain()
        assert contact.email == " a@b.c "
        assert contact.phone == "+91 98765"


class TestSubmitNegotiationRequest:
    def test_amount_accepts_string(self):
        req = SubmitNegotiationRequest(job_id="job-1", proposed_amount="4000.50", message="x")
        assert str(req.proposed_amount) == "4000.50"

    def test_blank_message_left_to_service(self):
        req = SubmitNegotiationRequest(job_id="job-1", proposed_amount=1, message="   ")
        assert req.message == "   "


class TestEngagementItem:
    def test_application_item(self):
        item = EngagementItem.from_domain(_make_app())
        assert item.kind == "application"
        assert item.proposed_amount_paise is None
        assert item.settlement_amount_paise == 300000
        assert item.settlement_amount_display == "₹3,000.00"
        assert item.job.start_date == "2026-03-07"

    def test_negotiation_item(self):
        item = EngagementItem.from_domain(_make_neg())
        assert item.kind == "negotiation"
        assert item.proposed_amount_display == "₹2,500.50"
        assert item.settlement_amount_paise == 250050

    def test_pending_has_no_settlement(self):
        item = EngagementItem.from_domain(_make_app(status="pending"))
        assert item.settlement_amount_paise is None
        assert item.settlement_amount_display is None


class TestEngagementBoardResponse:
    def test_counts_and_past_earnings(self):
        board = EngagementBoard(
            pending_applications=[_make_app("pending")],
            confirmed=[_make_app()],
            past=[_make_neg(), _make_app(job_status="completed")],
        )
        resp = EngagementBoardResponse.from_domain(board)

        assert resp.pending_application_count == 1
        assert len(resp.confirmed) == 1
        assert resp.past_earnings_paise == 250050 + 300000
        assert resp.past_earnings_display == "₹5,500.50"

    def test_empty_board(self):
        resp = EngagementBoardResponse.from_domain(EngagementBoard())
        assert resp.past_earnings_display == "₹0.00"
        assert resp.closed == []


class TestSubmissionResponse:
    def test_refresh_failed_has_no_board(self):
        resp = SubmissionResponse.from_result(
            SubmissionResult(engagement=_make_app("pending"), board=None, refresh_failed=True)
        )
        assert resp.board is None
        assert resp.refresh_failed is True
        assert resp.engagement.id == "a1"
