"""Pydantic schemas for jm_engagement API.

Message and amount are deliberately loose here: the orchestrator owns those
rules and reports violations as ValidationError (4001) with the same
envelope as every other domain error.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from src.jm_common.money import paise_to_display
from src.jm_engagement.domain.models import (
    ContactDetails,
    Engagement,
    EngagementBoard,
    Negotiation,
    SubmissionResult,
    settlement_amount,
)
from src.jm_job.application.schemas import JobOut

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class ContactDetailsIn(BaseModel):
    email: str = Field("", max_length=255)
    phone: str = Field("", max_length=32)
    distance: str = Field("5 km", max_length=64)
    time_to_reach: str = Field("30 mins", max_length=64)

    def to_domain(self) -> ContactDetails:
        return ContactDetails(
            email=self.email,
            phone=self.phone,
            distance=self.distance,
            time_to_reach=self.time_to_reach,
        )


class SubmitApplicationRequest(BaseModel):
    job_id: str = Field(..., min_length=1, max_length=64)
    message: str = Field(..., max_length=2000)
    contact: ContactDetailsIn = Field(default_factory=ContactDetailsIn)


class SubmitNegotiationRequest(BaseModel):
    job_id: str = Field(..., min_length=1, max_length=64)
    proposed_amount: Decimal | str = Field(..., description="Rupees, e.g. 4000 or \"4000.50\"")
    message: str = Field(..., max_length=2000)
    contact: ContactDetailsIn = Field(default_factory=ContactDetailsIn)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class ContactDetailsOut(BaseModel):
    email: str
    phone: str
    distance: str
    time_to_reach: str


class EngagementItem(BaseModel):
    id: str
    kind: str
    status: str
    job: JobOut
    message: str
    submitted_at: str
    contact: ContactDetailsOut
    proposed_amount_paise: int | None
    proposed_amount_display: str | None
    settlement_amount_paise: int | None
    settlement_amount_display: str | None

    @classmethod
    def from_domain(cls, e: Engagement) -> "EngagementItem":
        proposed = e.proposed_amount_paise if isinstance(e, Negotiation) else None
        settlement = settlement_amount(e)
        return cls(
            id=e.id,
            kind=e.kind.value,
            status=e.status,
            job=JobOut.from_domain(e.job),
            message=e.message,
            submitted_at=e.submitted_at.isoformat(),
            contact=ContactDetailsOut(
                email=e.contact.email,
                phone=e.contact.phone,
                distance=e.contact.distance,
                time_to_reach=e.contact.time_to_reach,
            ),
            proposed_amount_paise=proposed,
            proposed_amount_display=paise_to_display(proposed) if proposed is not None else None,
            settlement_amount_paise=settlement,
            settlement_amount_display=(
                paise_to_display(settlement) if settlement is not None else None
            ),
        )


class EngagementBoardResponse(BaseModel):
    pending_applications: list[EngagementItem]
    pending_negotiations: list[EngagementItem]
    confirmed: list[EngagementItem]
    past: list[EngagementItem]
    closed: list[EngagementItem]
    pending_application_count: int
    past_earnings_paise: int
    past_earnings_display: str

    @classmethod
    def from_domain(cls, board: EngagementBoard) -> "EngagementBoardResponse":
        earned = sum(settlement_amount(e) or 0 for e in board.past)
        return cls(
            pending_applications=[EngagementItem.from_domain(e) for e in board.pending_applications],
            pending_negotiations=[EngagementItem.from_domain(e) for e in board.pending_negotiations],
            confirmed=[EngagementItem.from_domain(e) for e in board.confirmed],
            past=[EngagementItem.from_domain(e) for e in board.past],
            closed=[EngagementItem.from_domain(e) for e in board.closed],
            pending_application_count=len(board.pending_applications),
            past_earnings_paise=earned,
            past_earnings_display=paise_to_display(earned),
        )


class SubmissionResponse(BaseModel):
    engagement: EngagementItem
    board: EngagementBoardResponse | None
    refresh_failed: bool

    @classmethod
    def from_result(cls, result: SubmissionResult) -> "SubmissionResponse":
        return cls(
            engagement=EngagementItem.from_domain(result.engagement),
            board=(
                EngagementBoardResponse.from_domain(result.board)
                if result.board is not None
                else None
            ),
            refresh_failed=result.refresh_failed,
        )
