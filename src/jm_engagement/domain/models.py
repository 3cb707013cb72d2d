"""Domain models for jm_engagement — pure dataclasses, no SQLAlchemy dependency.

An engagement is a finder's Application or Negotiation on a job posting.
Both carry the joined JobPosting; `kind` is the discriminant.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, assert_never

from src.jm_common.enums import (
    ApplicationStatus,
    EngagementKind,
    JobStatus,
    NegotiationStatus,
)
from src.jm_job.domain.models import JobPosting


@dataclass(frozen=True)
class ContactDetails:
    """How the poster reaches the finder. Stored verbatim."""

    email: str = ""
    phone: str = ""
    distance: str = "5 km"
    time_to_reach: str = "30 mins"


@dataclass
class Application:
    id: str
    job: JobPosting
    finder_id: str
    finder_name: str
    status: str                      # ApplicationStatus value
    applied_at: datetime
    message: str
    contact: ContactDetails = field(default_factory=ContactDetails)
    kind: Literal[EngagementKind.APPLICATION] = field(
        default=EngagementKind.APPLICATION, init=False
    )

    @property
    def job_id(self) -> str:
        return self.job.id

    @property
    def submitted_at(self) -> datetime:
        return self.applied_at

    @property
    def is_pending(self) -> bool:
        return self.status == ApplicationStatus.PENDING.value

    @property
    def is_accepted(self) -> bool:
        return self.status == ApplicationStatus.APPROVED.value

    @property
    def is_rejected(self) -> bool:
        return self.status == ApplicationStatus.REJECTED.value


@dataclass
class Negotiation:
    id: str
    job: JobPosting
    finder_id: str
    finder_name: str
    proposed_amount_paise: int
    status: str                      # NegotiationStatus value
    created_at: datetime
    message: str
    contact: ContactDetails = field(default_factory=ContactDetails)
    kind: Literal[EngagementKind.NEGOTIATION] = field(
        default=EngagementKind.NEGOTIATION, init=False
    )

    @property
    def job_id(self) -> str:
        return self.job.id

    @property
    def submitted_at(self) -> datetime:
        return self.created_at

    @property
    def is_pending(self) -> bool:
        return self.status == NegotiationStatus.PENDING.value

    @property
    def is_accepted(self) -> bool:
        return self.status == NegotiationStatus.ACCEPTED.value

    @property
    def is_rejected(self) -> bool:
        return self.status == NegotiationStatus.REJECTED.value


Engagement = Application | Negotiation


def settlement_amount(engagement: Engagement) -> int | None:
    """Paise owed for a confirmed or past engagement, None for anything else.

    A negotiation settles at its proposed amount, an application at the
    posting's budget.
    """
    if not engagement.is_accepted or engagement.job.status == JobStatus.CANCELLED.value:
        return None
    match engagement:
        case Negotiation(proposed_amount_paise=amount):
            return amount
        case Application(job=job):
            return job.budget_paise
        case _:
            assert_never(engagement)


@dataclass(frozen=True)
class ApplicationDraft:
    """Insert payload for a new application; status is always pending."""

    job_id: str
    finder_id: str
    finder_name: str
    message: str
    contact: ContactDetails


@dataclass(frozen=True)
class NegotiationDraft:
    job_id: str
    finder_id: str
    finder_name: str
    proposed_amount_paise: int
    message: str
    contact: ContactDetails


@dataclass
class EngagementBoard:
    """The five disjoint views of a finder's engagements."""

    pending_applications: list[Application] = field(default_factory=list)
    pending_negotiations: list[Negotiation] = field(default_factory=list)
    confirmed: list[Engagement] = field(default_factory=list)
    past: list[Engagement] = field(default_factory=list)
    closed: list[Engagement] = field(default_factory=list)

    def open_engagements(self) -> list[Engagement]:
        """Everything that still blocks a new engagement on the same job."""
        return [
            *self.pending_applications,
            *self.pending_negotiations,
            *self.confirmed,
            *self.past,
        ]

    def find_open(self, job_id: str) -> Engagement | None:
        return next((e for e in self.open_engagements() if e.job_id == job_id), None)

    def engaged_job_ids(self, kind: EngagementKind) -> set[str]:
        return {e.job_id for e in self.open_engagements() if e.kind == kind}


@dataclass(frozen=True)
class FinderIdentity:
    """The acting finder, passed explicitly into every command."""

    finder_id: str
    finder_name: str


@dataclass
class SubmissionResult:
    """Outcome of a successful write.

    `board` is None and `refresh_failed` True when the write committed but
    the follow-up read failed; the caller should offer a retry of the read.
    """

    engagement: Engagement
    board: EngagementBoard | None
    refresh_failed: bool = False
