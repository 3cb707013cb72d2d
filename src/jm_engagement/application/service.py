"""EngagementOrchestrator — submits applications/negotiations and re-reads the board.

Command flow (both commands):
  1. validate input               → ValidationError, zero repository calls
  2. job exists and is active     → JobNotFoundError / JobNotActiveError
  3. no open engagement on job    → EngagementExistsError
  4. insert + commit              → PersistenceError (rolled back, not retried)
  5. full refresh of the board    → failure is reported on the result, not raised

There is no local/optimistic state: the board returned is always the one
read back after the commit.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from src.jm_common.database import translate_db_errors
from src.jm_common.enums import JobStatus
from src.jm_common.errors import (
    EngagementExistsError,
    JobNotActiveError,
    JobNotFoundError,
    PersistenceError,
)
from src.jm_engagement.domain.classifier import classify
from src.jm_engagement.domain.models import (
    ApplicationDraft,
    ContactDetails,
    Engagement,
    EngagementBoard,
    FinderIdentity,
    NegotiationDraft,
    SubmissionResult,
)
from src.jm_engagement.domain.repository import EngagementRepositoryProtocol
from src.jm_engagement.domain.validation import require_message, require_proposed_amount
from src.jm_engagement.infrastructure.persistence import EngagementRepository
from src.jm_job.domain.repository import JobRepositoryProtocol
from src.jm_job.infrastructure.persistence import JobRepository

logger = logging.getLogger(__name__)


class EngagementOrchestrator:
    def __init__(
        self,
        repo: EngagementRepositoryProtocol | None = None,
        job_repo: JobRepositoryProtocol | None = None,
    ) -> None:
        self._repo: EngagementRepositoryProtocol = repo or EngagementRepository()
        self._job_repo: JobRepositoryProtocol = job_repo or JobRepository()

    async def get_board(self, db: AsyncSession, finder_id: str) -> EngagementBoard:
        applications = await self._repo.list_applications_for_finder(db, finder_id)
        negotiations = await self._repo.list_negotiations_for_finder(db, finder_id)
        return classify(applications, negotiations)

    async def submit_application(
        self,
        db: AsyncSession,
        finder: FinderIdentity,
        job_id: str,
        message: str,
        contact: ContactDetails,
    ) -> SubmissionResult:
        text = require_message(message)
        await self._ensure_can_engage(db, finder, job_id)

        draft = ApplicationDraft(
            job_id=job_id,
            finder_id=finder.finder_id,
            finder_name=finder.finder_name,
            message=text,
            contact=contact,
        )
        try:
            application = await self._repo.insert_application(db, draft)
            with translate_db_errors("commit application"):
                await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.info(
            "Application %s submitted: finder=%s job=%s",
            application.id, finder.finder_id, job_id,
        )
        return await self._refresh(db, finder, application)

    async def submit_negotiation(
        self,
        db: AsyncSession,
        finder: FinderIdentity,
        job_id: str,
        proposed_amount: object,
        message: str,
        contact: ContactDetails,
    ) -> SubmissionResult:
        amount_paise = require_proposed_amount(proposed_amount)
        text = require_message(message)
        await self._ensure_can_engage(db, finder, job_id)

        draft = NegotiationDraft(
            job_id=job_id,
            finder_id=finder.finder_id,
            finder_name=finder.finder_name,
            proposed_amount_paise=amount_paise,
            message=text,
            contact=contact,
        )
        try:
            negotiation = await self._repo.insert_negotiation(db, draft)
            with translate_db_errors("commit negotiation"):
                await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.info(
            "Negotiation %s submitted: finder=%s job=%s amount=%d",
            negotiation.id, finder.finder_id, job_id, amount_paise,
        )
        return await self._refresh(db, finder, negotiation)

    async def _ensure_can_engage(
        self, db: AsyncSession, finder: FinderIdentity, job_id: str
    ) -> None:
        posting = await self._job_repo.get_posting(db, job_id)
        if posting is None:
            raise JobNotFoundError(job_id)
        if posting.status != JobStatus.ACTIVE.value:
            raise JobNotActiveError(job_id, posting.status)

        # One engagement path per (finder, job): applied OR negotiated blocks both.
        board = await self.get_board(db, finder.finder_id)
        existing = board.find_open(job_id)
        if existing is not None:
            raise EngagementExistsError(job_id, existing.kind.value)

    async def _refresh(
        self, db: AsyncSession, finder: FinderIdentity, engagement: Engagement
    ) -> SubmissionResult:
        try:
            board = await self.get_board(db, finder.finder_id)
        except PersistenceError as exc:
            logger.warning(
                "Board refresh failed after %s %s was stored: %s",
                engagement.kind.value, engagement.id, exc.message,
            )
            return SubmissionResult(engagement=engagement, board=None, refresh_failed=True)
        return SubmissionResult(engagement=engagement, board=board)
