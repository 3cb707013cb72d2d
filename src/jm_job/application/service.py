"""JobBrowserService — read-only composition over the job and engagement reads.

browse() = active postings (newest first) → finder's board → filter → annotate.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.jm_common.enums import ALL_CATEGORIES, EngagementKind
from src.jm_common.errors import JobNotFoundError
from src.jm_engagement.application.service import EngagementOrchestrator
from src.jm_job.application.schemas import BrowsableJobOut, JobBrowseResponse, JobOut
from src.jm_job.domain.browser import annotate, filter_postings
from src.jm_job.domain.repository import JobRepositoryProtocol
from src.jm_job.infrastructure.persistence import JobRepository


class JobBrowserService:
    def __init__(
        self,
        repo: JobRepositoryProtocol | None = None,
        engagements: EngagementOrchestrator | None = None,
    ) -> None:
        self._repo: JobRepositoryProtocol = repo or JobRepository()
        self._engagements = engagements or EngagementOrchestrator(job_repo=self._repo)

    async def browse(
        self,
        db: AsyncSession,
        finder_id: str,
        query: str = "",
        category: str = ALL_CATEGORIES,
    ) -> JobBrowseResponse:
        postings = await self._repo.list_active_postings(db)
        board = await self._engagements.get_board(db, finder_id)

        matching = filter_postings(postings, query, category)
        items = annotate(
            matching,
            applied_job_ids=board.engaged_job_ids(EngagementKind.APPLICATION),
            negotiated_job_ids=board.engaged_job_ids(EngagementKind.NEGOTIATION),
        )
        return JobBrowseResponse(
            items=[BrowsableJobOut.from_domain(i) for i in items],
            total=len(items),
            query=query,
            category=category,
        )

    async def get_job(self, db: AsyncSession, job_id: str) -> JobOut:
        posting = await self._repo.get_posting(db, job_id)
        if posting is None:
            raise JobNotFoundError(job_id)
        return JobOut.from_domain(posting)
