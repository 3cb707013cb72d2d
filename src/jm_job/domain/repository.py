"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.jm_job.domain.models import JobPosting


class JobRepositoryProtocol(Protocol):
    async def list_active_postings(self, db: AsyncSession) -> list[JobPosting]:
        """Active postings, newest first."""
        ...

    async def get_posting(self, db: AsyncSession, job_id: str) -> JobPosting | None: ...
