"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.

Reads come back already joined with their JobPosting; the core never
re-derives that join.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.jm_engagement.domain.models import (
    Application,
    ApplicationDraft,
    Negotiation,
    NegotiationDraft,
)


class EngagementRepositoryProtocol(Protocol):
    async def list_applications_for_finder(
        self, db: AsyncSession, finder_id: str
    ) -> list[Application]: ...

    async def list_negotiations_for_finder(
        self, db: AsyncSession, finder_id: str
    ) -> list[Negotiation]: ...

    async def insert_application(
        self, db: AsyncSession, draft: ApplicationDraft
    ) -> Application:
        """Raises PersistenceError if the store rejects the row."""
        ...

    async def insert_negotiation(
        self, db: AsyncSession, draft: NegotiationDraft
    ) -> Negotiation:
        """Raises PersistenceError if the store rejects the row."""
        ...
