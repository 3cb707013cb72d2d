"""EngagementRepository — concrete implementation of EngagementRepositoryProtocol.

Raw text() SQL. Every read joins the owning job (columns aliased "j_*").
Inserts use a data-modifying CTE so the new row comes back joined too.
The store enforces UNIQUE (job_id, finder_id) per table; a violation surfaces
as PersistenceError.

Transaction ownership: the CALLER commits or rolls back.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.jm_common.database import translate_db_errors
from src.jm_common.errors import PersistenceError
from src.jm_engagement.domain.models import (
    Application,
    ApplicationDraft,
    ContactDetails,
    Negotiation,
    NegotiationDraft,
)
from src.jm_job.infrastructure.persistence import row_to_posting

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

_JOINED_JOB_COLUMNS = """
    j.id AS j_id, j.title AS j_title, j.description AS j_description,
    j.budget_paise AS j_budget_paise, j.posted_by AS j_posted_by,
    j.poster_name AS j_poster_name, j.status AS j_status,
    j.category AS j_category, j.roles_responsibilities AS j_roles_responsibilities,
    j.start_date AS j_start_date, j.end_date AS j_end_date,
    j.start_time AS j_start_time, j.end_time AS j_end_time,
    j.created_at AS j_created_at
"""

_CONTACT_COLUMNS = "contact_email, contact_phone, distance, time_to_reach"

_LIST_APPLICATIONS_SQL = text(f"""
    SELECT a.id, a.finder_id, a.finder_name, a.status, a.applied_at, a.message,
           a.contact_email, a.contact_phone, a.distance, a.time_to_reach,
           {_JOINED_JOB_COLUMNS}
    FROM applications a
    JOIN jobs j ON j.id = a.job_id
    WHERE a.finder_id = :finder_id
    ORDER BY a.applied_at DESC, a.id DESC
""")

_LIST_NEGOTIATIONS_SQL = text(f"""
    SELECT n.id, n.finder_id, n.finder_name, n.proposed_amount_paise, n.status,
           n.created_at, n.message,
           n.contact_email, n.contact_phone, n.distance, n.time_to_reach,
           {_JOINED_JOB_COLUMNS}
    FROM negotiations n
    JOIN jobs j ON j.id = n.job_id
    WHERE n.finder_id = :finder_id
    ORDER BY n.created_at DESC, n.id DESC
""")

_INSERT_APPLICATION_SQL = text(f"""
    WITH a AS (
        INSERT INTO applications
            (job_id, finder_id, finder_name, status, message, {_CONTACT_COLUMNS})
        VALUES
            (:job_id, :finder_id, :finder_name, 'pending', :message,
             :contact_email, :contact_phone, :distance, :time_to_reach)
        RETURNING id, job_id, finder_id, finder_name, status, applied_at, message,
                  {_CONTACT_COLUMNS}
    )
    SELECT a.id, a.finder_id, a.finder_name, a.status, a.applied_at, a.message,
           a.contact_email, a.contact_phone, a.distance, a.time_to_reach,
           {_JOINED_JOB_COLUMNS}
    FROM a
    JOIN jobs j ON j.id = a.job_id
""")

_INSERT_NEGOTIATION_SQL = text(f"""
    WITH n AS (
        INSERT INTO negotiations
            (job_id, finder_id, finder_name, proposed_amount_paise, status, message,
             {_CONTACT_COLUMNS})
        VALUES
            (:job_id, :finder_id, :finder_name, :proposed_amount_paise, 'pending', :message,
             :contact_email, :contact_phone, :distance, :time_to_reach)
        RETURNING id, job_id, finder_id, finder_name, proposed_amount_paise, status,
                  created_at, message, {_CONTACT_COLUMNS}
    )
    SELECT n.id, n.finder_id, n.finder_name, n.proposed_amount_paise, n.status,
           n.created_at, n.message,
           n.contact_email, n.contact_phone, n.distance, n.time_to_reach,
           {_JOINED_JOB_COLUMNS}
    FROM n
    JOIN jobs j ON j.id = n.job_id
""")


# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------

_DEFAULT_CONTACT = ContactDetails()


def _row_to_contact(row: object) -> ContactDetails:
    return ContactDetails(
        email=row.contact_email or "",  # type: ignore[attr-defined]
        phone=row.contact_phone or "",  # type: ignore[attr-defined]
        distance=row.distance or _DEFAULT_CONTACT.distance,  # type: ignore[attr-defined]
        time_to_reach=row.time_to_reach or _DEFAULT_CONTACT.time_to_reach,  # type: ignore[attr-defined]
    )


def _row_to_application(row: object) -> Application:
    return Application(
        id=str(row.id),  # type: ignore[attr-defined]
        job=row_to_posting(row, prefix="j_"),
        finder_id=str(row.finder_id),  # type: ignore[attr-defined]
        finder_name=row.finder_name,  # type: ignore[attr-defined]
        status=row.status,  # type: ignore[attr-defined]
        applied_at=row.applied_at,  # type: ignore[attr-defined]
        message=row.message,  # type: ignore[attr-defined]
        contact=_row_to_contact(row),
    )


def _row_to_negotiation(row: object) -> Negotiation:
    return Negotiation(
        id=str(row.id),  # type: ignore[attr-defined]
        job=row_to_posting(row, prefix="j_"),
        finder_id=str(row.finder_id),  # type: ignore[attr-defined]
        finder_name=row.finder_name,  # type: ignore[attr-defined]
        proposed_amount_paise=row.proposed_amount_paise,  # type: ignore[attr-defined]
        status=row.status,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
        message=row.message,  # type: ignore[attr-defined]
        contact=_row_to_contact(row),
    )


def _contact_params(contact: ContactDetails) -> dict[str, str]:
    return {
        "contact_email": contact.email,
        "contact_phone": contact.phone,
        "distance": contact.distance,
        "time_to_reach": contact.time_to_reach,
    }


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------

class EngagementRepository:
    async def list_applications_for_finder(
        self, db: AsyncSession, finder_id: str
    ) -> list[Application]:
        with translate_db_errors("list_applications_for_finder"):
            result = await db.execute(_LIST_APPLICATIONS_SQL, {"finder_id": finder_id})
            rows = result.fetchall()
        return [_row_to_application(row) for row in rows]

    async def list_negotiations_for_finder(
        self, db: AsyncSession, finder_id: str
    ) -> list[Negotiation]:
        with translate_db_errors("list_negotiations_for_finder"):
            result = await db.execute(_LIST_NEGOTIATIONS_SQL, {"finder_id": finder_id})
            rows = result.fetchall()
        return [_row_to_negotiation(row) for row in rows]

    async def insert_application(
        self, db: AsyncSession, draft: ApplicationDraft
    ) -> Application:
        with translate_db_errors("insert_application"):
            result = await db.execute(
                _INSERT_APPLICATION_SQL,
                {
                    "job_id": draft.job_id,
                    "finder_id": draft.finder_id,
                    "finder_name": draft.finder_name,
                    "message": draft.message,
                    **_contact_params(draft.contact),
                },
            )
            row = result.fetchone()
        if row is None:
            raise PersistenceError("insert_application", "insert returned no rows")
        return _row_to_application(row)

    async def insert_negotiation(
        self, db: AsyncSession, draft: NegotiationDraft
    ) -> Negotiation:
        with translate_db_errors("insert_negotiation"):
            result = await db.execute(
                _INSERT_NEGOTIATION_SQL,
                {
                    "job_id": draft.job_id,
                    "finder_id": draft.finder_id,
                    "finder_name": draft.finder_name,
                    "proposed_amount_paise": draft.proposed_amount_paise,
                    "message": draft.message,
                    **_contact_params(draft.contact),
                },
            )
            row = result.fetchone()
        if row is None:
            raise PersistenceError("insert_negotiation", "insert returned no rows")
        return _row_to_negotiation(row)
