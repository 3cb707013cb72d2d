"""JobRepository — concrete implementation of JobRepositoryProtocol.

Read-only raw text() SQL. Posters own job writes; this service only reads.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.jm_common.database import translate_db_errors
from src.jm_common.enums import JobStatus
from src.jm_job.domain.models import JobPosting

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

JOB_COLUMNS = """
    id, title, description, budget_paise, posted_by, poster_name,
    status, category, roles_responsibilities,
    start_date, end_date, start_time, end_time, created_at
"""

_LIST_ACTIVE_SQL = text(f"""
    SELECT {JOB_COLUMNS}
    FROM jobs
    WHERE status = :status
    ORDER BY created_at DESC, id DESC
""")

_GET_JOB_SQL = text(f"""
    SELECT {JOB_COLUMNS}
    FROM jobs
    WHERE id = :job_id
""")


# ---------------------------------------------------------------------------
# Row mapper
# ---------------------------------------------------------------------------

def row_to_posting(row: object, prefix: str = "") -> JobPosting:
    """Map a jobs row; `prefix` selects aliased columns (e.g. "job_") in joins."""
    def col(name: str) -> object:
        return getattr(row, f"{prefix}{name}")

    return JobPosting(
        id=str(col("id")),
        title=col("title"),  # type: ignore[arg-type]
        description=col("description"),  # type: ignore[arg-type]
        budget_paise=col("budget_paise"),  # type: ignore[arg-type]
        posted_by=str(col("posted_by")),
        poster_name=col("poster_name"),  # type: ignore[arg-type]
        status=col("status"),  # type: ignore[arg-type]
        category=col("category"),  # type: ignore[arg-type]
        created_at=col("created_at"),  # type: ignore[arg-type]
        roles_responsibilities=col("roles_responsibilities"),  # type: ignore[arg-type]
        start_date=col("start_date"),  # type: ignore[arg-type]
        end_date=col("end_date"),  # type: ignore[arg-type]
        start_time=col("start_time"),  # type: ignore[arg-type]
        end_time=col("end_time"),  # type: ignore[arg-type]
    )


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------

class JobRepository:
    async def list_active_postings(self, db: AsyncSession) -> list[JobPosting]:
        with translate_db_errors("list_active_postings"):
            result = await db.execute(_LIST_ACTIVE_SQL, {"status": JobStatus.ACTIVE.value})
            rows = result.fetchall()
        return [row_to_posting(row) for row in rows]

    async def get_posting(self, db: AsyncSession, job_id: str) -> JobPosting | None:
        with translate_db_errors("get_posting"):
            result = await db.execute(_GET_JOB_SQL, {"job_id": job_id})
            row = result.fetchone()
        return row_to_posting(row) if row else None
