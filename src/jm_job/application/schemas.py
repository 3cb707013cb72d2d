"""Pydantic schemas for jm_job API responses."""

from pydantic import BaseModel

from src.jm_common.datetime_utils import iso_or_none
from src.jm_common.money import paise_to_display
from src.jm_job.domain.models import BrowsableJob, JobPosting


class JobOut(BaseModel):
    id: str
    title: str
    description: str
    category: str
    status: str
    budget_paise: int
    budget_display: str
    posted_by: str
    poster_name: str
    roles_responsibilities: str | None
    start_date: str | None
    end_date: str | None
    start_time: str | None
    end_time: str | None
    created_at: str

    @classmethod
    def from_domain(cls, job: JobPosting) -> "JobOut":
        return cls(
            id=job.id,
            title=job.title,
            description=job.description,
            category=job.category,
            status=job.status,
            budget_paise=job.budget_paise,
            budget_display=paise_to_display(job.budget_paise),
            posted_by=job.posted_by,
            poster_name=job.poster_name,
            roles_responsibilities=job.roles_responsibilities,
            start_date=iso_or_none(job.start_date),
            end_date=iso_or_none(job.end_date),
            start_time=iso_or_none(job.start_time),
            end_time=iso_or_none(job.end_time),
            created_at=job.created_at.isoformat(),
        )


class BrowsableJobOut(BaseModel):
    job: JobOut
    has_applied: bool
    has_negotiated: bool
    can_engage: bool

    @classmethod
    def from_domain(cls, item: BrowsableJob) -> "BrowsableJobOut":
        return cls(
            job=JobOut.from_domain(item.posting),
            has_applied=item.has_applied,
            has_negotiated=item.has_negotiated,
            can_engage=item.can_engage,
        )


class JobBrowseResponse(BaseModel):
    items: list[BrowsableJobOut]
    total: int
    query: str
    category: str
