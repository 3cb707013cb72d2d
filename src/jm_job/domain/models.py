"""Domain models for jm_job — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import date, datetime, time


@dataclass
class JobPosting:
    id: str
    title: str
    description: str
    budget_paise: int
    posted_by: str
    poster_name: str
    status: str                      # JobStatus value
    category: str                    # JobCategory value
    created_at: datetime
    roles_responsibilities: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    start_time: time | None = None
    end_time: time | None = None


@dataclass
class BrowsableJob:
    """An active posting annotated with the finder's engagement state on it."""

    posting: JobPosting
    has_applied: bool = False
    has_negotiated: bool = False

    @property
    def can_engage(self) -> bool:
        return not (self.has_applied or self.has_negotiated)
