"""Job Browser — pure filtering and annotation over active postings.

No pagination and no ranking: the result keeps the repository's
newest-first order.
"""

from collections.abc import Iterable, Sequence

from src.jm_common.enums import ALL_CATEGORIES
from src.jm_job.domain.models import BrowsableJob, JobPosting


def matches(posting: JobPosting, query: str, category: str) -> bool:
    needle = query.lower()
    matches_search = needle in posting.title.lower() or needle in posting.description.lower()
    matches_category = category == ALL_CATEGORIES or posting.category == category
    return matches_search and matches_category


def filter_postings(
    postings: Sequence[JobPosting],
    query: str = "",
    category: str = ALL_CATEGORIES,
) -> list[JobPosting]:
    """Postings whose title or description contains `query` (case-insensitive)
    and whose category equals `category` unless it is "all"."""
    return [p for p in postings if matches(p, query, category)]


def annotate(
    postings: Iterable[JobPosting],
    applied_job_ids: set[str],
    negotiated_job_ids: set[str],
) -> list[BrowsableJob]:
    return [
        BrowsableJob(
            posting=p,
            has_applied=p.id in applied_job_ids,
            has_negotiated=p.id in negotiated_job_ids,
        )
        for p in postings
    ]
