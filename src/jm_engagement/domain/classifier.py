"""Engagement Classifier — partitions a finder's engagements by lifecycle stage.

Pure function of its inputs: no I/O, no re-sorting. Read order from the
repository is kept inside every bucket; in the mixed buckets (confirmed,
past, closed) applications come before negotiations.

Stage rules:
  job cancelled                    → CLOSED (whatever the engagement status)
  status pending                   → PENDING
  approved/accepted, job completed → PAST
  approved/accepted, job active    → CONFIRMED
  rejected                         → CLOSED
"""

from collections.abc import Iterable
from enum import Enum

from src.jm_common.enums import JobStatus
from src.jm_engagement.domain.models import (
    Application,
    Engagement,
    EngagementBoard,
    Negotiation,
)


class Stage(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PAST = "past"
    CLOSED = "closed"


def stage_of(engagement: Engagement) -> Stage:
    job_status = engagement.job.status
    if job_status == JobStatus.CANCELLED.value:
        return Stage.CLOSED
    if engagement.is_pending:
        return Stage.PENDING
    if engagement.is_accepted:
        if job_status == JobStatus.COMPLETED.value:
            return Stage.PAST
        return Stage.CONFIRMED
    return Stage.CLOSED


def _place(board: EngagementBoard, engagement: Engagement, pending: list) -> None:
    stage = stage_of(engagement)
    if stage is Stage.PENDING:
        pending.append(engagement)
    elif stage is Stage.CONFIRMED:
        board.confirmed.append(engagement)
    elif stage is Stage.PAST:
        board.past.append(engagement)
    else:
        board.closed.append(engagement)


def classify(
    applications: Iterable[Application],
    negotiations: Iterable[Negotiation],
) -> EngagementBoard:
    board = EngagementBoard()
    for application in applications:
        _place(board, application, board.pending_applications)
    for negotiation in negotiations:
        _place(board, negotiation, board.pending_negotiations)
    return board
