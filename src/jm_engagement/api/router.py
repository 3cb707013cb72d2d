"""jm_engagement REST endpoints (finders only).

GET  /engagements                 — the finder's board (five views)
POST /engagements/applications    — submit an application, returns refreshed board
POST /engagements/negotiations    — submit a counter-offer, returns refreshed board
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.jm_common.database import get_db_session
from src.jm_common.response import ApiResponse, success_response
from src.jm_engagement.application.schemas import (
    EngagementBoardResponse,
    SubmissionResponse,
    SubmitApplicationRequest,
    SubmitNegotiationRequest,
)
from src.jm_engagement.application.service import EngagementOrchestrator
from src.jm_engagement.domain.models import FinderIdentity
from src.jm_gateway.api.router import get_request_id
from src.jm_gateway.auth.dependencies import require_finder
from src.jm_gateway.user.db_models import UserModel

router = APIRouter(prefix="/engagements", tags=["engagements"])

_service = EngagementOrchestrator()


def _identity(user: UserModel) -> FinderIdentity:
    return FinderIdentity(finder_id=str(user.id), finder_name=user.display_name)


def _submission_message(data: SubmissionResponse) -> str:
    if data.refresh_failed:
        return "Submitted; refreshing your engagements failed, retry GET /engagements"
    return "success"


@router.get("")
async def get_board(
    request: Request,
    finder: Annotated[UserModel, Depends(require_finder)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    board = await _service.get_board(db, str(finder.id))
    resp = success_response(EngagementBoardResponse.from_domain(board).model_dump())
    resp.request_id = get_request_id(request)
    return resp


@router.post("/applications")
async def submit_application(
    body: SubmitApplicationRequest,
    request: Request,
    finder: Annotated[UserModel, Depends(require_finder)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.submit_application(
        db, _identity(finder), body.job_id, body.message, body.contact.to_domain()
    )
    data = SubmissionResponse.from_result(result)
    resp = success_response(data.model_dump(), message=_submission_message(data))
    resp.request_id = get_request_id(request)
    return resp


@router.post("/negotiations")
async def submit_negotiation(
    body: SubmitNegotiationRequest,
    request: Request,
    finder: Annotated[UserModel, Depends(require_finder)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.submit_negotiation(
        db,
        _identity(finder),
        body.job_id,
        body.proposed_amount,
        body.message,
        body.contact.to_domain(),
    )
    data = SubmissionResponse.from_result(result)
    resp = success_response(data.model_dump(), message=_submission_message(data))
    resp.request_id = get_request_id(request)
    return resp
