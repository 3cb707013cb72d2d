"""jm_job REST endpoints.

GET /jobs             — Job Browser over active postings (finders only)
GET /jobs/{job_id}    — posting detail
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.jm_common.database import get_db_session
from src.jm_common.enums import ALL_CATEGORIES
from src.jm_common.response import ApiResponse, success_response
from src.jm_gateway.api.router import get_request_id
from src.jm_gateway.auth.dependencies import get_current_user, require_finder
from src.jm_gateway.user.db_models import UserModel
from src.jm_job.application.service import JobBrowserService

router = APIRouter(prefix="/jobs", tags=["jobs"])

_service = JobBrowserService()


@router.get("")
async def browse_jobs(
    request: Request,
    finder: Annotated[UserModel, Depends(require_finder)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    q: str = Query("", max_length=200, description="Case-insensitive title/description search"),
    category: str = Query(ALL_CATEGORIES, description="Category slug or 'all'"),
) -> ApiResponse:
    result = await _service.browse(db, str(finder.id), q, category)
    resp = success_response(result.model_dump())
    resp.request_id = get_request_id(request)
    return resp


@router.get("/{job_id}")
async def get_job(
    job_id: str,
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.get_job(db, job_id)
    resp = success_response(result.model_dump())
    resp.request_id = get_request_id(request)
    return resp
