"""jm_wallet REST endpoints.

GET  /wallet            — balance, earned, pending, transactions, withdrawals
POST /wallet/withdraw   — withdraw, then the full re-read overview
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.jm_common.database import get_db_session
from src.jm_common.response import ApiResponse, success_response
from src.jm_gateway.api.router import get_request_id
from src.jm_gateway.auth.dependencies import get_current_user
from src.jm_gateway.user.db_models import UserModel
from src.jm_wallet.application.schemas import WithdrawRequest
from src.jm_wallet.application.service import LedgerViewService

router = APIRouter(prefix="/wallet", tags=["wallet"])

_service = LedgerViewService()


@router.get("")
async def get_wallet(
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.get_overview(db, str(current_user.id))
    resp = success_response(data.model_dump())
    resp.request_id = get_request_id(request)
    return resp


@router.post("/withdraw")
async def withdraw(
    body: WithdrawRequest,
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.withdraw(db, str(current_user.id), body.amount)
    message = "success"
    if data.refresh_failed:
        message = "Withdrawal requested; refreshing your wallet failed, retry GET /wallet"
    resp = success_response(data.model_dump(), message=message)
    resp.request_id = get_request_id(request)
    return resp
