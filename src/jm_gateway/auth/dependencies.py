"""FastAPI dependencies: get_current_user, require_finder.

Usage in any protected router:
    from src.jm_gateway.auth.dependencies import require_finder

    @router.get("/engagements")
    async def board(user: UserModel = Depends(require_finder)):
        ...
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.jm_common.database import get_db_session
from src.jm_common.enums import UserRole
from src.jm_common.errors import AccountDisabledError, InvalidCredentialsError, RoleNotAllowedError
from src.jm_gateway.auth.jwt_handler import decode_token
from src.jm_gateway.user.db_models import UserModel

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")

_CREDENTIALS_EXCEPTION = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Invalid or expired token",
    headers={"WWW-Authenticate": "Bearer"},
)


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db_session),
) -> UserModel:
    """Validate the Bearer token and load the user row.

    Raises HTTP 401 if the token is missing, invalid, or expired, and
    AccountDisabledError if the account has been disabled.
    """
    try:
        payload = decode_token(token, expected_type="access")
    except InvalidCredentialsError:
        raise _CREDENTIALS_EXCEPTION from None

    user_id: str | None = payload.get("sub")
    if not user_id:
        raise _CREDENTIALS_EXCEPTION

    result = await db.execute(select(UserModel).where(UserModel.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise _CREDENTIALS_EXCEPTION

    if not user.is_active:
        raise AccountDisabledError()

    return user


async def require_finder(
    current_user: UserModel = Depends(get_current_user),
) -> UserModel:
    """Only finders browse, apply and negotiate."""
    if current_user.role != UserRole.FINDER.value:
        raise RoleNotAllowedError(UserRole.FINDER.value)
    return current_user
