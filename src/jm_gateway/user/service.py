"""User service: register, login, refresh.

All DB operations use the injected AsyncSession. Transactions are managed
by the caller (router layer) via `async with db.begin()`.
"""

from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession

from src.jm_common.errors import (
    AccountDisabledError,
    EmailExistsError,
    InvalidCredentialsError,
    UsernameExistsError,
)
from src.jm_gateway.auth.jwt_handler import (
    create_access_token,
    create_refresh_token,
    decode_token,
)
from src.jm_gateway.auth.password import hash_password, verify_password
from src.jm_gateway.user.db_models import UserModel

_CREATE_WALLET_SQL = text("""
    INSERT INTO wallets (user_id, balance, total_earned, pending_amount)
    VALUES (:user_id, 0, 0, 0)
""")


class UserService:
    """Stateless service — instantiate once, reuse across requests."""

    async def register(
        self,
        username: str,
        email: str,
        display_name: str,
        role: str,
        password: str,
        db: AsyncSession,
    ) -> UserModel:
        """Register a user and open their wallet in the same transaction.

        Posters get a wallet too: it is where their side of a settlement lands.
        """
        result = await db.execute(
            select(UserModel).where(UserModel.username == username)
        )
        if result.scalar_one_or_none() is not None:
            raise UsernameExistsError()

        result = await db.execute(
            select(UserModel).where(UserModel.email == email)
        )
        if result.scalar_one_or_none() is not None:
            raise EmailExistsError()

        user = UserModel(
            username=username,
            email=email,
            display_name=display_name,
            role=role,
            password_hash=hash_password(password),
            is_active=True,
        )
        db.add(user)
        await db.flush()

        await db.execute(_CREATE_WALLET_SQL, {"user_id": str(user.id)})
        return user

    async def login(
        self,
        username: str,
        password: str,
        db: AsyncSession,
    ) -> tuple[UserModel, str, str]:
        """Authenticate and return (user, access_token, refresh_token).

        Unknown user and wrong password raise the same error.
        """
        result = await db.execute(
            select(UserModel).where(UserModel.username == username)
        )
        user = result.scalar_one_or_none()

        if user is None or not verify_password(password, user.password_hash):
            raise InvalidCredentialsError()

        if not user.is_active:
            raise AccountDisabledError()

        return (
            user,
            create_access_token(str(user.id), user.role),
            create_refresh_token(str(user.id), user.role),
        )

    async def refresh(self, refresh_token: str) -> str:
        payload = decode_token(refresh_token, expected_type="refresh")
        return create_access_token(str(payload["sub"]), str(payload.get("role", "")))
