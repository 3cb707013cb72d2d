"""Unit tests for user service (mocked DB)."""

import uuid
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from jose import jwt

from src.jm_common.errors import (
    AccountDisabledError,
    EmailExistsError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    UsernameExistsError,
)
from src.jm_gateway.auth.jwt_handler import create_access_token, create_refresh_token
from src.jm_gateway.user.db_models import UserModel
from src.jm_gateway.user.service import UserService


def _make_user(is_active: bool = True, role: str = "finder") -> UserModel:
    user = UserModel()
    user.id = uuid.uuid4()
    user.username = "ravi"
    user.email = "ravi@example.com"
    user.display_name = "Ravi Kumar"
    user.role = role
    user.password_hash = "$2b$12$fakehash"
    user.is_active = is_active
    return user


def _scalar_result(value):
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


@pytest.fixture
def mock_db() -> MagicMock:
    db = MagicMock()
    db.execute = AsyncMock()
    db.flush = AsyncMock()
    return db


@pytest.fixture
def service() -> UserService:
    return UserService()


class TestRegister:
    async def test_duplicate_username_raises_error(self, service, mock_db) -> None:
        mock_db.execute.return_value = _scalar_result(_make_user())

        with pytest.raises(UsernameExistsError):
            await service.register("ravi", "new@example.com", "Ravi", "finder", "Pass1word", mock_db)

    async def test_duplicate_email_raises_error(self, service, mock_db) -> None:
        mock_db.execute.side_effect = [_scalar_result(None), _scalar_result(_make_user())]

        with pytest.raises(EmailExistsError):
            await service.register("newuser", "ravi@example.com", "Ravi", "finder", "Pass1word", mock_db)

    async def test_success_adds_user_and_opens_wallet(self, service, mock_db) -> None:
        new_id = uuid.uuid4()
        mock_db.execute.side_effect = [_scalar_result(None), _scalar_result(None), MagicMock()]

        def _assign_id() -> None:
            mock_db.add.call_args.args[0].id = new_id

        mock_db.flush.side_effect = _assign_id

        with patch("src.jm_gateway.user.service.hash_password", return_value="hashed"):
            user = await service.register(
                "ravi", "ravi@example.com", "Ravi Kumar", "finder", "Pass1word", mock_db
            )

        assert user.role == "finder"
        assert user.display_name == "Ravi Kumar"
        assert user.password_hash == "hashed"
        wallet_params = mock_db.execute.call_args_list[2].args[1]
        assert wallet_params == {"user_id": str(new_id)}


class TestLogin:
    async def test_unknown_user_raises_credentials_error(self, service, mock_db) -> None:
        mock_db.execute.return_value = _scalar_result(None)

        with pytest.raises(InvalidCredentialsError):
            await service.login("nobody", "Pass1word", mock_db)

    async def test_wrong_password_raises_credentials_error(self, service, mock_db) -> None:
        mock_db.execute.return_value = _scalar_result(_make_user())

        with (
            patch("src.jm_gateway.user.service.verify_password", return_value=False),
            pytest.raises(InvalidCredentialsError),
        ):
            await service.login("ravi", "WrongPass1", mock_db)

    async def test_disabled_account_raises_error(self, service, mock_db) -> None:
        mock_db.execute.return_value = _scalar_result(_make_user(is_active=False))

        with (
            patch("src.jm_gateway.user.service.verify_password", return_value=True),
            pytest.raises(AccountDisabledError),
        ):
            await service.login("ravi", "Pass1word", mock_db)

    async def test_success_tokens_carry_role(self, service, mock_db) -> None:
        mock_db.execute.return_value = _scalar_result(_make_user(role="poster"))

        with patch("src.jm_gateway.user.service.verify_password", return_value=True):
            user, access, refresh = await service.login("ravi", "Pass1word", mock_db)

        assert user.username == "ravi"
        assert jwt.get_unverified_claims(access)["role"] == "poster"
        assert jwt.get_unverified_claims(refresh)["type"] == "refresh"


class TestRefresh:
    async def test_keeps_role(self, service) -> None:
        new_access = await service.refresh(create_refresh_token("finder-1", "finder"))
        claims = jwt.get_unverified_claims(new_access)
        assert claims["sub"] == "finder-1"
        assert claims["role"] == "finder"
        assert claims["type"] == "access"

    async def test_access_token_rejected(self, service) -> None:
        with pytest.raises(InvalidRefreshTokenError):
            await service.refresh(create_access_token("finder-1", "finder"))

    async def test_garbage_rejected(self, service) -> None:
        with pytest.raises(InvalidRefreshTokenError):
            await service.refresh("not.a.real.token")
