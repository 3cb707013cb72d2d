"""Tests for jm_common.errors and jm_common.response."""

from src.jm_common.errors import (
    AppError,
    EngagementExistsError,
    InsufficientFundsError,
    JobNotActiveError,
    JobNotFoundError,
    PersistenceError,
    RoleNotAllowedError,
    ValidationError,
    WalletNotFoundError,
)
from src.jm_common.response import ApiResponse, error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=1001, message="test"), Exception)


class TestSpecificErrors:
    def test_validation(self) -> None:
        err = ValidationError("message must not be empty")
        assert (err.code, err.http_status) == (4001, 422)
        assert err.message == "Validation failed: message must not be empty"

    def test_engagement_exists(self) -> None:
        err = EngagementExistsError("job-9", "negotiation")
        assert (err.code, err.http_status) == (4002, 409)
        assert "job-9" in err.message
        assert "negotiation" in err.message

    def test_job_errors(self) -> None:
        assert JobNotFoundError("j1").http_status == 404
        err = JobNotActiveError("j1", "cancelled")
        assert err.code == 3002
        assert "cancelled" in err.message

    def test_wallet_errors(self) -> None:
        err = InsufficientFundsError(required=100000, available=500)
        assert err.code == 2001
        assert "100000" in err.message and "500" in err.message
        assert WalletNotFoundError("u1").code == 2002

    def test_role_not_allowed(self) -> None:
        err = RoleNotAllowedError("finder")
        assert (err.code, err.http_status) == (1006, 403)

    def test_persistence_error_keeps_operation(self) -> None:
        err = PersistenceError("insert_application", "IntegrityError")
        assert (err.code, err.http_status) == (9003, 503)
        assert err.operation == "insert_application"
        assert err.message.endswith("IntegrityError")
        assert PersistenceError("get_wallet").message == "Persistence failure during get_wallet"


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response(data={"k": 1})
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == {"k": 1}
        assert resp.request_id.startswith("req_")

    def test_error(self) -> None:
        resp = error_response(4001, "Validation failed: x")
        assert resp.code == 4001
        assert resp.data is None

    def test_model_dump_has_envelope_keys(self) -> None:
        dumped = ApiResponse().model_dump()
        assert set(dumped) == {"code", "message", "data", "timestamp", "request_id"}
