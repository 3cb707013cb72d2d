"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Auth/User
  2xxx: Wallet
  3xxx: Job
  4xxx: Engagement
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Auth/User ---

class UsernameExistsError(AppError):
    def __init__(self) -> None:
        super().__init__(1001, "Username already exists", 409)


class EmailExistsError(AppError):
    def __init__(self) -> None:
        super().__init__(1002, "Email already exists", 409)


class InvalidCredentialsError(AppError):
    def __init__(self) -> None:
        super().__init__(1003, "Invalid username or password", 401)


class AccountDisabledError(AppError):
    def __init__(self) -> None:
        super().__init__(1004, "Account is disabled", 403)


class InvalidRefreshTokenError(AppError):
    def __init__(self) -> None:
        super().__init__(1005, "Refresh token is invalid or expired", 401)


class RoleNotAllowedError(AppError):
    def __init__(self, required_role: str) -> None:
        super().__init__(1006, f"This action requires the {required_role} role", 403)


# --- 2xxx: Wallet ---

class InsufficientFundsError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            2001,
            f"Insufficient funds: required {required} paise, available {available} paise",
            422,
        )


class WalletNotFoundError(AppError):
    def __init__(self, user_id: str) -> None:
        super().__init__(2002, f"Wallet not found for user {user_id}", 404)


# --- 3xxx: Job ---

class JobNotFoundError(AppError):
    def __init__(self, job_id: str) -> None:
        super().__init__(3001, f"Job not found: {job_id}", 404)


class JobNotActiveError(AppError):
    def __init__(self, job_id: str, status: str) -> None:
        super().__init__(3002, f"Job {job_id} is {status}, not accepting engagements", 422)


# --- 4xxx: Engagement ---

class ValidationError(AppError):
    """Input rejected before any repository call."""

    def __init__(self, detail: str) -> None:
        super().__init__(4001, f"Validation failed: {detail}", 422)


class EngagementExistsError(AppError):
    def __init__(self, job_id: str, kind: str) -> None:
        super().__init__(
            4002,
            f"An active {kind} already exists for job {job_id}",
            409,
        )


# --- 9xxx: System ---

class RateLimitError(AppError):
    def __init__(self) -> None:
        super().__init__(9001, "Rate limit exceeded", 429)


class PersistenceError(AppError):
    """A repository or ledger call failed; nothing is retried."""

    def __init__(self, operation: str, detail: str = "") -> None:
        message = f"Persistence failure during {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(9003, message, 503)
        self.operation = operation
