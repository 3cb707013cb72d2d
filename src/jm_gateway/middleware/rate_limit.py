"""Fixed-window rate limiting for mutation endpoints.

Only engagement submissions and withdrawals are limited; reads pass through.
Window key: "ratelimit:{client}:{path}:{minute}" with INCR + EXPIRE.
The client is the Bearer token's tail when present, otherwise the
X-Forwarded-For / peer address.
"""

import logging
import time
from collections.abc import Awaitable, Callable

import redis.asyncio as aioredis
from redis.exceptions import RedisError
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from config.settings import settings
from src.jm_common.errors import RateLimitError
from src.jm_common.redis_client import get_redis
from src.jm_common.response import error_response

logger = logging.getLogger(__name__)

LIMITED_PATHS: frozenset[str] = frozenset({
    "/api/v1/engagements/applications",
    "/api/v1/engagements/negotiations",
    "/api/v1/wallet/withdraw",
})

_WINDOW_SECONDS = 60


def client_key(request: Request) -> str:
    auth = request.headers.get("authorization", "")
    if auth.lower().startswith("bearer ") and len(auth) > 7:
        return f"tok:{auth[-16:]}"
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return f"ip:{forwarded.split(',')[0].strip()}"
    return f"ip:{request.client.host if request.client else 'unknown'}"


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app: ASGIApp,
        limit_per_minute: int | None = None,
        redis_factory: Callable[[], Awaitable[aioredis.Redis]] | None = None,
    ) -> None:
        super().__init__(app)
        self._limit = limit_per_minute or settings.SUBMISSION_RATE_LIMIT_PER_MINUTE
        self._redis_factory = redis_factory

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method != "POST" or request.url.path not in LIMITED_PATHS:
            return await call_next(request)

        window = int(time.time()) // _WINDOW_SECONDS
        key = f"ratelimit:{client_key(request)}:{request.url.path}:{window}"
        try:
            redis = await (self._redis_factory or get_redis)()
            count = await redis.incr(key)
            if count == 1:
                await redis.expire(key, _WINDOW_SECONDS)
        except RedisError as exc:
            # Limiter unavailable: serve the request rather than fail it.
            logger.warning("Rate limiter unavailable, letting request through: %s", exc)
            return await call_next(request)

        if count > self._limit:
            err = RateLimitError()
            retry_after = _WINDOW_SECONDS - int(time.time()) % _WINDOW_SECONDS
            return JSONResponse(
                status_code=err.http_status,
                content=error_response(err.code, err.message).model_dump(),
                headers={"Retry-After": str(retry_after)},
            )
        return await call_next(request)
