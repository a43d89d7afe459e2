"""Origin Guard — rejects cross-origin requests from anything but the configured frontend.

Invariants:
    - Runs before routing: a rejected request never reaches validation or handlers
    - Requests without an Origin header pass (same-origin, server-to-server)
    - Rejection body uses the standard error envelope (403)

Design Decisions:
    - Separate from CORSMiddleware: CORS only withholds headers, the browser
      does the blocking; non-browser clients would still reach handlers
"""

import logging
from typing import Iterable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.errors import OriginNotAllowedError

logger = logging.getLogger(__name__)


def register_origin_guard(app: FastAPI, allowed_origins: Iterable[str]) -> None:
    """Install the origin check as the outermost HTTP middleware."""
    allowed = frozenset(allowed_origins)

    @app.middleware("http")
    async def reject_foreign_origins(request: Request, call_next):
        origin = request.headers.get("origin")
        if origin is not None and origin not in allowed:
            exc = OriginNotAllowedError(origin)
            logger.warning(
                f"Rejected request from origin {origin}",
                extra={
                    "origin": origin, "path": request.url.path,
                    "method": request.method, "error_code": exc.code,
                },
            )
            return JSONResponse(
                status_code=exc.http_status, content=exc.to_response(),
            )
        return await call_next(request)
