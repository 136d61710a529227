"""Shared-secret API key middleware."""

import secrets

import logfire
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from quill.interface.error import UnauthorizedError

API_KEY_HEADER = "x-api-key"


class APIKeyMiddleware(BaseHTTPMiddleware):
    """Reject API requests that don't carry the configured API key.

    Runs before routing, so handlers only ever see authorized requests.
    Paths outside the protected prefix (e.g. /health) are not checked.
    """

    def __init__(
        self, app: ASGIApp, api_key: str | None, protected_prefix: str = "/api"
    ) -> None:
        super().__init__(app)
        self.api_key = api_key
        self.protected_prefix = protected_prefix.rstrip("/")

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if self._is_protected(request.url.path):
            try:
                self.verify(request.headers.get(API_KEY_HEADER))
            except UnauthorizedError as e:
                logfire.warn(
                    "Rejected unauthorized API request",
                    method=request.method,
                    path=request.url.path,
                    reason=str(e),
                )
                return JSONResponse(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    content={
                        "error": "Unauthorized",
                        "message": "Invalid or missing API key",
                    },
                    headers={"WWW-Authenticate": "ApiKey"},
                )
        return await call_next(request)

    def verify(self, provided: str | None) -> None:
        """Check a presented key against the configured one.

        Raises:
            UnauthorizedError: If no key is configured, none was sent, or it differs
        """
        if not self.api_key:
            raise UnauthorizedError("API key is not configured")
        if not provided:
            raise UnauthorizedError("API key header missing")
        if not secrets.compare_digest(provided.encode(), self.api_key.encode()):
            raise UnauthorizedError("API key mismatch")

    def _is_protected(self, path: str) -> bool:
        return path == self.protected_prefix or path.startswith(
            f"{self.protected_prefix}/"
        )
