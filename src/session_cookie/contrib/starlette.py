"""Starlette/FastAPI middleware for session cookies.

Reads the session cookie described by a ``CookiePolicy`` from each request
and stores the session id in both request.state and contextvars. On the way
out it attaches the cookies derived from the policy: a new session cookie
when a handler issued one, a renewed cookie for an existing session when
the policy has a timeout, or a removal cookie when the handler expired it.

Note: This middleware does NOT create or load sessions. Generating session
ids and storing session data is left to the application.

Cookies are appended as raw ``Set-Cookie`` headers rendered by
``Cookie.to_header()`` rather than through ``Response.set_cookie``, so the
header is exactly the one the policy derives. ``Response.set_cookie`` adds
its own ``SameSite`` default and quotes values.
Values stay unquoted, which is why issued session ids are validated first.

Install with: pip install py-session-cookie[starlette]
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from ..constants import DEFAULT_COOKIE_NAME
from ..context import reset_current_session_id, set_current_session_id
from ..cookie import Cookie
from ..exceptions import validate_cookie_name, validate_session_id
from ..policy import CookiePolicy
from ..sanitize import sanitize_session_id

ISSUED_SESSION_ID_ATTR = "issued_session_id"
EXPIRE_SESSION_ATTR = "expire_session_cookie"


def set_cookie_header(response: Response, cookie: Cookie) -> None:
    """Append ``cookie`` to the response as a ``Set-Cookie`` header."""
    response.headers.append("set-cookie", cookie.to_header())


def issue_session_cookie(request: Request, session_id: str) -> None:
    """Ask the middleware to send a session cookie carrying ``session_id``.

    Raises:
        InvalidSessionIdError: If ``session_id`` is not a urlsafe token.
    """
    setattr(request.state, ISSUED_SESSION_ID_ATTR, validate_session_id(session_id))


def expire_session_cookie(request: Request) -> None:
    """Ask the middleware to remove the session cookie from the user agent."""
    setattr(request.state, EXPIRE_SESSION_ATTR, True)


class SessionCookieMiddleware(BaseHTTPMiddleware):
    """Middleware binding a cookie policy to requests and responses.

    Sets the incoming session id in:
    - request.state.session_id (for direct access in routes)
    - contextvars (for DI access)

    Usage:
        from fastapi import FastAPI
        from session_cookie import CookiePolicy
        from session_cookie.contrib.starlette import SessionCookieMiddleware

        policy = CookiePolicy(
            timeout_minutes=30, http_only=True, secure=True, name="sid", path="/"
        )
        app = FastAPI()
        app.add_middleware(SessionCookieMiddleware, policy=policy)

        @app.post("/login")
        async def login(request: Request) -> dict[str, str]:
            issue_session_cookie(request, secrets.token_urlsafe(32))
            return {"status": "ok"}
    """

    def __init__(
        self,
        app: ASGIApp,
        policy: CookiePolicy | None = None,
        logger: logging.Logger | None = None,
        origin_host: str | None = None,
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application.
            policy: Cookie policy. Defaults to a host-only, HttpOnly cookie
                named SESSIONID on path "/".
            logger: Optional logger for debugging.
            origin_host: Host that issues the cookies. Host-only policies
                (empty domain) are only read on requests to this host.
                When None, the host serving the request is the origin.

        Raises:
            InvalidCookieNameError: If the policy name is not a usable
                cookie name.
        """
        super().__init__(app)
        if policy is None:
            policy = CookiePolicy(name=DEFAULT_COOKIE_NAME, http_only=True, path="/")
        validate_cookie_name(policy.name)
        self._policy = policy
        self._logger = logger
        self._origin_host = origin_host

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Process the request and attach session cookies to the response."""
        session_id: str | None = None
        if self._policy.matches(
            request.url.path, request.url.hostname or "", self._origin_host
        ):
            raw_session_id = request.cookies.get(self._policy.name)
            session_id = sanitize_session_id(raw_session_id, logger=self._logger)

        if session_id:
            request.state.session_id = session_id
            if self._logger:
                self._logger.debug("Session context set: %s", session_id[:8] + "...")

        token = set_current_session_id(session_id)
        try:
            response = await call_next(request)
        finally:
            reset_current_session_id(token)

        self._attach_cookies(request, response, session_id)
        return response

    def _attach_cookies(
        self,
        request: Request,
        response: Response,
        session_id: str | None,
    ) -> None:
        if getattr(request.state, EXPIRE_SESSION_ATTR, False):
            set_cookie_header(response, self._policy.expired_cookie())
            if self._logger:
                self._logger.info("Session cookie expired: %s", self._policy.name)
            return

        issued: str | None = getattr(request.state, ISSUED_SESSION_ID_ATTR, None)
        if issued:
            set_cookie_header(response, self._policy.cookie(issued))
            if self._logger:
                self._logger.info("Session cookie issued: %s", issued[:8] + "...")
        elif session_id and self._policy.timeout_minutes:
            # Sliding expiration: every response pushes the deadline forward
            set_cookie_header(response, self._policy.cookie(session_id))
            if self._logger:
                self._logger.debug(
                    "Session cookie renewed: %s", session_id[:8] + "..."
                )
