"""Session cookie policies for HTTP servers.

Describes how session-identifying cookies are issued (lifetime, path and
domain scope, HttpOnly and Secure attributes) and derives the concrete
cookie to attach to a response.

Basic usage:
    from session_cookie import CookiePolicy

    policy = CookiePolicy(
        timeout_minutes=30,
        http_only=True,
        secure=True,
        name="sid",
        path="/",
    )
    cookie = policy.cookie("xyz")
    cookie.to_header()
    # 'sid=xyz; Expires=Mon, 19 Oct 2026 12:30:00 GMT; Path=/; HttpOnly; Secure'

With FastAPI/Starlette:
    from session_cookie.contrib.starlette import SessionCookieMiddleware

    app = FastAPI()
    app.add_middleware(SessionCookieMiddleware, policy=policy)
"""

from __future__ import annotations

from .constants import (
    COOKIE_HEADER_CHARSET,
    COOKIE_NAME_PATTERN,
    DEFAULT_COOKIE_NAME,
    DEFAULT_TIMEOUT_MINUTES,
    EPOCH,
    SESSION_ID_PATTERN,
)
from .context import (
    get_current_session_id,
    reset_current_session_id,
    set_current_session_id,
)
from .cookie import Cookie
from .exceptions import (
    InvalidCookieNameError,
    InvalidSessionIdError,
    SessionCookieError,
    validate_cookie_name,
    validate_session_id,
)
from .matching import domain_matches, path_matches
from .policy import CookiePolicy, derive_cookie
from .sanitize import sanitize_session_id

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "CookiePolicy",
    "Cookie",
    "derive_cookie",
    # Matching rules
    "path_matches",
    "domain_matches",
    # Exceptions
    "SessionCookieError",
    "InvalidCookieNameError",
    "InvalidSessionIdError",
    "validate_cookie_name",
    "validate_session_id",
    # Context helpers
    "set_current_session_id",
    "get_current_session_id",
    "reset_current_session_id",
    # Utility functions
    "sanitize_session_id",
    # Constants
    "DEFAULT_COOKIE_NAME",
    "DEFAULT_TIMEOUT_MINUTES",
    "COOKIE_HEADER_CHARSET",
    "COOKIE_NAME_PATTERN",
    "SESSION_ID_PATTERN",
    "EPOCH",
]
