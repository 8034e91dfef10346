"""Exceptions raised while validating session cookie configuration.

Deriving a cookie never fails. These exceptions are raised by the
components that consume a policy and check it before use.
"""

from __future__ import annotations

import re

from .constants import COOKIE_NAME_PATTERN, SESSION_ID_PATTERN


class SessionCookieError(Exception):
    """Base exception for session cookie errors."""


class InvalidCookieNameError(SessionCookieError, ValueError):
    """Raised when a policy name cannot be used as a cookie name.

    Attributes:
        name: The rejected cookie name.
    """

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        if message is None:
            if not name:
                message = "Cookie name cannot be empty"
            else:
                message = f"Invalid cookie name: {name!r}"
        super().__init__(message)


class InvalidSessionIdError(SessionCookieError, ValueError):
    """Raised when a session id cannot be placed in a cookie.

    Attributes:
        session_id: The rejected session id (truncated for security).
    """

    def __init__(self, session_id: str, message: str | None = None) -> None:
        self.session_id = session_id[:8] + "..." if len(session_id) > 8 else session_id
        if message is None:
            message = f"Invalid session id: {self.session_id!r}"
        super().__init__(message)


def validate_cookie_name(
    name: str,
    pattern: re.Pattern[str] = COOKIE_NAME_PATTERN,
) -> str:
    """Return ``name`` if it is a usable cookie name.

    Raises:
        InvalidCookieNameError: If the name is empty or not a token.
    """
    if not name or not pattern.fullmatch(name):
        raise InvalidCookieNameError(name)
    return name


def validate_session_id(
    session_id: str,
    pattern: re.Pattern[str] = SESSION_ID_PATTERN,
) -> str:
    """Return ``session_id`` if it can be sent as a cookie value.

    Raises:
        InvalidSessionIdError: If the id does not match ``pattern``.
    """
    if not pattern.fullmatch(session_id):
        raise InvalidSessionIdError(session_id)
    return session_id
