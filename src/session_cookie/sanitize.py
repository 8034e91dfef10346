"""Session id sanitization for incoming cookies.

Rejects malformed values read from a request before they reach a
session store.
"""

from __future__ import annotations

import logging

from .constants import SESSION_ID_PATTERN


def sanitize_session_id(
    session_id: str | None,
    logger: logging.Logger | None = None,
) -> str | None:
    """Sanitize and validate a session id read from a cookie.

    Args:
        session_id: Raw cookie value.
        logger: Optional logger for security warnings.

    Returns:
        Validated session id or None if invalid.

    Example:
        >>> sanitize_session_id("k3Jd9_xPq2-ZtYb8mN4sLw")
        'k3Jd9_xPq2-ZtYb8mN4sLw'
        >>> sanitize_session_id("invalid<script>")
    """
    if not session_id:
        return None

    session_id = session_id.strip()

    if "\x00" in session_id:
        if logger:
            logger.warning("Session id with null byte rejected")
        return None

    if not SESSION_ID_PATTERN.fullmatch(session_id):
        if logger:
            logger.warning(
                "Invalid session id format rejected: prefix=%s, length=%d",
                session_id[:8],
                len(session_id),
            )
        return None

    return session_id
