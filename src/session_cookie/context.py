"""Context variable holding the session id of the current request."""

from __future__ import annotations

from contextvars import ContextVar, Token

_current_session_id: ContextVar[str | None] = ContextVar(
    "session_cookie_id", default=None
)


def set_current_session_id(session_id: str | None) -> Token[str | None]:
    """Set the session id for the current request.

    Returns:
        Token to pass to ``reset_current_session_id``.
    """
    return _current_session_id.set(session_id)


def get_current_session_id() -> str | None:
    """Get the session id for the current request, or None."""
    return _current_session_id.get()


def reset_current_session_id(token: Token[str | None]) -> None:
    """Restore the session id that was current before ``token`` was set."""
    _current_session_id.reset(token)
