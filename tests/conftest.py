"""Test fixtures for py-session-cookie package."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from session_cookie import CookiePolicy, reset_current_session_id, set_current_session_id


@pytest.fixture
def policy() -> CookiePolicy:
    """Create the policy used across the tests."""
    return CookiePolicy(
        timeout_minutes=30,
        http_only=True,
        secure=True,
        name="sid",
        path="/",
    )


@pytest.fixture
def session_id() -> str:
    """A valid urlsafe session id."""
    return "k3Jd9_xPq2-ZtYb8mN4sLwQ7rV1cE0aH"


@pytest.fixture(autouse=True)
def clean_session_context() -> Generator[None, None, None]:
    """Make sure each test starts without a session id in context."""
    token = set_current_session_id(None)
    yield
    reset_current_session_id(token)
