"""Cookie policy for session-identifying cookies.

A policy holds the cookie attributes a session system uses when it hands
a session id to a user agent: lifetime, scope (path/domain) and transport
security. It is built once from server configuration and shared, read-only,
by every request that issues a session cookie.

Notes:
    Cookies are isolated neither by port nor by scheme. A cookie visible to
    a service on one port of a host is visible to services on every port.

    Do not create several policies sharing a name but differing in path or
    domain. User agents only send the name/value pair back, so a session
    store cannot tell such cookies apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .constants import (
    COOKIE_HEADER_CHARSET,
    DEFAULT_TIMEOUT_MINUTES,
    EPOCH,
)
from .cookie import Cookie
from .matching import domain_matches, path_matches


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _text(value: str | bytes) -> str:
    if isinstance(value, bytes):
        return value.decode(COOKIE_HEADER_CHARSET)
    return value


@dataclass(frozen=True)
class CookiePolicy:
    """Attributes of the cookies issued for sessions.

    The name is the main access key of the cookie. Changing it invalidates
    every cookie issued before the change, so keep it stable for the
    lifetime of the session system.

    Attributes:
        timeout_minutes: Cookie lifetime in minutes. The expiration is
            renewed each time a cookie is derived. Zero means no explicit
            expiration: the cookie ends with the user agent session.
        http_only: Hide the cookie from scripts running in the user agent.
            Turn it on when the cookie carries sensitive data.
        secure: Only send the cookie over secure channels (typically
            HTTPS). Protects confidentiality only: an active network
            attacker can still overwrite it from an insecure channel.
        name: Cookie name.
        path: Paths the cookie applies to, see ``path_matches``. Empty lets
            the user agent choose from the request path. Path offers no
            isolation between mutually distrusting services on one host.
        domain: Hosts the cookie applies to, subdomains included. Empty
            restricts the cookie to the origin server. User agents reject
            domains that do not include the origin or that are public
            suffixes such as "com" or "co.uk".

    Example:
        >>> policy = CookiePolicy(
        ...     timeout_minutes=30,
        ...     http_only=True,
        ...     secure=True,
        ...     name="sid",
        ...     path="/",
        ... )
        >>> response.headers.append("set-cookie", policy.cookie(session_id).to_header())
    """

    timeout_minutes: int = DEFAULT_TIMEOUT_MINUTES
    http_only: bool = False
    secure: bool = False
    name: str = ""
    path: str = ""
    domain: str = ""

    def __post_init__(self) -> None:
        """Normalize byte-string attributes to text."""
        for attr in ("name", "path", "domain"):
            object.__setattr__(self, attr, _text(getattr(self, attr)))

    @property
    def lifetime(self) -> timedelta | None:
        """Configured lifetime, or None when cookies carry no expiration."""
        if not self.timeout_minutes:
            return None
        return timedelta(minutes=self.timeout_minutes)

    def cookie(self, value: str | bytes = "") -> Cookie:
        """Create a cookie carrying ``value`` with this policy's attributes."""
        return derive_cookie(self, value)

    def expired_cookie(self) -> Cookie:
        """Create a cookie that makes user agents drop the session cookie."""
        return Cookie(
            name=self.name,
            value="",
            expires=EPOCH,
            http_only=self.http_only,
            secure=self.secure,
            path=self.path or None,
            domain=self.domain or None,
        )

    def matches(
        self,
        request_path: str,
        request_host: str,
        origin_host: str | None = None,
    ) -> bool:
        """Check whether cookies of this policy apply to a request."""
        return path_matches(self.path, request_path) and domain_matches(
            self.domain, request_host, origin_host
        )


def derive_cookie(policy: CookiePolicy, value: str | bytes = "") -> Cookie:
    """Create a cookie from ``policy`` using ``value`` as its value.

    The expiration is computed from the current UTC time on every call,
    so the cookie lifetime slides with each issuance. Empty path and
    domain are left unset. The name is not validated here.

    Args:
        policy: Policy providing the cookie attributes.
        value: Cookie value, usually a session id. Defaults to empty.

    Returns:
        The assembled cookie.
    """
    expires = None
    if policy.timeout_minutes:
        expires = _utcnow() + timedelta(minutes=policy.timeout_minutes)

    return Cookie(
        name=policy.name,
        value=_text(value),
        expires=expires,
        http_only=policy.http_only,
        secure=policy.secure,
        path=policy.path or None,
        domain=policy.domain or None,
    )
