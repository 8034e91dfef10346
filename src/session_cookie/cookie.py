"""Cookie value produced from a policy and its Set-Cookie rendering."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime


@dataclass(frozen=True)
class Cookie:
    """A single cookie ready to be attached to a response.

    Instances are created per response and discarded once rendered.

    Attributes:
        name: Cookie name (the lookup key).
        value: Cookie value, typically a session id.
        expires: Absolute UTC expiration, or None for a user agent
            session cookie.
        http_only: Whether the HttpOnly attribute is sent.
        secure: Whether the Secure attribute is sent.
        path: Path attribute, or None to let the user agent pick one.
        domain: Domain attribute, or None for a host-only cookie.
    """

    name: str
    value: str = ""
    expires: datetime | None = None
    http_only: bool = False
    secure: bool = False
    path: str | None = None
    domain: str | None = None

    def to_header(self) -> str:
        """Render the value of a ``Set-Cookie`` response header.

        Example:
            >>> Cookie("sid", "xyz", path="/", http_only=True).to_header()
            'sid=xyz; Path=/; HttpOnly'
        """
        parts = [f"{self.name}={self.value}"]
        if self.expires is not None:
            expires = self.expires.astimezone(timezone.utc)
            parts.append(f"Expires={format_datetime(expires, usegmt=True)}")
        if self.path is not None:
            parts.append(f"Path={self.path}")
        if self.domain is not None:
            parts.append(f"Domain={self.domain}")
        if self.http_only:
            parts.append("HttpOnly")
        if self.secure:
            parts.append("Secure")
        return "; ".join(parts)

    def __str__(self) -> str:
        return self.to_header()
