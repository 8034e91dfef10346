"""Constants for session cookie handling.

Defaults and validation patterns shared by the cookie policy,
the sanitizer and the web framework integrations.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Final

# Cookie name used when the caller does not configure one
DEFAULT_COOKIE_NAME: Final[str] = "SESSIONID"

# Zero means no Expires attribute: the cookie lives for the user agent session
DEFAULT_TIMEOUT_MINUTES: Final[int] = 0

# Header values are latin-1 on the wire, bytes config values are decoded with it
COOKIE_HEADER_CHARSET: Final[str] = "latin-1"

# RFC 6265 cookie-name is an RFC 2616 token: no separators, no controls
COOKIE_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$"
)

# Incoming session ids: urlsafe token characters only (secrets.token_urlsafe output)
SESSION_ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9_-]{16,256}$")

# Expiration used for removal cookies
EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)
