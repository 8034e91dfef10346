"""Request matching rules for issued session cookies.

These functions decide whether a cookie issued under a policy applies
to an incoming request. Session stores use them when looking up the
session cookie of a request.
"""

from __future__ import annotations


def path_matches(cookie_path: str, request_path: str) -> bool:
    """Check whether a cookie path applies to a request path.

    A cookie applies when one of the following holds:
        - ``request_path == cookie_path``
        - ``request_path`` starts with ``cookie_path``
        - ``request_path`` starts with ``"/"`` and the rest of it
          starts with ``cookie_path``

    Args:
        cookie_path: Path configured on the cookie policy.
        request_path: Path component of the request URI.

    Returns:
        True if the cookie should be considered for the request.

    Example:
        >>> path_matches("/foo", "/foo/bar")
        True
        >>> path_matches("/foo", "/bar")
        False
    """
    if request_path == cookie_path:
        return True
    if request_path.startswith(cookie_path):
        return True
    # Kept for user agents that send the path without its leading slash
    return request_path.startswith("/") and request_path[1:].startswith(cookie_path)


def domain_matches(
    cookie_domain: str,
    request_host: str,
    origin_host: str | None = None,
) -> bool:
    """Check whether a cookie domain applies to a request host.

    A non-empty domain matches the host itself and all of its subdomains.
    An empty domain means a host-only cookie, which only matches the
    origin server. When the origin is not known the host-only cookie is
    accepted, since the user agent only returns it to its origin.

    Args:
        cookie_domain: Domain configured on the cookie policy.
        request_host: Host of the incoming request (without port).
        origin_host: Host that issued the cookie, if known.

    Returns:
        True if the cookie should be considered for the request.

    Example:
        >>> domain_matches("example.com", "www.corp.example.com")
        True
        >>> domain_matches("example.com", "badexample.com")
        False
    """
    host = request_host.lower().rstrip(".")
    if not cookie_domain:
        return origin_host is None or host == origin_host.lower().rstrip(".")

    domain = cookie_domain.lower().rstrip(".")
    if domain.startswith("."):
        domain = domain[1:]
    return host == domain or host.endswith("." + domain)
