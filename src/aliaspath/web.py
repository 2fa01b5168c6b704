"""
Base URL discovery for building absolute URLs.

The resolver only needs ``scheme://host[:port]`` of the current request.
Hosts either pin it with :class:`StaticBaseUrl` or derive it from a
CGI/WSGI environment with :class:`EnvironBaseUrl`.
"""

import os
from typing import Mapping, Optional, Protocol, runtime_checkable

_DEFAULT_PORTS = {"http": "80", "https": "443"}


@runtime_checkable
class BaseUrlProvider(Protocol):
    """Supplies the base URL of the current request, without trailing slash."""

    def current_base_url(self) -> str:
        ...


class StaticBaseUrl:
    """A fixed base URL such as ``https://cdn.example.com``."""

    def __init__(self, url: str):
        self.url = (url or "").rstrip("/")

    def current_base_url(self) -> str:
        return self.url

    def __repr__(self) -> str:
        return f"StaticBaseUrl({self.url!r})"


class EnvironBaseUrl:
    """
    Base URL rebuilt from a CGI/WSGI-style environment.

    Follows the URL reconstruction of PEP 3333: ``HTTP_HOST`` is used as is,
    otherwise ``SERVER_NAME`` plus ``SERVER_PORT`` when the port is not the
    scheme's default. The scheme comes from ``wsgi.url_scheme`` or, for
    plain CGI environments, from ``HTTPS``.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Args:
            environ: Request environment. ``None`` reads ``os.environ`` at call time.
        """
        self.environ = environ

    def current_base_url(self) -> str:
        environ = self.environ if self.environ is not None else os.environ

        scheme = environ.get("wsgi.url_scheme")
        if not scheme:
            https = str(environ.get("HTTPS", "")).lower()
            scheme = "https" if https in ("on", "1", "true") else "http"

        host = environ.get("HTTP_HOST")
        if not host:
            host = environ.get("SERVER_NAME")
            if not host:
                return ""
            port = str(environ.get("SERVER_PORT", "") or "")
            if port and port != _DEFAULT_PORTS.get(scheme):
                host = f"{host}:{port}"

        return f"{scheme}://{host}"
