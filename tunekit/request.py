"""Description of an HTTP request: URL, headers, timeouts and TCP options."""

from __future__ import annotations

from collections.abc import Mapping

from tunekit.types import Header
from tunekit.uri import URI


class Request:
    """An HTTP request to be performed by a session.

    Timeouts are in seconds; ``transfer_low_speed`` is in bytes per second.
    A zero timeout means no limit.
    """

    def __init__(
        self,
        url: str = "",
        *,
        connect_timeout: int = 180,
        transfer_timeout: int = 0,
        transfer_low_speed: int = 30,
        tcp_keepalive: bool = False,
        tcp_keepidle: int = 120,
        tcp_keepintvl: int = 60,
    ) -> None:
        self._uri = URI.parse(url)
        self.headers = Header()
        self.connect_timeout = connect_timeout
        self.transfer_timeout = transfer_timeout
        self.transfer_low_speed = transfer_low_speed
        self.tcp_keepalive = tcp_keepalive
        self.tcp_keepidle = tcp_keepidle
        self.tcp_keepintvl = tcp_keepintvl

    @property
    def url(self) -> str:
        """The request URL as given."""
        return self._uri.uri

    @url.setter
    def url(self, value: str) -> None:
        self._uri = URI.parse(value)

    @property
    def url_info(self) -> URI:
        """The parsed components of the URL."""
        return self._uri

    def header(self, name: str) -> str:
        """Return the value of header ``name``, or an empty string."""
        return self.headers.get(name, "") or ""

    def set_header(self, name: str, value: str) -> "Request":
        """Set header ``name`` to ``value``, replacing any previous value."""
        self.headers[name] = value
        return self

    def set_option(self, header: Mapping[str, str]) -> None:
        """Replace all headers with those in ``header``."""
        self.headers = Header(header)

    def copy(self) -> "Request":
        """Return an independent copy of this request."""
        other = Request(
            self.url,
            connect_timeout=self.connect_timeout,
            transfer_timeout=self.transfer_timeout,
            transfer_low_speed=self.transfer_low_speed,
            tcp_keepalive=self.tcp_keepalive,
            tcp_keepidle=self.tcp_keepidle,
            tcp_keepintvl=self.tcp_keepintvl,
        )
        other.headers = self.headers.copy()
        return other

    def __repr__(self) -> str:
        return f"Request({self.url!r})"