"""Shared request types: headers, URL parameters and session messages."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, Optional, Union
from urllib.parse import quote, unquote


class Attribute(enum.Enum):
    """Attributes that can be queried from a response."""

    HTTP_CODE = enum.auto()


class Operation(enum.Enum):
    """HTTP operation of a request."""

    GET = enum.auto()
    POST = enum.auto()


class Header(MutableMapping[str, str]):
    """Case-insensitive header mapping, ordered by case-insensitive name.

    Assigning to an existing name replaces the value but keeps the spelling
    of the name that was stored first.
    """

    def __init__(
        self,
        items: Union[Mapping[str, str], Iterable[tuple[str, str]], None] = None,
        /,
        **kwargs: str,
    ) -> None:
        self._items: dict[str, tuple[str, str]] = {}
        if items is not None:
            self.update(items)
        self.update(kwargs)

    def __getitem__(self, name: str) -> str:
        if not isinstance(name, str):
            raise KeyError(name)
        return self._items[name.lower()][1]

    def __setitem__(self, name: str, value: str) -> None:
        folded = name.lower()
        existing = self._items.get(folded)
        self._items[folded] = (existing[0] if existing else name, value)

    def __delitem__(self, name: str) -> None:
        if not isinstance(name, str):
            raise KeyError(name)
        del self._items[name.lower()]

    def __iter__(self) -> Iterator[str]:
        for folded in sorted(self._items):
            yield self._items[folded][0]

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return {k.lower(): v for k, v in self.items()} == {
            str(k).lower(): v for k, v in other.items()
        }

    def __repr__(self) -> str:
        return f"Header({dict(self.items())!r})"

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value for ``name``, or ``default`` when absent."""
        try:
            return self[name]
        except KeyError:
            return default

    def copy(self) -> "Header":
        """Return an independent copy."""
        result = Header()
        result._items = dict(self._items)
        return result


def url_encode(text: str) -> str:
    """Percent-encode everything except unreserved characters."""
    return quote(text, safe="")


def url_decode(text: str) -> str:
    """Decode percent-escapes in ``text``."""
    return unquote(text)


class UrlParams:
    """Query parameters, kept sorted by name; the first value set wins."""

    def __init__(self) -> None:
        self._params: dict[str, str] = {}

    def param(self, name: str) -> str:
        """Return the value of ``name``, or an empty string."""
        return self._params.get(name, "")

    def set_param(self, name: str, value: str) -> "UrlParams":
        """Set ``name`` unless it is already present."""
        self._params.setdefault(name, value)
        return self

    def decode(self, text: str) -> None:
        """Add the parameters of an encoded ``a=b&c=d`` string."""
        for pair in text.split("&"):
            if not pair:
                continue
            name, _, value = pair.partition("=")
            self.set_param(url_decode(name), url_decode(value))

    def encode(self) -> str:
        """Encode the parameters as ``a=b&c=d``, sorted by name."""
        return "&".join(
            f"{url_encode(name)}={url_encode(self._params[name])}"
            for name in sorted(self._params)
        )


@dataclass
class CookieJar:
    """Raw ``Set-Cookie`` header lines received for a connection."""

    raw_cookie: str = ""


class Action(enum.Enum):
    """What a session should do with a connection."""

    ADD = enum.auto()
    CANCEL = enum.auto()
    PAUSE = enum.auto()
    UNPAUSE = enum.auto()


@dataclass(frozen=True)
class Stop:
    """Message asking a session to stop."""


@dataclass(frozen=True)
class ConnectAction:
    """Message asking a session to act on a connection."""

    con: Any
    action: Action


SessionMessage = Union[Stop, ConnectAction]