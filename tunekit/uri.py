"""URI parsing that follows the RFC 3986 grammar."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Callable, Optional

_Captures = dict[str, tuple[int, int]]
_Match = Optional[tuple[int, _Captures]]
_Rule = Callable[[str, int], _Match]

_ALPHA = string.ascii_letters
_DIGIT = "0123456789"
_HEXDIG = "0123456789abcdefABCDEF"


def _chars(chars: str) -> _Rule:
    allowed = frozenset(chars)

    def rule(text: str, pos: int) -> _Match:
        if pos < len(text) and text[pos] in allowed:
            return pos + 1, {}
        return None

    return rule


def _lit(literal: str) -> _Rule:
    def rule(text: str, pos: int) -> _Match:
        if text.startswith(literal, pos):
            return pos + len(literal), {}
        return None

    return rule


def _seq(*rules: _Rule) -> _Rule:
    def rule(text: str, pos: int) -> _Match:
        captures: _Captures = {}
        for sub in rules:
            matched = sub(text, pos)
            if matched is None:
                return None
            pos, found = matched
            captures.update(found)
        return pos, captures

    return rule


def _sor(*rules: _Rule) -> _Rule:
    def rule(text: str, pos: int) -> _Match:
        for sub in rules:
            matched = sub(text, pos)
            if matched is not None:
                return matched
        return None

    return rule


def _repeat(sub: _Rule, low: int, high: Optional[int] = None) -> _Rule:
    def rule(text: str, pos: int) -> _Match:
        captures: _Captures = {}
        count = 0
        while high is None or count < high:
            matched = sub(text, pos)
            if matched is None:
                break
            new_pos, found = matched
            captures.update(found)
            count += 1
            if new_pos == pos and high is None:
                break
            pos = new_pos
        if count < low:
            return None
        return pos, captures

    return rule


def _not_at(sub: _Rule) -> _Rule:
    def rule(text: str, pos: int) -> _Match:
        if sub(text, pos) is None:
            return pos, {}
        return None

    return rule


def _star(*rules: _Rule) -> _Rule:
    return _repeat(_seq(*rules), 0)


def _plus(*rules: _Rule) -> _Rule:
    return _repeat(_seq(*rules), 1)


def _opt(*rules: _Rule) -> _Rule:
    return _repeat(_seq(*rules), 0, 1)


def _rep(count: int, sub: _Rule) -> _Rule:
    return _repeat(sub, count, count)


def _rep_opt(count: int, sub: _Rule) -> _Rule:
    return _repeat(sub, 0, count)


def _rep_min_max(low: int, high: int, sub: _Rule) -> _Rule:
    return _seq(_repeat(sub, low, high), _not_at(sub))


def _capture(name: str, sub: _Rule) -> _Rule:
    def rule(text: str, pos: int) -> _Match:
        matched = sub(text, pos)
        if matched is None:
            return None
        new_pos, found = matched
        captures = dict(found)
        captures[name] = (pos, new_pos)
        return new_pos, captures

    return rule


def _success(text: str, pos: int) -> _Match:
    return pos, {}


def _dec_octet(text: str, pos: int) -> _Match:
    end = pos
    while end < len(text) and text[end] in _DIGIT:
        end += 1
    if end == pos or int(text[pos:end]) > 255:
        return None
    return end, {}


_alpha = _chars(_ALPHA)
_digit = _chars(_DIGIT)
_hexdig = _chars(_HEXDIG)
_colon = _lit(":")
_slash = _lit("/")

_pct_encoded = _seq(_lit("%"), _hexdig, _hexdig)
_sub_delims = _chars("!$&'()*+,;=")
_unreserved = _sor(_alpha, _digit, _chars("-._~"))

_scheme = _seq(_alpha, _star(_sor(_alpha, _digit, _chars("+-."))))
_userinfo = _star(_sor(_unreserved, _pct_encoded, _sub_delims, _colon))

_ipv4 = _seq(
    _dec_octet, _lit("."), _dec_octet, _lit("."), _dec_octet, _lit("."), _dec_octet
)
_ipvfuture = _seq(
    _chars("vV"),
    _plus(_hexdig),
    _lit("."),
    _plus(_sor(_unreserved, _sub_delims, _colon)),
)

_h16 = _rep_min_max(1, 4, _hexdig)
_h16_colon = _seq(_h16, _colon)
_ls32 = _sor(_seq(_h16, _colon, _h16), _ipv4)
_double_colon = _lit("::")


def _prefix(count: int) -> _Rule:
    return _opt(_rep_opt(count, _h16_colon), _h16)


_ipv6 = _sor(
    _seq(_rep(6, _h16_colon), _ls32),
    _seq(_double_colon, _rep(5, _h16_colon), _ls32),
    _seq(_opt(_h16), _double_colon, _rep(4, _h16_colon), _ls32),
    _seq(_opt(_opt(_h16_colon), _h16), _double_colon, _rep(3, _h16_colon), _ls32),
    _seq(_prefix(2), _double_colon, _rep(2, _h16_colon), _ls32),
    _seq(_prefix(3), _double_colon, _h16, _colon, _ls32),
    _seq(_prefix(4), _double_colon, _ls32),
    _seq(_prefix(5), _double_colon, _h16),
    _seq(_prefix(6), _double_colon),
)

_ip_literal = _seq(_lit("["), _sor(_ipv6, _ipvfuture), _lit("]"))
_reg_name = _star(_sor(_unreserved, _pct_encoded, _sub_delims))
_port = _star(_digit)

_pchar = _sor(_unreserved, _pct_encoded, _sub_delims, _colon, _lit("@"))
_segment = _star(_pchar)
_segment_nz = _plus(_pchar)

_path_abempty = _star(_slash, _segment)
_path_absolute = _seq(_slash, _opt(_segment_nz, _star(_slash, _segment)))
_path_rootless = _seq(_segment_nz, _star(_slash, _segment))

_query = _star(_sor(_pchar, _slash, _lit("?")))
_fragment = _star(_sor(_pchar, _slash, _lit("?")))

_host = _sor(_ip_literal, _ipv4, _reg_name)
_authority = _seq(
    _opt(_capture("userinfo", _userinfo), _lit("@")),
    _capture("host", _host),
    _opt(_colon, _capture("port", _port)),
)

_hier_part = _sor(
    _seq(_lit("//"), _capture("authority", _authority), _capture("path", _path_abempty)),
    _capture("path", _path_absolute),
    _capture("path", _path_rootless),
    _success,
)

_URI_RULE = _seq(
    _capture("scheme", _scheme),
    _colon,
    _hier_part,
    _opt(_lit("?"), _capture("query", _query)),
    _opt(_lit("#"), _capture("fragment", _fragment)),
)


@dataclass(frozen=True)
class URI:
    """A URI split into its RFC 3986 components.

    Parsing matches the longest prefix of the text that forms a URI; ``valid``
    tells whether such a prefix exists. Components that were not present are
    empty strings.
    """

    uri: str = ""
    scheme: str = ""
    authority: str = ""
    userinfo: str = ""
    host: str = ""
    port: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""
    valid: bool = False

    @classmethod
    def parse(cls, text: str) -> "URI":
        """Parse ``text`` into a URI."""
        matched = _URI_RULE(text, 0)
        if matched is None:
            return cls(uri=text)
        _, captures = matched
        parts = {name: text[start:end] for name, (start, end) in captures.items()}
        return cls(uri=text, valid=True, **parts)

    def __str__(self) -> str:
        return self.uri


def parse_uri(text: str) -> URI:
    """Parse ``text`` into a URI."""
    return URI.parse(text)