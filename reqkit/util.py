"""Helpers for cookies, response headers, URL escaping and small string utilities."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Iterable, Iterator
from urllib.parse import quote, unquote


class _CookieField(IntEnum):
    """Column positions of a Netscape cookie-jar line."""

    DOMAIN = 0
    INCLUDE_SUBDOMAINS = 1
    PATH = 2
    HTTPS_ONLY = 3
    EXPIRES = 4
    NAME = 5
    VALUE = 6


_COOKIE_FIELD_COUNT = len(_CookieField)
_LEADING_UNSIGNED = re.compile(r"\s*\+?(\d+)")
_STATUS_SEPARATORS = "\t "
_TRAILING_SPACE = "\t\n\r "


@dataclass(frozen=True)
class Cookie:
    """A single cookie as stored in a cookie jar."""

    name: str
    value: str
    domain: str = ""
    include_subdomains: bool = False
    path: str = "/"
    https_only: bool = False
    expires: datetime = datetime.fromtimestamp(0, timezone.utc)


@dataclass
class ParsedHeader:
    """Header fields of the last response in a header block, with its status line."""

    fields: dict[str, str] = field(default_factory=dict)
    status_line: str = ""
    reason: str = ""

    def _key_for(self, name: str) -> str | None:
        wanted = name.lower()
        return next((key for key in self.fields if key.lower() == wanted), None)

    def set(self, name: str, value: str) -> None:
        """Set a field, replacing any field whose name differs only in case."""
        key = self._key_for(name)
        self.fields[name if key is None else key] = value

    def get(self, name: str, default: str = "") -> str:
        """Return the value of a field, matching its name without regard to case."""
        key = self._key_for(name)
        return default if key is None else self.fields[key]

    def __getitem__(self, name: str) -> str:
        key = self._key_for(name)
        if key is None:
            raise KeyError(name)
        return self.fields[key]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key_for(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


def split(to_split: str, delimiter: str) -> list[str]:
    """Split on a delimiter; a trailing delimiter yields no empty last token."""
    if not to_split:
        return []
    tokens = to_split.split(delimiter)
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def is_true(s: str) -> bool:
    """Tell whether a string reads "true", ignoring case."""
    return s.lower() == "true"


def _parse_expiry(token: str) -> datetime:
    match = _LEADING_UNSIGNED.match(token)
    if match is None:
        raise ValueError(f"invalid cookie expiry: {token!r}")
    return datetime.fromtimestamp(int(match.group(1)), timezone.utc)


def parse_cookies(raw_cookies: Iterable[str]) -> list[Cookie]:
    """Parse tab-separated cookie-jar lines into cookies."""
    cookies = []
    for raw in raw_cookies:
        tokens = split(raw, "\t")
        tokens.extend([""] * (_COOKIE_FIELD_COUNT - len(tokens)))
        cookies.append(
            Cookie(
                name=tokens[_CookieField.NAME],
                value=tokens[_CookieField.VALUE],
                domain=tokens[_CookieField.DOMAIN],
                include_subdomains=is_true(tokens[_CookieField.INCLUDE_SUBDOMAINS]),
                path=tokens[_CookieField.PATH],
                https_only=is_true(tokens[_CookieField.HTTPS_ONLY]),
                expires=_parse_expiry(tokens[_CookieField.EXPIRES]),
            )
        )
    return cookies


def _find_any(text: str, chars: str, start: int = 0) -> int:
    return next((i for i in range(start, len(text)) if text[i] in chars), -1)


def parse_header(headers: str) -> ParsedHeader:
    """Parse a raw header block; each status line starts the fields afresh."""
    result = ParsedHeader()
    for line in split(headers, "\n"):
        if line.startswith("HTTP/"):
            line = line.rstrip(_TRAILING_SPACE)
            result.status_line = line
            first = _find_any(line, _STATUS_SEPARATORS)
            second = _find_any(line, _STATUS_SEPARATORS, first + 1) if first != -1 else -1
            if second != -1:
                line = line[second + 1 :]
                result.reason = line
            result.fields.clear()

        if line:
            name, colon, value = line.partition(":")
            if colon:
                result.set(name, value.lstrip("\t ").rstrip(_TRAILING_SPACE))
    return result


def url_encode(s: str) -> str:
    """Percent-encode every byte except unreserved characters."""
    return quote(s, safe="")


def url_decode(s: str) -> str:
    """Decode percent-escapes; a plus sign is left as it is."""
    return unquote(s)


def secure_clear(buffer: bytearray) -> None:
    """Overwrite a mutable buffer with zero bytes and then empty it."""
    if not isinstance(buffer, bytearray):
        raise TypeError("secure_clear needs a bytearray")
    if not buffer:
        return
    buffer[:] = bytes(len(buffer))
    buffer.clear()