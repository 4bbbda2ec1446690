"""Cookie jar capabilities the flash store depends on."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Literal, Protocol

from starlette.responses import Response

SameSite = Literal["lax", "strict", "none"]


class IncomingCookies(Protocol):
    """Read access to request cookies (``request.cookies`` fits)."""

    def get(self, name: str) -> str | None: ...


class OutgoingCookies(Protocol):
    """Write access to response cookies."""

    def set_cookie(self, name: str, value: str, attributes: CookieAttributes) -> None: ...

    def delete_cookie(self, name: str, attributes: CookieAttributes) -> None: ...


@dataclass(frozen=True)
class CookieAttributes:
    path: str = "/"
    domain: str | None = None
    secure: bool = True
    http_only: bool = True
    same_site: SameSite = "lax"
    max_age: int | None = None


@dataclass(frozen=True)
class CookieChange:
    """A pending ``Set-Cookie``; ``value`` is None for a removal."""

    name: str
    value: str | None
    attributes: CookieAttributes

    @property
    def is_removal(self) -> bool:
        return self.value is None


class PendingCookies:
    """
    Outgoing cookie operations for one response.

    Operations are kept in call order and a later operation on the same cookie
    (name, path and domain) replaces the earlier one, so only the last write
    reaches the response.
    """

    def __init__(self) -> None:
        self._changes: dict[tuple[str, str, str | None], CookieChange] = {}

    def set_cookie(self, name: str, value: str, attributes: CookieAttributes) -> None:
        self._record(CookieChange(name, value, attributes))

    def delete_cookie(self, name: str, attributes: CookieAttributes) -> None:
        self._record(CookieChange(name, None, attributes))

    def _record(self, change: CookieChange) -> None:
        key = (change.name, change.attributes.path, change.attributes.domain)
        # re-insert so dict order follows the latest call
        self._changes.pop(key, None)
        self._changes[key] = change

    def get(self, name: str) -> CookieChange | None:
        """Latest pending change for ``name``, if any."""
        for change in reversed(self._changes.values()):
            if change.name == name:
                return change
        return None

    def __iter__(self) -> Iterator[CookieChange]:
        return iter(list(self._changes.values()))

    def __len__(self) -> int:
        return len(self._changes)

    def apply(self, response: Response) -> None:
        """Emit the pending changes as ``Set-Cookie`` headers on ``response``."""
        for change in self:
            attrs = change.attributes
            if change.is_removal:
                response.delete_cookie(
                    change.name,
                    path=attrs.path,
                    domain=attrs.domain,
                    secure=attrs.secure,
                    httponly=attrs.http_only,
                    samesite=attrs.same_site,
                )
            else:
                response.set_cookie(
                    change.name,
                    change.value,
                    max_age=attrs.max_age,
                    path=attrs.path,
                    domain=attrs.domain,
                    secure=attrs.secure,
                    httponly=attrs.http_only,
                    samesite=attrs.same_site,
                )

    def merge_into(self, cookies: Mapping[str, str]) -> dict[str, str]:
        """
        Cookies a browser would send next, given it held ``cookies`` and
        received this response. Useful for driving a store without HTTP.
        """
        result = dict(cookies)
        for change in self:
            if change.is_removal:
                result.pop(change.name, None)
            else:
                result[change.name] = change.value
        return result
