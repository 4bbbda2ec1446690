"""Signed cookie store enforcing read-once flash delivery."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import TYPE_CHECKING, get_args

from flashcookie import codec
from flashcookie.errors import MalformedEncoding, SignatureMismatch
from flashcookie.jars import CookieAttributes, IncomingCookies, OutgoingCookies, SameSite
from flashcookie.messages import Flash
from flashcookie.signing import CookieSigner

if TYPE_CHECKING:
    from flashcookie.config import FlashSettings

logger = logging.getLogger(__name__)

DEFAULT_COOKIE_NAME = "flash"


class SignedCookieStore:
    """
    Bridge between Flash values and a single signed cookie.

    The store only holds immutable configuration and can be shared by all
    concurrent requests. Per request:

    - ``take`` reads the incoming flash and schedules the cookie's removal,
      so a message is delivered exactly once.
    - ``set`` schedules a new flash cookie, or a removal when the flash is
      empty.

    Cookie operations are recorded on the outgoing jar in call order and the
    last one wins: a ``set`` after ``take`` replaces the scheduled removal.
    """

    def __init__(
        self,
        signing_key: str | bytes | None,
        *,
        fallback_signing_keys: Iterable[str | bytes] = (),
        cookie_name: str = DEFAULT_COOKIE_NAME,
        cookie_path: str = "/",
        cookie_domain: str | None = None,
        secure: bool = True,
        http_only: bool = True,
        same_site: SameSite = "lax",
        max_age: int | None = None,
    ) -> None:
        if not cookie_name:
            raise ValueError("cookie_name must not be empty")
        if same_site not in get_args(SameSite):
            raise ValueError(f"same_site must be one of {get_args(SameSite)}, got {same_site!r}")
        # raises MissingSigningKey
        self._signer = CookieSigner(signing_key, fallback_signing_keys, max_age=max_age)
        self.cookie_name = cookie_name
        self.attributes = CookieAttributes(
            path=cookie_path,
            domain=cookie_domain,
            secure=secure,
            http_only=http_only,
            same_site=same_site,
            max_age=max_age,
        )

    @classmethod
    def from_settings(cls, settings: FlashSettings) -> SignedCookieStore:
        key = settings.signing_key.get_secret_value() if settings.signing_key else None
        return cls(
            key,
            fallback_signing_keys=[k.get_secret_value() for k in settings.fallback_signing_keys],
            cookie_name=settings.cookie_name,
            cookie_path=settings.cookie_path,
            cookie_domain=settings.cookie_domain,
            secure=settings.use_secure_cookies,
            http_only=settings.http_only,
            same_site=settings.same_site,
            max_age=settings.max_age,
        )

    def unpack(self, signed_value: str) -> Flash:
        """Verify then decode a cookie value, raising on either failure."""
        return codec.decode(self._signer.unsign(signed_value))

    def pack(self, flash: Flash) -> str:
        """Encode and sign ``flash`` into a cookie value."""
        return self._signer.sign(codec.encode(flash))

    def read(self, incoming: IncomingCookies) -> Flash:
        """Return the incoming flash; absent, forged or corrupt cookies read as empty."""
        signed_value = incoming.get(self.cookie_name)
        if signed_value is None:
            return Flash()
        try:
            return self.unpack(signed_value)
        except SignatureMismatch as exc:
            logger.debug("Discarding flash cookie %r with bad signature: %s", self.cookie_name, exc)
        except MalformedEncoding as exc:
            logger.debug("Discarding malformed flash cookie %r: %s", self.cookie_name, exc)
        return Flash()

    def take(self, incoming: IncomingCookies, outgoing: OutgoingCookies) -> Flash:
        """Read the incoming flash and schedule removal of its cookie."""
        flash = self.read(incoming)
        self.remove(outgoing)
        return flash

    def set(self, outgoing: OutgoingCookies, flash: Flash, *, max_age: int | None = None) -> None:
        """
        Schedule ``flash`` as the outgoing cookie.

        An empty flash removes the cookie instead of writing an empty value.
        ``max_age`` overrides the configured lifetime for this cookie only.
        """
        if flash.is_empty():
            self.remove(outgoing)
            return
        attributes = self.attributes
        if max_age is not None:
            attributes = replace(attributes, max_age=max_age)
        outgoing.set_cookie(self.cookie_name, self.pack(flash), attributes)

    def remove(self, outgoing: OutgoingCookies) -> None:
        outgoing.delete_cookie(self.cookie_name, self.attributes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cookie_name={self.cookie_name!r}, attributes={self.attributes!r})"
