"""HMAC signing of cookie values (itsdangerous)."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

from itsdangerous import BadSignature, Signer, TimestampSigner

from flashcookie.errors import MissingSigningKey, SignatureMismatch

DEFAULT_SALT = "flashcookie.flash"


class CookieSigner:
    """
    Sign and verify cookie values with HMAC-SHA256.

    New values are always signed with ``secret_key``; ``fallback_keys`` are
    only accepted on verification, which allows rotating keys without
    dropping flashes that are in flight. With ``max_age`` set, signatures carry
    a timestamp and older ones are rejected.
    """

    def __init__(
        self,
        secret_key: str | bytes,
        fallback_keys: Iterable[str | bytes] = (),
        *,
        salt: str = DEFAULT_SALT,
        max_age: int | None = None,
    ) -> None:
        if not secret_key:
            raise MissingSigningKey("a non-empty signing key is required")
        if max_age is not None and max_age <= 0:
            raise ValueError("max_age must be a positive number of seconds")

        # itsdangerous signs with the last key and verifies with all of them
        keys = [key for key in fallback_keys if key] + [secret_key]
        signer_class = Signer if max_age is None else TimestampSigner
        self._signer = signer_class(keys, salt=salt, digest_method=hashlib.sha256)
        self.max_age = max_age

    def sign(self, value: str) -> str:
        return self._signer.sign(value).decode("utf-8")

    def unsign(self, signed_value: str) -> str:
        """Return the original value or raise ``SignatureMismatch``."""
        try:
            if isinstance(self._signer, TimestampSigner):
                value = self._signer.unsign(signed_value, max_age=self.max_age)
            else:
                value = self._signer.unsign(signed_value)
        except BadSignature as exc:
            # SignatureExpired is a BadSignature subclass
            raise SignatureMismatch(str(exc)) from exc
        except UnicodeError as exc:
            raise SignatureMismatch("signed value is not valid text") from exc
        return value.decode("utf-8")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_age={self.max_age!r}, key=REDACTED)"
