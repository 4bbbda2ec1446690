"""Signed, read-once flash messages carried in a cookie."""

from flashcookie.codec import decode, encode
from flashcookie.errors import FlashError, MalformedEncoding, MissingSigningKey, SignatureMismatch
from flashcookie.jars import CookieAttributes, PendingCookies
from flashcookie.messages import Flash, FlashMessage, Level
from flashcookie.store import DEFAULT_COOKIE_NAME, SignedCookieStore

__all__ = [
    "DEFAULT_COOKIE_NAME",
    "CookieAttributes",
    "Flash",
    "FlashError",
    "FlashMessage",
    "Level",
    "MalformedEncoding",
    "MissingSigningKey",
    "PendingCookies",
    "SignatureMismatch",
    "SignedCookieStore",
    "decode",
    "encode",
]
