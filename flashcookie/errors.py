"""Flash error taxonomy."""

from __future__ import annotations


class FlashError(Exception):
    """Base class for flash cookie errors."""


class MalformedEncoding(FlashError, ValueError):
    """Cookie payload is not a valid encoded flash."""


class SignatureMismatch(FlashError):
    """Cookie signature is missing, forged, expired or made with an unknown key."""


class MissingSigningKey(FlashError):
    """The store was configured without a signing key."""
