"""
Text encoding of a Flash for use as a cookie value.

The payload is a compact JSON array of ``[level, text]`` pairs, ASCII-escaped
and then URL-safe base64 encoded without padding. JSON string escaping keeps
arbitrary message text unambiguous; base64 keeps the value cookie-safe.
"""

from __future__ import annotations

import json
import re
from typing import Any

from itsdangerous import BadData, base64_decode, base64_encode

from flashcookie.errors import MalformedEncoding
from flashcookie.messages import Flash, FlashMessage, Level

EMPTY = ""

_BASE64_URL = re.compile(r"[A-Za-z0-9_-]*")


def encode(flash: Flash) -> str:
    """Encode ``flash``; an empty flash maps to ``EMPTY``."""
    if flash.is_empty():
        return EMPTY
    pairs = [[int(level), text] for level, text in flash]
    payload = json.dumps(pairs, separators=(",", ":"), ensure_ascii=True)
    return base64_encode(payload).decode("ascii")


def decode(value: str) -> Flash:
    """Inverse of :func:`encode`. Raises ``MalformedEncoding`` on bad input."""
    if value == EMPTY:
        return Flash()
    if not isinstance(value, str) or not _BASE64_URL.fullmatch(value):
        raise MalformedEncoding("flash value is not URL-safe base64")

    try:
        raw = base64_decode(value)
    except BadData as exc:
        raise MalformedEncoding("flash value has invalid base64 padding") from exc

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedEncoding("flash payload is not valid UTF-8") from exc

    try:
        pairs = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise MalformedEncoding("flash payload is not valid JSON") from exc

    if not isinstance(pairs, list) or not pairs:
        raise MalformedEncoding("flash payload must be a non-empty list")
    return Flash(tuple(_decode_pair(pair) for pair in pairs))


def _decode_pair(pair: Any) -> FlashMessage:
    if not isinstance(pair, list) or len(pair) != 2:
        raise MalformedEncoding("flash entry must be a [level, text] pair")
    tag, text = pair
    # bool is an int subclass; encode never emits it
    if isinstance(tag, bool) or not isinstance(tag, int):
        raise MalformedEncoding(f"invalid flash level tag: {tag!r}")
    try:
        level = Level(tag)
    except ValueError as exc:
        raise MalformedEncoding(f"unknown flash level: {tag!r}") from exc
    if not isinstance(text, str):
        raise MalformedEncoding("flash text must be a string")
    return FlashMessage(level, text)
