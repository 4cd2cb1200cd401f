"""
Scalar Formatting
~~~~~~~~~~~~~~~~~

Renders floats, strings and OS-level resource handles.
"""

from __future__ import annotations

import logging
import math
import re
import socket
from typing import Any

__all__ = [
    "export_int",
    "export_float",
    "export_string",
    "export_resource",
    "shorten",
]

logger = logging.getLogger(__name__)

# Anything outside \x09-\x0d and \x20-\xff counts as binary. Code points
# above 0xff only occur in text, where they are multibyte characters.
_BINARY_TEXT = re.compile(r"[\x00-\x08\x0e-\x1f]")
_BINARY_BYTES = re.compile(rb"[^\x09-\x0d\x20-\xff]")

_LINE_BREAK = re.compile(r"\r\n|\n\r|\r|\n")
_LINE_BREAK_SPELLING = {
    "\r\n": "\\r\\n",
    "\n\r": "\\n\\r",
    "\r": "\\r",
    "\n": "\\n",
}

_ELLIPSIS = "..."
_TAIL_LENGTH = 7

# Stays well below the interpreter's int-to-str digit limit.
_DIGITS_PER_CHUNK = 1000
_CHUNK_BASE = 10**_DIGITS_PER_CHUNK


def export_int(value: int) -> str:
    """
    Render an integer in decimal, however many digits it has.

    Large values are converted in fixed-size chunks, so the
    process-wide ``sys.set_int_max_str_digits`` limit never applies.
    """
    number = int.__index__(value)
    sign = "-" if number < 0 else ""
    number = abs(number)
    if number < _CHUNK_BASE:
        return sign + int.__repr__(number)

    chunks: list[str] = []
    while number >= _CHUNK_BASE:
        number, low = divmod(number, _CHUNK_BASE)
        chunks.append(int.__repr__(low).zfill(_DIGITS_PER_CHUNK))
    chunks.append(int.__repr__(number))
    return sign + "".join(reversed(chunks))


def export_float(value: float) -> str:
    """
    Render a float as its shortest round-trip decimal.

    ``repr()`` already yields the shortest string that parses back to the
    same value and needs no process-wide precision setting, so this is
    safe to call from any thread.
    """
    value = float(value)
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"

    mantissa, _, exponent = repr(value).upper().partition("E")
    if "." not in mantissa:
        mantissa += ".0"
    if exponent:
        return f"{mantissa}E{int(exponent):+d}"
    return mantissa


def export_string(value: str | bytes | bytearray) -> str:
    """
    Render a string single-quoted, or as hex if it holds binary data.

    Each line break (``\\r\\n``, ``\\n\\r``, ``\\r`` or ``\\n``) is spelled out
    with backslashes and followed by a real newline.
    """
    if isinstance(value, (bytes, bytearray)):
        if _BINARY_BYTES.search(value):
            return "Binary String: 0x" + bytes(value).hex()
        text = bytes(value).decode("utf-8", errors="backslashreplace")
    else:
        if _BINARY_TEXT.search(value):
            return "Binary String: 0x" + value.encode(
                "utf-8", errors="surrogatepass"
            ).hex()
        text = value

    body = _LINE_BREAK.sub(lambda m: _LINE_BREAK_SPELLING[m.group()] + "\n", text)
    return f"'{body}'"


def shorten(text: str, max_length: int) -> str:
    """
    Collapse an exported string to one line of at most ``max_length``
    code points.

    Longer text keeps a head of ``max_length - 10`` code points and a
    7 code point tail around an ellipsis.
    """
    text = text.replace("\n", "")
    if len(text) <= max_length:
        return text

    head = max(max_length - 10, 0)
    tail = min(_TAIL_LENGTH, max(max_length - len(_ELLIPSIS), 0))
    return text[:head] + _ELLIPSIS + (text[-tail:] if tail else "")


def export_resource(value: Any) -> str:
    """
    Render a stream or socket handle.

    Handles whose status or descriptor cannot be queried (in-memory
    streams, detached wrappers) render with ``repr()``.
    """
    resource_type = "socket" if isinstance(value, socket.socket) else "stream"
    try:
        if _is_closed(value):
            return "resource (closed)"
        descriptor = value.fileno()
    except (OSError, ValueError):
        logger.debug(
            "Cannot query %s handle, falling back to repr()", type(value).__name__
        )
        return repr(value)

    return f"resource({descriptor}) of type ({resource_type})"


def _is_closed(value: Any) -> bool:
    if isinstance(value, socket.socket):
        return value.fileno() == -1
    return bool(getattr(value, "closed", False))
