"""Lenient UTF-8 decoding used when measuring and drawing bar text."""

from __future__ import annotations

from typing import Iterator

UTF_INVALID = 0xFFFD
UTF_SIZ = 4

_UTF_BYTE = (0x80, 0x00, 0xC0, 0xE0, 0xF0)
_UTF_MASK = (0xC0, 0x80, 0xE0, 0xF0, 0xF8)
_UTF_MIN = (0, 0, 0x80, 0x800, 0x10000)
_UTF_MAX = (0x10FFFF, 0x7F, 0x7FF, 0xFFFF, 0x10FFFF)


def decode_byte(byte: int) -> tuple[int, int]:
    """Classify one byte.

    Returns ``(payload, kind)`` where kind 0 is a continuation byte, 1-4 is
    the length of the sequence the byte starts, and 5 means an invalid byte.
    """
    byte &= 0xFF
    for kind, (mask, pattern) in enumerate(zip(_UTF_MASK, _UTF_BYTE)):
        if byte & mask == pattern:
            return byte & ~mask & 0xFF, kind
    return 0, UTF_SIZ + 1


def validate(codepoint: int, length: int) -> tuple[int, int]:
    """Replace out-of-range or surrogate code points by U+FFFD.

    Returns the (possibly replaced) code point and the length of its
    shortest encoding.
    """
    if not (_UTF_MIN[length] <= codepoint <= _UTF_MAX[length]) or 0xD800 <= codepoint <= 0xDFFF:
        codepoint = UTF_INVALID
    size = 1
    while codepoint > _UTF_MAX[size]:
        size += 1
    return codepoint, size


def utf8_decode(data: bytes) -> tuple[int, int]:
    """Decode the first code point of ``data``.

    Returns ``(codepoint, consumed)``.  Invalid input yields U+FFFD; a
    sequence cut short by the end of ``data`` consumes nothing.
    """
    if not data:
        return UTF_INVALID, 0
    decoded, length = decode_byte(data[0])
    if not 1 <= length <= UTF_SIZ:
        return UTF_INVALID, 1
    j = 1
    for byte in data[1:length]:
        payload, kind = decode_byte(byte)
        if kind:
            return UTF_INVALID, j
        decoded = (decoded << 6) | payload
        j += 1
    if j < length:
        return UTF_INVALID, 0
    codepoint, _ = validate(decoded, length)
    return codepoint, length


def _as_bytes(data: bytes | bytearray | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def decode_at(data: bytes, pos: int) -> tuple[int, int]:
    """Decode at ``pos`` as if the buffer were NUL terminated."""
    chunk = data[pos:pos + UTF_SIZ]
    if len(chunk) < UTF_SIZ:
        chunk += b"\0"
    return utf8_decode(chunk)


def iter_codepoints(data: bytes | bytearray | str) -> Iterator[tuple[int, bytes]]:
    """Yield ``(codepoint, raw_bytes)`` for every character of ``data``."""
    raw = _as_bytes(data)
    pos = 0
    while pos < len(raw):
        codepoint, consumed = decode_at(raw, pos)
        if consumed == 0:
            consumed = len(raw) - pos
        yield codepoint, raw[pos:pos + consumed]
        pos += consumed