"""SSH wire encodings (RFC 4251, section 5)."""

from __future__ import annotations

import struct

_U32 = struct.Struct(">I")


def u32(value: int) -> bytes:
    """Encode a 32-bit unsigned integer, big-endian."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"value does not fit in 32 bits: {value}")
    return _U32.pack(value)


def ssh_string(data: bytes | str) -> bytes:
    """Encode a length-prefixed SSH string."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    data = bytes(data)
    return u32(len(data)) + data


def _strip_leading_zeros(data: bytes) -> bytes:
    return bytes(data).lstrip(b"\x00")


def ssh_mpint(data: bytes) -> bytes:
    """Encode a non-negative big-endian integer, given as bytes, as an SSH mpint."""
    digits = _strip_leading_zeros(data)
    if digits and digits[0] & 0x80:
        digits = b"\x00" + digits
    return u32(len(digits)) + digits


def mpint_len(data: bytes) -> int:
    """Length of ``ssh_mpint(data)``, including its four-byte length prefix."""
    digits = _strip_leading_zeros(data)
    extra = 1 if digits and digits[0] & 0x80 else 0
    return 4 + extra + len(digits)