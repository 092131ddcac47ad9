"""Packet payload compression."""

from __future__ import annotations

import enum
import zlib

_ZLIB_NAMES = frozenset({"zlib"})


class Compression(enum.Enum):
    """A negotiated compression algorithm."""

    NONE = "none"
    ZLIB = "zlib"

    @classmethod
    def from_string(cls, name: str) -> Compression:
        """The algorithm for a negotiated name; anything unknown means no compression."""
        return cls.ZLIB if name in _ZLIB_NAMES else cls.NONE

    def compressor(self) -> Compressor:
        return Compressor(self)

    def decompressor(self) -> Decompressor:
        return Decompressor(self)


class Compressor:
    """Compresses outgoing payloads, one packet at a time."""

    def __init__(self, algorithm: Compression = Compression.NONE) -> None:
        self.algorithm = algorithm
        self._stream = None
        self.reset()

    def reset(self) -> None:
        """Start a fresh compression stream."""
        if self.algorithm is Compression.ZLIB:
            self._stream = zlib.compressobj(1)
        else:
            self._stream = None

    def compress(self, data: bytes) -> bytes:
        """Compress one payload; the output is flushed so the peer can decode it at once."""
        if self._stream is None:
            return bytes(data)
        return self._stream.compress(data) + self._stream.flush(zlib.Z_PARTIAL_FLUSH)


class Decompressor:
    """Decompresses incoming payloads, one packet at a time."""

    def __init__(self, algorithm: Compression = Compression.NONE) -> None:
        self.algorithm = algorithm
        self._stream = None
        self.reset()

    def reset(self) -> None:
        """Start a fresh decompression stream."""
        if self.algorithm is Compression.ZLIB:
            self._stream = zlib.decompressobj()
        else:
            self._stream = None

    def decompress(self, data: bytes) -> bytes:
        """Decompress one payload; raises zlib.error on corrupt input."""
        if self._stream is None:
            return bytes(data)
        return self._stream.decompress(data)