"""The null cipher used before the first key exchange completes."""

from __future__ import annotations

from typing import Tuple

from .base import PACKET_LENGTH_LEN, CipherPair

_BLOCK_SIZE = 8


class ClearKey:
    """Opens and seals packets without encryption or authentication."""

    def decrypt_packet_length(self, seqn: int, encrypted_length: bytes) -> bytes:
        return bytes(encrypted_length)

    def tag_len(self) -> int:
        return 0

    def open(self, seqn: int, ciphertext: bytes, tag: bytes) -> bytes:
        if tag:
            raise ValueError("cleartext packets carry no tag")
        return bytes(ciphertext[PACKET_LENGTH_LEN:])

    def padding_length(self, payload: bytes) -> int:
        # Cleartext packets, length included, must be a multiple of 8 bytes.
        padding_len = _BLOCK_SIZE - ((5 + len(payload)) % _BLOCK_SIZE)
        if padding_len < 4:
            padding_len += _BLOCK_SIZE
        return padding_len

    def fill_padding(self, length: int) -> bytes:
        # Nothing is hidden anyway, so zeros avoid leaking generator state.
        return bytes(length)

    def seal(self, seqn: int, plaintext: bytes) -> Tuple[bytes, bytes]:
        return bytes(plaintext), b""


def clear_pair() -> CipherPair:
    """A cipher pair that sends and receives packets in the clear."""
    return CipherPair(local_to_remote=ClearKey(), remote_to_local=ClearKey())