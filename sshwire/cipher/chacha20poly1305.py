"""The chacha20-poly1305 cipher: packet length and payload under two keys."""

from __future__ import annotations

import struct
from typing import Tuple

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.ciphers import Cipher as _StreamCipher
from cryptography.hazmat.primitives.ciphers import algorithms
from cryptography.hazmat.primitives.poly1305 import Poly1305

from ..errors import PacketAuthError
from .base import PACKET_LENGTH_LEN, Cipher, aead_padding_length

NAME = "chacha20-poly1305"
KEY_BYTES = 32
TAG_LEN = 16
_BLOCK_SIZE = 8
_POLY_KEY_LEN = 32


def _counter_nonce(seqn: int) -> bytes:
    """The 8-byte nonce: the sequence number in the last four bytes, big-endian."""
    return bytes(4) + struct.pack(">I", seqn & 0xFFFFFFFF)


def _chacha20(key: bytes, seqn: int, counter: int, data: bytes) -> bytes:
    nonce = counter.to_bytes(8, "little") + _counter_nonce(seqn)
    encryptor = _StreamCipher(algorithms.ChaCha20(key, nonce), mode=None).encryptor()
    return encryptor.update(data) + encryptor.finalize()


def _poly_key(key: bytes, seqn: int) -> bytes:
    return _chacha20(key, seqn, 0, bytes(_POLY_KEY_LEN))


def _split_key(key: bytes) -> Tuple[bytes, bytes]:
    key = bytes(key)
    if len(key) != 2 * KEY_BYTES:
        raise ValueError(f"chacha20-poly1305 needs a {2 * KEY_BYTES}-byte key, got {len(key)}")
    # The second half encrypts lengths, the first half payloads.
    return key[KEY_BYTES:], key[:KEY_BYTES]


class ChachaOpeningKey:
    """Decrypts and authenticates incoming chacha20-poly1305 packets."""

    def __init__(self, k1: bytes, k2: bytes) -> None:
        self._k1 = k1
        self._k2 = k2

    def decrypt_packet_length(self, seqn: int, encrypted_length: bytes) -> bytes:
        return _chacha20(self._k1, seqn, 0, bytes(encrypted_length))

    def tag_len(self) -> int:
        return TAG_LEN

    def open(self, seqn: int, ciphertext: bytes, tag: bytes) -> bytes:
        ciphertext = bytes(ciphertext)
        try:
            Poly1305.verify_tag(_poly_key(self._k2, seqn), ciphertext, bytes(tag))
        except InvalidSignature:
            raise PacketAuthError() from None
        return _chacha20(self._k2, seqn, 1, ciphertext[PACKET_LENGTH_LEN:])


class ChachaSealingKey:
    """Encrypts and authenticates outgoing chacha20-poly1305 packets."""

    def __init__(self, k1: bytes, k2: bytes) -> None:
        self._k1 = k1
        self._k2 = k2

    def padding_length(self, payload: bytes) -> int:
        return aead_padding_length(len(payload), _BLOCK_SIZE)

    def fill_padding(self, length: int) -> bytes:
        # Stateful counter-mode encryption does not need random padding.
        return bytes(length)

    def tag_len(self) -> int:
        return TAG_LEN

    def seal(self, seqn: int, plaintext: bytes) -> Tuple[bytes, bytes]:
        plaintext = bytes(plaintext)
        ciphertext = _chacha20(self._k1, seqn, 0, plaintext[:PACKET_LENGTH_LEN]) + _chacha20(
            self._k2, seqn, 1, plaintext[PACKET_LENGTH_LEN:]
        )
        tag = Poly1305.generate_tag(_poly_key(self._k2, seqn), ciphertext)
        return ciphertext, tag


def make_sealing_cipher(key: bytes, nonce: bytes) -> ChachaSealingKey:
    """Build the sealing key from 64 bytes of key material; the nonce is unused."""
    return ChachaSealingKey(*_split_key(key))


def make_opening_cipher(key: bytes, nonce: bytes) -> ChachaOpeningKey:
    """Build the opening key from 64 bytes of key material; the nonce is unused."""
    return ChachaOpeningKey(*_split_key(key))


CIPHER = Cipher(
    name=NAME,
    key_len=2 * KEY_BYTES,
    nonce_len=0,
    make_opening_cipher=make_opening_cipher,
    make_sealing_cipher=make_sealing_cipher,
)