"""The AES-256-GCM cipher: the packet length travels in the clear as associated data."""

from __future__ import annotations

import os
from typing import Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..errors import DecryptionError
from .base import PACKET_LENGTH_LEN, Cipher, aead_padding_length

NAME = "aes256-gcm"
KEY_BYTES = 32
NONCE_BYTES = 12
TAG_LEN = 16
_BLOCK_SIZE = 16
_GCM_COUNTER_OFFSET = 3
_COUNTER_LEN = 8
_U64_MASK = (1 << 64) - 1


def make_nonce(nonce: bytes, sequence_number: int) -> bytes:
    """The per-packet nonce: the trailing 64-bit counter advanced by the sequence number."""
    nonce = bytes(nonce)
    if len(nonce) != NONCE_BYTES:
        raise ValueError(f"AES-GCM needs a {NONCE_BYTES}-byte nonce, got {len(nonce)}")
    split = NONCE_BYTES - _COUNTER_LEN
    counter = int.from_bytes(nonce[split:], "big")
    counter = (counter + sequence_number - _GCM_COUNTER_OFFSET) & _U64_MASK
    return nonce[:split] + counter.to_bytes(_COUNTER_LEN, "big")


def _check(key: bytes, nonce: bytes) -> Tuple[bytes, bytes]:
    key, nonce = bytes(key), bytes(nonce)
    if len(key) != KEY_BYTES:
        raise ValueError(f"AES-256-GCM needs a {KEY_BYTES}-byte key, got {len(key)}")
    if len(nonce) != NONCE_BYTES:
        raise ValueError(f"AES-GCM needs a {NONCE_BYTES}-byte nonce, got {len(nonce)}")
    return key, nonce


class AesGcmOpeningKey:
    """Decrypts and authenticates incoming AES-256-GCM packets."""

    def __init__(self, key: bytes, nonce: bytes) -> None:
        self._aead = AESGCM(key)
        self._nonce = nonce

    def decrypt_packet_length(self, seqn: int, encrypted_length: bytes) -> bytes:
        return bytes(encrypted_length)

    def tag_len(self) -> int:
        return TAG_LEN

    def open(self, seqn: int, ciphertext: bytes, tag: bytes) -> bytes:
        ciphertext = bytes(ciphertext)
        packet_length = ciphertext[:PACKET_LENGTH_LEN]
        try:
            return self._aead.decrypt(
                make_nonce(self._nonce, seqn),
                ciphertext[PACKET_LENGTH_LEN:] + bytes(tag),
                packet_length,
            )
        except InvalidTag:
            raise DecryptionError() from None


class AesGcmSealingKey:
    """Encrypts and authenticates outgoing AES-256-GCM packets."""

    def __init__(self, key: bytes, nonce: bytes) -> None:
        self._aead = AESGCM(key)
        self._nonce = nonce

    def padding_length(self, payload: bytes) -> int:
        return aead_padding_length(len(payload), _BLOCK_SIZE)

    def fill_padding(self, length: int) -> bytes:
        return os.urandom(length)

    def tag_len(self) -> int:
        return TAG_LEN

    def seal(self, seqn: int, plaintext: bytes) -> Tuple[bytes, bytes]:
        plaintext = bytes(plaintext)
        packet_length = plaintext[:PACKET_LENGTH_LEN]
        sealed = self._aead.encrypt(
            make_nonce(self._nonce, seqn), plaintext[PACKET_LENGTH_LEN:], packet_length
        )
        return packet_length + sealed[:-TAG_LEN], sealed[-TAG_LEN:]


def make_sealing_cipher(key: bytes, nonce: bytes) -> AesGcmSealingKey:
    """Build the sealing key from a 32-byte key and a 12-byte initial nonce."""
    return AesGcmSealingKey(*_check(key, nonce))


def make_opening_cipher(key: bytes, nonce: bytes) -> AesGcmOpeningKey:
    """Build the opening key from a 32-byte key and a 12-byte initial nonce."""
    return AesGcmOpeningKey(*_check(key, nonce))


CIPHER = Cipher(
    name=NAME,
    key_len=KEY_BYTES,
    nonce_len=NONCE_BYTES,
    make_opening_cipher=make_opening_cipher,
    make_sealing_cipher=make_sealing_cipher,
)