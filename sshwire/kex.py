"""Curve25519 key exchange and derivation of the session keys (RFC 5656, RFC 4253 7.2)."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from cryptography.hazmat.primitives.asymmetric.x25519 import (
    X25519PrivateKey,
    X25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from . import msg
from .cipher import aes256gcm, chacha20poly1305
from .cipher.base import Cipher, CipherPair
from .encoding import ssh_mpint, ssh_string
from .errors import InconsistentError, KexError, KexInitError, NoCommonCipherError
from .key import push_public_key

CURVE25519 = "curve25519-sha256"
_POINT_LEN = 32

_CIPHERS = {
    chacha20poly1305.NAME: chacha20poly1305.CIPHER,
    aes256gcm.NAME: aes256gcm.CIPHER,
}


def cipher_by_name(name: str) -> Cipher:
    """The cipher negotiated under ``name``; raises NoCommonCipherError if unknown."""
    try:
        return _CIPHERS[name]
    except KeyError:
        raise NoCommonCipherError(f"unsupported cipher: {name!r}") from None


@dataclass
class Exchange:
    """Everything both sides hash together to get the exchange hash."""

    client_id: bytes = b""
    server_id: bytes = b""
    client_kex_init: bytes = b""
    server_kex_init: bytes = b""
    client_ephemeral: bytes = b""
    server_ephemeral: bytes = b""


def _raw_public(secret: X25519PrivateKey) -> bytes:
    return secret.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)


def _scalarmult(secret: X25519PrivateKey, remote_pubkey: bytes) -> bytes:
    remote_pubkey = bytes(remote_pubkey)
    if len(remote_pubkey) != _POINT_LEN:
        raise InconsistentError(
            f"Curve25519 public keys are {_POINT_LEN} bytes, got {len(remote_pubkey)}"
        )
    try:
        return secret.exchange(X25519PublicKey.from_public_bytes(remote_pubkey))
    except ValueError as exc:
        raise KexError(str(exc)) from exc


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


class KexAlgorithm:
    """One side of a Curve25519 Diffie-Hellman exchange."""

    def __init__(
        self,
        local_secret: Optional[X25519PrivateKey] = None,
        shared_secret: Optional[bytes] = None,
    ) -> None:
        self.local_secret = local_secret
        self.shared_secret = shared_secret

    def __repr__(self) -> str:
        return "KexAlgorithm(local_secret=[hidden], shared_secret=[hidden])"

    @classmethod
    def server_dh(cls, exchange: Exchange, payload: bytes) -> KexAlgorithm:
        """Answer a client's KEX_ECDH_INIT; sets ``exchange.server_ephemeral``."""
        payload = bytes(payload)
        if not payload or payload[0] != msg.KEX_ECDH_INIT:
            raise InconsistentError()
        if len(payload) < 5:
            raise InconsistentError()
        pubkey_len = int.from_bytes(payload[1:5], "big")
        if len(payload) < 5 + pubkey_len:
            raise InconsistentError()
        client_pubkey = payload[5 : 5 + pubkey_len]

        server_secret = X25519PrivateKey.generate()
        exchange.server_ephemeral = _raw_public(server_secret)
        shared = _scalarmult(server_secret, client_pubkey)
        return cls(local_secret=None, shared_secret=shared)

    @classmethod
    def client_dh(cls, exchange: Exchange) -> Tuple[KexAlgorithm, bytes]:
        """Start the exchange as a client.

        Sets ``exchange.client_ephemeral`` and returns the algorithm state with
        the KEX_ECDH_INIT payload to send.
        """
        client_secret = X25519PrivateKey.generate()
        client_pubkey = _raw_public(client_secret)
        exchange.client_ephemeral = client_pubkey
        payload = bytes([msg.KEX_ECDH_INIT]) + ssh_string(client_pubkey)
        return cls(local_secret=client_secret, shared_secret=None), payload

    def compute_shared_secret(self, remote_pubkey: bytes) -> None:
        """Derive the shared secret from the server's ephemeral key; usable once."""
        local_secret, self.local_secret = self.local_secret, None
        if local_secret is None:
            raise KexInitError()
        self.shared_secret = _scalarmult(local_secret, remote_pubkey)

    def _shared_mpint(self) -> bytes:
        return ssh_mpint(self.shared_secret) if self.shared_secret is not None else b""

    def compute_exchange_hash(self, key: Union[bytes, object], exchange: Exchange) -> bytes:
        """The SHA-256 exchange hash; ``key`` is a host key or its SSH blob."""
        buffer = bytearray()
        buffer += ssh_string(exchange.client_id)
        buffer += ssh_string(exchange.server_id)
        buffer += ssh_string(exchange.client_kex_init)
        buffer += ssh_string(exchange.server_kex_init)
        if isinstance(key, (bytes, bytearray, memoryview)):
            buffer += ssh_string(bytes(key))
        else:
            push_public_key(key, buffer)
        buffer += ssh_string(exchange.client_ephemeral)
        buffer += ssh_string(exchange.server_ephemeral)
        buffer += self._shared_mpint()
        return _sha256(bytes(buffer))

    def _derive(self, letter: int, session_id: bytes, exchange_hash: bytes, length: int) -> bytes:
        prefix = self._shared_mpint() + bytes(exchange_hash)
        key = _sha256(prefix + bytes([letter]) + bytes(session_id))
        while len(key) < length:
            key += _sha256(prefix + key)
        return key[:length]

    def compute_keys(
        self,
        session_id: bytes,
        exchange_hash: bytes,
        cipher_name: str,
        is_server: bool,
    ) -> CipherPair:
        """Derive both directions' keys for the negotiated cipher."""
        cipher = cipher_by_name(cipher_name)
        if is_server:
            local_key, remote_key = b"D", b"C"
            local_nonce, remote_nonce = b"B", b"A"
        else:
            local_key, remote_key = b"C", b"D"
            local_nonce, remote_nonce = b"A", b"B"

        def derive(letter: bytes, length: int) -> bytes:
            return self._derive(letter[0], session_id, exchange_hash, length)

        sealing = cipher.make_sealing_cipher(
            derive(local_key, cipher.key_len), derive(local_nonce, cipher.nonce_len)
        )
        opening = cipher.make_opening_cipher(
            derive(remote_key, cipher.key_len), derive(remote_nonce, cipher.nonce_len)
        )
        return CipherPair(local_to_remote=sealing, remote_to_local=opening)