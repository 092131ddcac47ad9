"""SSH encodings of public keys."""

from __future__ import annotations

from cryptography.hazmat.primitives.asymmetric import ed25519, rsa
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from .encoding import ssh_mpint, ssh_string

ED25519 = b"ssh-ed25519"
SSH_RSA = b"ssh-rsa"


def _int_bytes(value: int) -> bytes:
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def public_key_blob(key) -> bytes:
    """The SSH public key blob of an Ed25519 or RSA key (public or private)."""
    if isinstance(key, (ed25519.Ed25519PrivateKey, rsa.RSAPrivateKey)):
        key = key.public_key()
    if isinstance(key, ed25519.Ed25519PublicKey):
        raw = key.public_bytes(Encoding.Raw, PublicFormat.Raw)
        return ssh_string(ED25519) + ssh_string(raw)
    if isinstance(key, rsa.RSAPublicKey):
        numbers = key.public_numbers()
        return (
            ssh_string(SSH_RSA)
            + ssh_mpint(_int_bytes(numbers.e))
            + ssh_mpint(_int_bytes(numbers.n))
        )
    raise TypeError(f"unsupported key type: {type(key).__name__}")


def push_public_key(key, buffer: bytearray) -> None:
    """Append the key blob to ``buffer`` as a length-prefixed SSH string."""
    buffer.extend(ssh_string(public_key_blob(key)))