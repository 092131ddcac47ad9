"""Authentication methods and the state of an authentication exchange."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Protocol, Union, runtime_checkable


class MethodSet(enum.IntFlag):
    """A set of SSH authentication methods, as bit flags."""

    NONE = 1
    PASSWORD = 2
    PUBLICKEY = 4
    HOSTBASED = 8
    KEYBOARD_INTERACTIVE = 16

    def wire_name(self) -> bytes:
        """The method's name on the wire; empty for sets that are not one method."""
        return _WIRE_NAMES.get(int(self), b"")

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional[MethodSet]:
        """Parse one method name, or return None if it is not a known method."""
        value = _BY_NAME.get(bytes(data))
        return None if value is None else cls(value)

    def methods(self) -> Iterator[MethodSet]:
        """Yield the single methods contained in this set, in protocol order."""
        for method in _ORDER:
            if method in self:
                yield method


_ORDER = (
    MethodSet.NONE,
    MethodSet.PASSWORD,
    MethodSet.PUBLICKEY,
    MethodSet.HOSTBASED,
    MethodSet.KEYBOARD_INTERACTIVE,
)

_WIRE_NAMES = {
    int(MethodSet.NONE): b"none",
    int(MethodSet.PASSWORD): b"password",
    int(MethodSet.PUBLICKEY): b"publickey",
    int(MethodSet.HOSTBASED): b"hostbased",
    int(MethodSet.KEYBOARD_INTERACTIVE): b"keyboard-interactive",
}

_BY_NAME = {name: value for value, name in _WIRE_NAMES.items()}


@runtime_checkable
class Signer(Protocol):
    """Something able to sign an authentication challenge, such as an agent."""

    async def auth_publickey_sign(self, key: Any, to_sign: bytes) -> bytes:
        """Return ``to_sign`` with the SSH signature made with ``key`` appended."""


@dataclass
class PasswordMethod:
    """Authenticate with a plaintext password."""

    password: str = field(repr=False)


@dataclass
class PublicKeyMethod:
    """Authenticate with a private key held locally."""

    key: Any


@dataclass
class FuturePublicKeyMethod:
    """Authenticate with a public key whose signature comes from a Signer."""

    key: Any


Method = Union[PasswordMethod, PublicKeyMethod, FuturePublicKeyMethod]


@dataclass
class PublicKeyRequest:
    """A public key authentication attempt in progress."""

    key: bytes
    algo: bytes
    sent_pk_ok: bool = False


@dataclass
class KeyboardInteractiveRequest:
    """A keyboard-interactive authentication attempt in progress."""

    submethods: str


CurrentRequest = Union[PublicKeyRequest, KeyboardInteractiveRequest]


@dataclass
class AuthRequest:
    """The state of an authentication exchange."""

    methods: MethodSet
    partial_success: bool = False
    current: Optional[CurrentRequest] = None
    rejection_count: int = 0