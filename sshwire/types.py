"""Core value types shared by the client and server sides of the protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

_REKEY_MAX_BYTES = 1 << 30


@dataclass
class Limits:
    """Bytes read/written and seconds elapsed before keys are re-exchanged."""

    rekey_write_limit: int = _REKEY_MAX_BYTES
    rekey_read_limit: int = _REKEY_MAX_BYTES
    rekey_time_limit: float = 3600.0

    def __post_init__(self) -> None:
        # Larger limits could lead to nonce reuse with the AEAD ciphers.
        for name in ("rekey_write_limit", "rekey_read_limit"):
            value = getattr(self, name)
            if not 0 <= value <= _REKEY_MAX_BYTES:
                raise ValueError(
                    f"{name} must be between 0 and {_REKEY_MAX_BYTES}, got {value}"
                )


class Disconnect(IntEnum):
    """Reason codes for SSH_MSG_DISCONNECT."""

    HOST_NOT_ALLOWED_TO_CONNECT = 1
    PROTOCOL_ERROR = 2
    KEY_EXCHANGE_FAILED = 3
    RESERVED = 4
    MAC_ERROR = 5
    COMPRESSION_ERROR = 6
    SERVICE_NOT_AVAILABLE = 7
    PROTOCOL_VERSION_NOT_SUPPORTED = 8
    HOST_KEY_NOT_VERIFIABLE = 9
    CONNECTION_LOST = 10
    BY_APPLICATION = 11
    TOO_MANY_CONNECTIONS = 12
    AUTH_CANCELLED_BY_USER = 13
    NO_MORE_AUTH_METHODS_AVAILABLE = 14
    ILLEGAL_USER_NAME = 15


_STANDARD_SIGNALS = (
    "ABRT",
    "ALRM",
    "FPE",
    "HUP",
    "ILL",
    "INT",
    "KILL",
    "PIPE",
    "QUIT",
    "SEGV",
    "TERM",
    "USR1",
)


@dataclass(frozen=True)
class Sig:
    """A signal that can be delivered to a remote process.

    The standard signals are available as class attributes (``Sig.KILL``);
    any other name is a custom signal.
    """

    name: str

    @property
    def is_custom(self) -> bool:
        return self.name not in _STANDARD_SIGNALS

    @classmethod
    def from_name(cls, name: bytes | str) -> Sig:
        """Build a signal from its wire name; raises UnicodeDecodeError on bad UTF-8."""
        if isinstance(name, (bytes, bytearray, memoryview)):
            name = bytes(name).decode("utf-8")
        return cls(name)

    def __str__(self) -> str:
        return self.name


for _signal_name in _STANDARD_SIGNALS:
    setattr(Sig, _signal_name, Sig(_signal_name))
del _signal_name


class ChannelOpenFailure(IntEnum):
    """Reason for not being able to open a channel."""

    UNKNOWN = 0
    ADMINISTRATIVELY_PROHIBITED = 1
    CONNECT_FAILED = 2
    UNKNOWN_CHANNEL_TYPE = 3
    RESOURCE_SHORTAGE = 4

    @classmethod
    def from_code(cls, code: int) -> ChannelOpenFailure | None:
        """Map a wire reason code to a member, or None if it is not a known reason."""
        if code in (1, 2, 3, 4):
            return cls(code)
        return None


@dataclass(frozen=True, order=True)
class ChannelId:
    """The identifier of a channel."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ChannelData:
    data: bytes


@dataclass(frozen=True)
class ChannelExtendedData:
    data: bytes
    ext: int


@dataclass(frozen=True)
class ChannelEof:
    pass


@dataclass(frozen=True)
class ChannelClose:
    pass


@dataclass(frozen=True)
class XonXoff:
    client_can_do: bool


@dataclass(frozen=True)
class ExitStatus:
    exit_status: int


@dataclass(frozen=True)
class ExitSignal:
    signal_name: Sig
    core_dumped: bool
    error_message: str
    lang_tag: str


@dataclass(frozen=True)
class WindowAdjusted:
    new_size: int


@dataclass(frozen=True)
class ChannelSuccess:
    pass


ChannelMsg = Union[
    ChannelData,
    ChannelExtendedData,
    ChannelEof,
    ChannelClose,
    XonXoff,
    ExitStatus,
    ExitSignal,
    WindowAdjusted,
    ChannelSuccess,
]