"""Exceptions raised by the SSH protocol layer."""

from __future__ import annotations


class SSHError(Exception):
    """Base class for every protocol error."""

    message = "SSH protocol error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)


class CouldNotReadKeyError(SSHError):
    """The key file could not be parsed."""

    message = "Could not read key"


class KexInitError(SSHError):
    """Unspecified problem with the beginning of key exchange."""

    message = "Key exchange init failed"


class NoCommonKexAlgoError(SSHError):
    """No common key exchange algorithm."""

    message = "No common key exchange algorithm"


class NoCommonKeyAlgoError(SSHError):
    """No common signature algorithm."""

    message = "No common key algorithm"


class NoCommonCipherError(SSHError):
    """No common cipher."""

    message = "No common key cipher"


class NoCommonCompressionError(SSHError):
    """No common compression algorithm."""

    message = "No common compression algorithm"


class VersionError(SSHError):
    """Invalid SSH version string."""

    message = "invalid SSH version string"


class KexError(SSHError):
    """Error during key exchange."""

    message = "Key exchange failed"


class PacketAuthError(SSHError):
    """Invalid packet authentication code."""

    message = "Wrong packet authentication code"


class InconsistentError(SSHError):
    """The protocol is in an inconsistent state."""

    message = "Inconsistent state of the protocol"


class NotAuthenticatedError(SSHError):
    """The client is not yet authenticated."""

    message = "Not yet authenticated"


class IndexOutOfBoundsError(SSHError, IndexError):
    """A length or offset in a packet is out of bounds."""

    message = "Index out of bounds"


class UnknownKeyError(SSHError):
    """The server key was not accepted."""

    message = "Unknown server key"


class WrongServerSigError(SSHError):
    """The server provided a wrong signature."""

    message = "Wrong server signature"


class WrongChannelError(SSHError):
    """A message was received or sent on an unopened channel."""

    message = "Channel not open"


class DisconnectError(SSHError):
    """The session is disconnected."""

    message = "Disconnected"


class NoHomeDirError(SSHError):
    """No home directory was found when saving a host key."""

    message = "No home directory when saving host key"


class KeyChangedError(SSHError):
    """The remote host key changed; a man-in-the-middle attack is possible."""

    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__(f"Key changed, line {line}")


class ConnectionClosedError(SSHError, ConnectionError):
    """The connection was closed by the remote side."""

    message = "Connection closed by the remote side"


class ConnectionTimeoutError(SSHError, TimeoutError):
    """The connection timed out."""

    message = "Connection timeout"


class NoAuthMethodError(SSHError):
    """No authentication method is left to try."""

    message = "No authentication method"


class ChannelSendError(SSHError):
    """A message could not be handed to the event loop."""

    message = "Channel send error"


class PendingError(SSHError):
    """Too much data is waiting while keys are being exchanged."""

    message = "Pending buffer limit reached"


class DecryptionError(SSHError):
    """A packet could not be decrypted."""

    message = "Failed to decrypt a packet"