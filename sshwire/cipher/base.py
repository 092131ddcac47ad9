"""Binary packet framing (RFC 4253, section 6) over pluggable ciphers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol, Tuple

from ..encoding import u32
from ..errors import IndexOutOfBoundsError

PACKET_LENGTH_LEN = 4
MINIMUM_PACKET_LEN = 16
PADDING_LENGTH_LEN = 1

_SEQN_MASK = 0xFFFFFFFF


class OpeningKey(Protocol):
    """Decrypts and authenticates incoming packets."""

    def decrypt_packet_length(self, seqn: int, encrypted_length: bytes) -> bytes:
        """Return the four clear bytes of the packet length."""

    def tag_len(self) -> int:
        """Length of the authentication tag following each packet."""

    def open(self, seqn: int, ciphertext: bytes, tag: bytes) -> bytes:
        """Check and decrypt a packet given with its length prefix.

        Returns the padding-length byte, the payload and the padding.
        """


class SealingKey(Protocol):
    """Encrypts and authenticates outgoing packets."""

    def padding_length(self, payload: bytes) -> int:
        """Number of padding bytes to add after ``payload``."""

    def fill_padding(self, length: int) -> bytes:
        """Padding bytes of the given length."""

    def tag_len(self) -> int:
        """Length of the authentication tag following each packet."""

    def seal(self, seqn: int, plaintext: bytes) -> Tuple[bytes, bytes]:
        """Encrypt a whole packet, length prefix included; return (ciphertext, tag)."""


@dataclass(frozen=True)
class Cipher:
    """A negotiable cipher and how to build its keys."""

    name: str
    key_len: int
    nonce_len: int
    make_opening_cipher: Callable[[bytes, bytes], OpeningKey]
    make_sealing_cipher: Callable[[bytes, bytes], SealingKey]


@dataclass
class PacketBuffer:
    """Bytes on their way to or from the wire, with the packet sequence number."""

    buffer: bytearray = field(default_factory=bytearray)
    seqn: int = 0
    pending_len: int = 0
    byte_count: int = 0


@dataclass
class CipherPair:
    """The keys for both directions of a connection."""

    local_to_remote: SealingKey
    remote_to_local: OpeningKey

    def write(self, payload: bytes, buffer: PacketBuffer) -> None:
        """Frame, pad, seal and append ``payload`` to ``buffer``."""
        key = self.local_to_remote
        payload = bytes(payload)
        padding_length = key.padding_length(payload)
        packet_length = PADDING_LENGTH_LEN + len(payload) + padding_length
        if packet_length > _SEQN_MASK:
            raise ValueError(f"packet too long: {packet_length} bytes")
        if padding_length > 0xFF:
            raise ValueError(f"padding too long: {padding_length} bytes")
        plaintext = (
            u32(packet_length)
            + bytes([padding_length])
            + payload
            + key.fill_padding(padding_length)
        )
        ciphertext, tag = key.seal(buffer.seqn, plaintext)
        buffer.buffer += ciphertext
        buffer.buffer += tag
        buffer.byte_count += len(payload)
        # Sequence numbers are 32 bits and wrap around.
        buffer.seqn = (buffer.seqn + 1) & _SEQN_MASK


def aead_padding_length(payload_len: int, block_size: int) -> int:
    """Padding for AEAD ciphers, keeping packets at least the minimum length."""
    extra_len = PACKET_LENGTH_LEN + PADDING_LENGTH_LEN
    if payload_len + extra_len <= MINIMUM_PACKET_LEN:
        padding_len = MINIMUM_PACKET_LEN - payload_len - PADDING_LENGTH_LEN
    else:
        padding_len = block_size - ((PADDING_LENGTH_LEN + payload_len) % block_size)
    if padding_len < PACKET_LENGTH_LEN:
        padding_len += block_size
    return padding_len


async def read_packet(stream, buffer: PacketBuffer, pair: CipherPair) -> bytes:
    """Read one packet from an asyncio stream reader and return its payload.

    If the read is interrupted after the length was read, calling again resumes
    with the body. Raises asyncio.IncompleteReadError if the stream ends early.
    """
    key = pair.remote_to_local
    tag_len = key.tag_len()
    if buffer.pending_len == 0:
        encrypted_length = await stream.readexactly(PACKET_LENGTH_LEN)
        clear_length = key.decrypt_packet_length(buffer.seqn, encrypted_length)
        buffer.buffer = bytearray(encrypted_length)
        buffer.pending_len = int.from_bytes(clear_length, "big") + tag_len
    body = await stream.readexactly(buffer.pending_len)
    packet = bytes(buffer.buffer[:PACKET_LENGTH_LEN]) + body
    split = len(packet) - tag_len
    plaintext = key.open(buffer.seqn, packet[:split], packet[split:])

    padding_length = plaintext[0] if plaintext else 0
    end = len(plaintext) - padding_length
    if end < 0:
        raise IndexOutOfBoundsError()

    buffer.seqn = (buffer.seqn + 1) & _SEQN_MASK
    buffer.pending_len = 0
    buffer.buffer = bytearray(packet[:PACKET_LENGTH_LEN] + plaintext[:end])
    return bytes(plaintext[PADDING_LENGTH_LEN:end])