# sshwire

Building blocks for the SSH transport layer, written in plain Python on top
of `cryptography`:

- binary packet framing with sequence numbers, padding and tags
  (`sshwire.cipher.base`)
- the cleartext cipher used before the first key exchange
  (`sshwire.cipher.clear`)
- `chacha20-poly1305` and `aes256-gcm` packet ciphers
  (`sshwire.cipher.chacha20poly1305`, `sshwire.cipher.aes256gcm`)
- Curve25519 key exchange, exchange hash and key derivation (`sshwire.kex`)
- zlib packet compression (`sshwire.compression`)
- SSH wire encodings: `uint32`, `string`, `mpint` (`sshwire.encoding`) and
  public key blobs for Ed25519 and RSA keys (`sshwire.key`)
- authentication method sets and request state (`sshwire.auth`)
- message numbers (`sshwire.msg`), protocol value types such as `Limits`,
  `Disconnect`, `Sig`, `ChannelId` and the channel messages
  (`sshwire.types`), and a family of exceptions rooted at
  `sshwire.errors.SSHError`

## Installation

```
pip install sshwire
```

Python 3.10 or later is required.

## Framing packets

Every cipher is used through a `CipherPair`, which holds a sealing key for
outgoing packets and an opening key for incoming ones. Before keys are
exchanged, packets travel in clear:

```python
from sshwire.cipher.base import PacketBuffer
from sshwire.cipher.clear import clear_pair

pair = clear_pair()
outgoing = PacketBuffer()
pair.write(b"\x05\x00\x00\x00\x0cssh-userauth", outgoing)
```

`CipherPair.write` appends a complete packet (length, padding length,
payload, padding and tag) to `outgoing.buffer` and advances its 32-bit,
wrapping sequence number.

On the receiving side, `read_packet(stream, buffer, pair)` reads one packet
from an asyncio stream reader (anything with `readexactly`), checks and
decrypts it, strips the padding and returns the payload. A stream that ends
early raises `asyncio.IncompleteReadError`.

A packet whose tag does not verify raises `PacketAuthError` (ChaCha20-Poly1305)
or `DecryptionError` (AES-GCM).

## Key exchange

`KexAlgorithm.client_dh` and `KexAlgorithm.server_dh` perform the two halves
of a Curve25519 exchange and record the ephemeral keys in an `Exchange`.
The client calls `compute_shared_secret` with the server's ephemeral key.
Once both sides hold the shared secret, `compute_exchange_hash` produces the
SHA-256 exchange hash and `compute_keys` derives a `CipherPair` for the
negotiated cipher, looked up with `cipher_by_name` (`"chacha20-poly1305"` or
`"aes256-gcm"`; any other name raises `NoCommonCipherError`).

## Authentication methods

```python
from sshwire.auth import MethodSet

allowed = MethodSet.from_bytes(b"publickey")
print(allowed.wire_name())  # b'publickey'
```

`MethodSet` is a flag set; `methods()` yields its members one at a time in
protocol order. `from_bytes` returns `None` for an unknown method name.

## Compression

```python
from sshwire.compression import Compression

compression = Compression.from_string("zlib")
compressor = compression.compressor()
decompressor = compression.decompressor()
packet = compressor.compress(b"some payload")
assert decompressor.decompress(packet) == b"some payload"
```

Any name other than `zlib` selects no compression, and data passes through
unchanged. Corrupt compressed input raises `zlib.error`.

## Errors

All protocol failures raise a subclass of `sshwire.errors.SSHError`, such as
`InconsistentError`, `KexInitError`, `WrongChannelError` or
`KeyChangedError` (which carries the offending `line`).

## What this package does not do

It does not open sockets or run a session: there is no SSH client, server or
event loop, no parsing or writing of KEXINIT algorithm lists, no host key
signing or verification, and no handling of channel or authentication
messages. It provides the pieces such a loop is made of.

## Running the tests

```
pip install "sshwire[test]"
pytest
```