import pytest

from sshwire.cipher.base import PacketBuffer
from sshwire.cipher.clear import ClearKey, clear_pair
from sshwire.msg import NEWKEYS


def test_padding_aligns_packets():
    key = ClearKey()
    for payload_len in range(0, 64):
        padding = key.padding_length(bytes(payload_len))
        assert 4 <= padding < 12
        assert (5 + payload_len + padding) % 8 == 0


def test_fill_padding_is_zeros():
    assert ClearKey().fill_padding(7) == bytes(7)
    assert ClearKey().fill_padding(0) == b""


def test_no_tag():
    key = ClearKey()
    assert key.tag_len() == 0
    assert key.seal(0, b"\x00\x00\x00\x05\x04abcd") == (b"\x00\x00\x00\x05\x04abcd", b"")


def test_length_is_not_encrypted():
    assert ClearKey().decrypt_packet_length(3, b"\x00\x00\x01\x00") == b"\x00\x00\x01\x00"


def test_open_strips_length():
    assert ClearKey().open(0, b"\x00\x00\x00\x02\x01z\x00", b"") == b"\x01z\x00"


def test_open_rejects_tag():
    with pytest.raises(ValueError):
        ClearKey().open(0, b"\x00\x00\x00\x01\x00", b"x")


def test_newkeys_wire_bytes():
    out = PacketBuffer()
    clear_pair().write(bytes([NEWKEYS]), out)
    assert bytes(out.buffer) == b"\x00\x00\x00\x0c\x0a\x15" + bytes(10)
    assert len(out.buffer) % 8 == 0
    assert out.seqn == 1