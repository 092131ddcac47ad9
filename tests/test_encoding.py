import pytest

from sshwire.encoding import mpint_len, ssh_mpint, ssh_string, u32


def _read_string(encoded):
    length = int.from_bytes(encoded[:4], "big")
    return encoded[4 : 4 + length], encoded[4 + length :]


def test_u32_big_endian():
    assert u32(1) == b"\x00\x00\x00\x01"
    assert int.from_bytes(u32(0xDEADBEEF), "big") == 0xDEADBEEF


@pytest.mark.parametrize("value", [-1, 1 << 32])
def test_u32_out_of_range(value):
    with pytest.raises(ValueError):
        u32(value)


@pytest.mark.parametrize("data", [b"", b"abc", b"ssh-userauth", bytes(range(256))])
def test_ssh_string_round_trip(data):
    payload, rest = _read_string(ssh_string(data))
    assert payload == data
    assert rest == b""


def test_ssh_string_accepts_text():
    assert ssh_string("ssh-connection") == ssh_string(b"ssh-connection")


def test_mpint_zero():
    assert ssh_mpint(b"") == b"\x00\x00\x00\x00"
    assert ssh_mpint(b"\x00\x00") == ssh_mpint(b"")


def test_mpint_high_bit_gets_sign_byte():
    assert ssh_mpint(b"\x80") == b"\x00\x00\x00\x02\x00\x80"


@pytest.mark.parametrize(
    "data",
    [b"\x01", b"\x7f", b"\x80", b"\x00\x00\xff\x10", b"\x09\xa3\x78\xf9\xb2\xe3\x32\xa7", bytes(32)],
)
def test_mpint_value_round_trip(data):
    encoded = ssh_mpint(data)
    payload, rest = _read_string(encoded)
    assert rest == b""
    assert int.from_bytes(payload, "big", signed=True) == int.from_bytes(data, "big")
    # Canonical form: no redundant leading zero.
    if len(payload) > 1:
        assert not (payload[0] == 0 and payload[1] < 0x80)


@pytest.mark.parametrize("data", [b"", b"\x00", b"\x01", b"\x80", b"\x00\xff\xff", b"\x12\x34"])
def test_mpint_len_matches_encoding(data):
    assert mpint_len(data) == len(ssh_mpint(data))