import base64

import pytest
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from sshwire.key import push_public_key, public_key_blob


def _openssh_blob(public_key):
    line = public_key.public_bytes(Encoding.OpenSSH, PublicFormat.OpenSSH)
    return base64.b64decode(line.split()[1])


@pytest.fixture(scope="module")
def ed_key():
    return ed25519.Ed25519PrivateKey.generate()


@pytest.fixture(scope="module")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


def test_ed25519_blob_matches_openssh(ed_key):
    assert public_key_blob(ed_key.public_key()) == _openssh_blob(ed_key.public_key())


def test_ed25519_private_and_public_agree(ed_key):
    assert public_key_blob(ed_key) == public_key_blob(ed_key.public_key())


def test_ed25519_blob_layout(ed_key):
    blob = public_key_blob(ed_key)
    assert blob.startswith(b"\x00\x00\x00\x0bssh-ed25519")
    assert len(blob) == len("ssh-ed25519") + 32 + 8


def test_rsa_blob_matches_openssh(rsa_key):
    assert public_key_blob(rsa_key.public_key()) == _openssh_blob(rsa_key.public_key())
    assert public_key_blob(rsa_key) == public_key_blob(rsa_key.public_key())


def test_push_public_key_appends_length_prefixed(ed_key):
    buffer = bytearray(b"prefix")
    push_public_key(ed_key, buffer)
    blob = public_key_blob(ed_key)
    assert bytes(buffer[:6]) == b"prefix"
    assert int.from_bytes(buffer[6:10], "big") == len(blob)
    assert bytes(buffer[10:]) == blob


def test_push_rsa_public_key(rsa_key):
    buffer = bytearray()
    push_public_key(rsa_key.public_key(), buffer)
    assert bytes(buffer[4:]) == _openssh_blob(rsa_key.public_key())


def test_unsupported_key_type():
    ec_key = ec.generate_private_key(ec.SECP256R1())
    with pytest.raises(TypeError):
        public_key_blob(ec_key)
    with pytest.raises(TypeError):
        push_public_key("not a key", bytearray())