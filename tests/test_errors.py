import pytest

from sshwire import errors


@pytest.mark.parametrize(
    ("cls", "text"),
    [
        (errors.CouldNotReadKeyError, "Could not read key"),
        (errors.KexInitError, "Key exchange init failed"),
        (errors.NoCommonKexAlgoError, "No common key exchange algorithm"),
        (errors.NoCommonKeyAlgoError, "No common key algorithm"),
        (errors.NoCommonCipherError, "No common key cipher"),
        (errors.NoCommonCompressionError, "No common compression algorithm"),
        (errors.VersionError, "invalid SSH version string"),
        (errors.KexError, "Key exchange failed"),
        (errors.PacketAuthError, "Wrong packet authentication code"),
        (errors.InconsistentError, "Inconsistent state of the protocol"),
        (errors.NotAuthenticatedError, "Not yet authenticated"),
        (errors.IndexOutOfBoundsError, "Index out of bounds"),
        (errors.UnknownKeyError, "Unknown server key"),
        (errors.WrongServerSigError, "Wrong server signature"),
        (errors.WrongChannelError, "Channel not open"),
        (errors.DisconnectError, "Disconnected"),
        (errors.NoHomeDirError, "No home directory when saving host key"),
        (errors.ConnectionClosedError, "Connection closed by the remote side"),
        (errors.ConnectionTimeoutError, "Connection timeout"),
        (errors.NoAuthMethodError, "No authentication method"),
        (errors.ChannelSendError, "Channel send error"),
        (errors.PendingError, "Pending buffer limit reached"),
        (errors.DecryptionError, "Failed to decrypt a packet"),
    ],
)
def test_default_messages(cls, text):
    err = cls()
    assert str(err) == text
    assert isinstance(err, errors.SSHError)
    assert type(err) is cls


def test_custom_message_overrides_default():
    err = errors.InconsistentError("unexpected packet 42")
    assert str(err) == "unexpected packet 42"


def test_key_changed_carries_line():
    err = errors.KeyChangedError(7)
    assert err.line == 7
    assert str(err) == "Key changed, line 7"


def test_key_changed_caught_as_base():
    err = errors.KeyChangedError(12)
    assert isinstance(err, errors.SSHError)
    assert err.line == 12
    assert str(err) == "Key changed, line 12"


def test_timeout_is_builtin_timeout():
    err = errors.ConnectionTimeoutError()
    assert isinstance(err, TimeoutError)
    assert str(err) == "Connection timeout"


def test_closed_is_builtin_connection_error():
    err = errors.ConnectionClosedError()
    assert isinstance(err, ConnectionError)
    assert str(err) == "Connection closed by the remote side"


def test_index_out_of_bounds_is_index_error():
    err = errors.IndexOutOfBoundsError()
    assert isinstance(err, IndexError)
    assert str(err) == "Index out of bounds"


def test_distinct_errors_not_confused():
    err = errors.PacketAuthError()
    assert not isinstance(err, errors.DecryptionError)
    assert not isinstance(errors.DecryptionError(), errors.PacketAuthError)
    assert str(err) == "Wrong packet authentication code"