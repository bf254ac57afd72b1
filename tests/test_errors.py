import pytest

from cryptoprims.errors import (
    CryptoError,
    IncorrectInputLength,
    NotPrimeOrder,
    SerializationError,
    to_uncompressed_bytes,
)


class _SelfSerializing:
    def to_uncompressed_bytes(self):
        return b"xy"


class _BadSerializing:
    def to_uncompressed_bytes(self):
        return "not bytes"


def test_incorrect_input_length_message_and_attribute():
    err = IncorrectInputLength(5)
    assert str(err) == "incorrect input length: 5"
    assert err.length == 5


def test_incorrect_input_length_is_crypto_error():
    err = IncorrectInputLength(12)
    assert isinstance(err, CryptoError)
    assert err.length == 12
    assert str(err) == "incorrect input length: 12"


def test_not_prime_order_message():
    assert str(NotPrimeOrder()) == "element is not prime order"


def test_serialization_error_is_crypto_error():
    err = SerializationError("broken")
    assert isinstance(err, CryptoError)
    assert "broken" in str(err)


def test_bad_serializer_error_caught_as_crypto_error():
    with pytest.raises(CryptoError) as info:
        to_uncompressed_bytes(_BadSerializing())
    assert info.type is SerializationError


def test_object_serializes_itself():
    assert to_uncompressed_bytes(_SelfSerializing()) == b"xy"


def test_bad_self_serializer_raises():
    with pytest.raises(SerializationError):
        to_uncompressed_bytes(_BadSerializing())


def test_bytes_are_length_prefixed():
    out = to_uncompressed_bytes(b"abc")
    assert len(out) == 8 + 3
    assert int.from_bytes(out[:8], "little") == 3
    assert out[8:] == b"abc"


def test_empty_bytes_have_zero_length_prefix():
    out = to_uncompressed_bytes(b"")
    assert len(out) == 8
    assert int.from_bytes(out, "little") == 0


def test_bool_serialization():
    assert to_uncompressed_bytes(True) == b"\x01"
    assert to_uncompressed_bytes(False) == b"\x00"


def test_sequence_serialization_concatenates_items():
    out = to_uncompressed_bytes([_SelfSerializing(), _SelfSerializing()])
    assert int.from_bytes(out[:8], "little") == 2
    assert out[8:] == b"xyxy"


def test_unsupported_value_raises():
    with pytest.raises(SerializationError):
        to_uncompressed_bytes(3.5)


def test_plain_int_is_not_serializable():
    with pytest.raises(SerializationError):
        to_uncompressed_bytes(7)