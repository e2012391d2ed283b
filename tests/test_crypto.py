import pytest
from cryptography.exceptions import InvalidTag

from seedvault.crypto import CryptoManager
from seedvault.errors import RecordFormatError


@pytest.fixture
def crypto():
    return CryptoManager()


def test_random_sizes(crypto):
    assert len(crypto.generate_salt()) == 16
    assert len(crypto.generate_nonce()) == 12
    assert crypto.generate_salt() != crypto.generate_salt()


def test_derive_key_is_deterministic_and_256_bit(crypto):
    salt = b"\x01" * 16
    first = crypto.derive_key(b"pw", salt, 1000, "sha256")
    second = crypto.derive_key(bytearray(b"pw"), salt, 1000, "sha256")
    assert len(first) == 32
    assert first == second
    assert crypto.derive_key(b"pw", salt, 1001, "sha256") != first
    assert crypto.derive_key(b"pw", salt, 1000, "sha512") != first


def test_derive_key_matches_pbkdf2_reference(crypto):
    import hashlib

    expected = hashlib.pbkdf2_hmac("sha256", b"password", b"salt" * 4, 200000, 32)
    assert bytes(crypto.derive_key(b"password", b"salt" * 4)) == expected


@pytest.mark.parametrize("iterations", [0, -5, "1000", True, 10_000_001, 2**40, 10**30])
def test_derive_key_rejects_bad_iterations(crypto, iterations):
    with pytest.raises(RecordFormatError):
        crypto.derive_key(b"pw", b"\x00" * 16, iterations, "sha256")


@pytest.mark.parametrize("hash_name", ["md5", ["sha256"], {"sha256": 1}, None])
def test_derive_key_rejects_unknown_hash(crypto, hash_name):
    with pytest.raises(RecordFormatError):
        crypto.derive_key(b"pw", b"\x00" * 16, 1000, hash_name)


def test_encrypt_appends_tag(crypto):
    key = b"\x02" * 32
    nonce = b"\x03" * 12
    data = crypto.encrypt(b"hello", key, nonce)
    assert len(data) == len(b"hello") + 16
    assert crypto.decrypt(data, key, nonce) == b"hello"


def test_decrypt_rejects_wrong_key_and_short_input(crypto):
    nonce = b"\x03" * 12
    data = crypto.encrypt(b"hello", b"\x02" * 32, nonce)
    with pytest.raises(InvalidTag):
        crypto.decrypt(data, b"\x04" * 32, nonce)
    with pytest.raises(InvalidTag):
        crypto.decrypt(data[:10], b"\x02" * 32, nonce)


def test_hex_codec(crypto):
    assert crypto.to_hex(b"\x00\xab\xff") == "00abff"
    assert crypto.from_hex("00abff") == b"\x00\xab\xff"
    assert crypto.from_hex("") == b""


@pytest.mark.parametrize("value", ["abc", "zz", "00 ff", "0x00", None])
def test_from_hex_rejects_malformed(crypto, value):
    with pytest.raises(RecordFormatError):
        crypto.from_hex(value)


def test_clear_bytes(crypto):
    buf = bytearray(b"secret")
    crypto.clear_bytes(buf)
    assert buf == bytearray(6)
