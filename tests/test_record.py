import pytest

from seedvault.errors import DecryptionError, RecordFormatError
from seedvault.record import EncryptedRecord


def make_record(**overrides):
    fields = dict(salt="11" * 16, iv="22" * 12, encrypted="33" * 20)
    fields.update(overrides)
    return EncryptedRecord(**fields)


def test_to_dict_layout():
    assert make_record().to_dict() == {
        "id": "mnemonic",
        "salt": "11" * 16,
        "iv": "22" * 12,
        "encrypted": "33" * 20,
        "iterations": 200000,
        "hash": "sha256",
    }


def test_from_dict_fills_kdf_defaults_for_legacy_records():
    record = EncryptedRecord.from_dict({"id": "mnemonic", "salt": "aa" * 16, "iv": "bb" * 12, "encrypted": "cc" * 17})
    assert record.iterations == 200000
    assert record.hash == "sha256"


def test_from_dict_keeps_stored_kdf_parameters():
    data = make_record(iterations=5000, hash="sha512").to_dict()
    assert EncryptedRecord.from_dict(data) == make_record(iterations=5000, hash="sha512")


def test_from_bytes_uses_lowercase_hex():
    record = EncryptedRecord.from_bytes(b"\xab" * 16, b"\xcd" * 12, b"\xef" * 16)
    assert record.salt == "ab" * 16
    assert record.iv == "cd" * 12
    assert record.encrypted == "ef" * 16


@pytest.mark.parametrize("data", [
    None,
    [],
    {"salt": "aa" * 16, "iv": "bb" * 12},
    {"salt": "aa" * 16, "iv": 12, "encrypted": "cc" * 17},
])
def test_from_dict_rejects_malformed(data):
    with pytest.raises(RecordFormatError):
        EncryptedRecord.from_dict(data)


def test_decode():
    salt, iv, encrypted = make_record().decode()
    assert salt == b"\x11" * 16
    assert iv == b"\x22" * 12
    assert encrypted == b"\x33" * 20


@pytest.mark.parametrize("overrides", [
    {"salt": ""},
    {"salt": "11" * 15},
    {"salt": "11" * 32},
    {"iv": "22" * 11},
    {"encrypted": "33" * 15},
    {"salt": "not hex"},
])
def test_decode_rejects_bad_fields(overrides):
    with pytest.raises(RecordFormatError) as excinfo:
        make_record(**overrides).decode()
    assert isinstance(excinfo.value, DecryptionError)
    assert str(excinfo.value) == "Failed to load: incorrect password or corrupted data."
