import json
import os
import stat
import sys

import pytest

from seedvault.errors import RecordFormatError, StoreError
from seedvault.record import EncryptedRecord
from seedvault.storage import JsonFileStore, RecordStore


def make_record(salt="11"):
    return EncryptedRecord(salt=salt * 16, iv="22" * 12, encrypted="33" * 20)


def test_record_store_is_an_interface():
    store = RecordStore()
    with pytest.raises(NotImplementedError):
        store.put(make_record())
    with pytest.raises(NotImplementedError):
        store.get("mnemonic")


def test_memory_store_round_trip(memory_store):
    assert memory_store.get("mnemonic") is None
    memory_store.put(make_record())
    assert memory_store.get("mnemonic") == make_record()


def test_memory_store_overwrites(memory_store):
    memory_store.put(make_record("11"))
    memory_store.put(make_record("44"))
    assert memory_store.get("mnemonic").salt == "44" * 16


def test_file_store_missing_file_is_empty(file_store):
    assert file_store.get("mnemonic") is None


def test_file_store_persists_across_instances(file_store):
    file_store.put(make_record())
    assert JsonFileStore(file_store.filepath).get("mnemonic") == make_record()


def test_file_store_layout(file_store):
    file_store.put(make_record())
    with open(file_store.filepath, encoding="utf-8") as f:
        document = json.load(f)
    assert document == {"records": {"mnemonic": make_record().to_dict()}}
    assert not os.path.exists(file_store.filepath + ".tmp")


def test_file_store_overwrites_record_wholesale(file_store):
    file_store.put(make_record("11"))
    file_store.put(make_record("44"))
    assert file_store.get("mnemonic") == make_record("44")


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permissions")
def test_file_store_is_owner_only(file_store):
    file_store.put(make_record())
    mode = stat.S_IMODE(os.stat(file_store.filepath).st_mode)
    assert mode == 0o600


@pytest.mark.parametrize("content", ["{not json", "[]", '{"records": []}'])
def test_file_store_malformed_file_raises_store_error(file_store, content):
    os.makedirs(os.path.dirname(file_store.filepath), exist_ok=True)
    with open(file_store.filepath, "w", encoding="utf-8") as f:
        f.write(content)
    with pytest.raises(StoreError):
        file_store.get("mnemonic")


def test_file_store_malformed_record_raises_format_error(file_store):
    os.makedirs(os.path.dirname(file_store.filepath), exist_ok=True)
    with open(file_store.filepath, "w", encoding="utf-8") as f:
        json.dump({"records": {"mnemonic": {"salt": 5}}}, f)
    with pytest.raises(RecordFormatError):
        file_store.get("mnemonic")


def test_file_store_write_failure_raises_store_error(file_store, monkeypatch):
    def failing_move(src, dst):
        raise PermissionError("read-only")

    monkeypatch.setattr("seedvault.storage.shutil.move", failing_move)
    with pytest.raises(StoreError):
        file_store.put(make_record())
    assert not os.path.exists(file_store.filepath + ".tmp")
    assert not os.path.exists(file_store.filepath)


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permissions")
def test_file_store_temp_file_is_owner_only_before_replace(file_store, monkeypatch):
    import shutil

    real_move = shutil.move
    seen = []

    def checking_move(src, dst):
        seen.append(stat.S_IMODE(os.stat(src).st_mode))
        return real_move(src, dst)

    monkeypatch.setattr("seedvault.storage.shutil.move", checking_move)
    old_umask = os.umask(0o022)
    try:
        file_store.put(make_record())
    finally:
        os.umask(old_umask)
    assert seen == [0o600]
