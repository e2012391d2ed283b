"""
Local record storage for SeedVault.

A store keeps records by id. The vault only ever uses one id, and every save
replaces that record wholesale.
"""

import os
import json
import stat
import shutil
import platform
import threading
import logging
from typing import Dict, Optional

from .errors import StoreError
from .record import EncryptedRecord

logger = logging.getLogger(__name__)


class RecordStore:
    """Interface of a key-value store for encrypted records."""

    def put(self, record: EncryptedRecord) -> None:
        """Store a record under record.id, replacing any previous one."""
        raise NotImplementedError

    def get(self, record_id: str) -> Optional[EncryptedRecord]:
        """Return the record stored under record_id, or None."""
        raise NotImplementedError


class MemoryStore(RecordStore):
    """Keeps records in a dict. Nothing survives the process."""

    def __init__(self):
        self._records: Dict[str, dict] = {}
        self._lock = threading.Lock()

    def put(self, record: EncryptedRecord) -> None:
        with self._lock:
            self._records[record.id] = record.to_dict()

    def get(self, record_id: str) -> Optional[EncryptedRecord]:
        with self._lock:
            data = self._records.get(record_id)
        if data is None:
            return None
        return EncryptedRecord.from_dict(data)


class JsonFileStore(RecordStore):
    """
    Stores records in a single JSON file.

    File layout: {"records": {"<id>": {...record fields...}}}
    """

    def __init__(self, filepath: str):
        """
        Initialize the file store.
        Args:
            filepath: Path to the JSON store file. Parent directories are created on first write.
        """
        self.filepath = filepath
        self._lock = threading.Lock()

    def put(self, record: EncryptedRecord) -> None:
        with self._lock:
            records = self._read_all()
            records[record.id] = record.to_dict()
            self._write_all(records)
        logger.info(f"Stored record '{record.id}' in {self.filepath}")

    def get(self, record_id: str) -> Optional[EncryptedRecord]:
        with self._lock:
            data = self._read_all().get(record_id)
        if data is None:
            logger.info(f"No record '{record_id}' in {self.filepath}")
            return None
        return EncryptedRecord.from_dict(data)

    def _read_all(self) -> Dict[str, dict]:
        """Read every record dict from disk. A missing file is an empty store."""
        if not os.path.exists(self.filepath):
            return {}
        try:
            with open(self.filepath, 'r', encoding='utf-8') as f:
                document = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading store file {self.filepath}: {e}", exc_info=True)
            raise StoreError(f"Failed to read store file: {e}") from e

        records = document.get('records') if isinstance(document, dict) else None
        if not isinstance(records, dict):
            logger.error(f"Store file {self.filepath} has no 'records' table")
            raise StoreError("Store file is malformed.")
        return records

    def _write_all(self, records: Dict[str, dict]) -> None:
        """Write the whole store through a temp file and an atomic replace."""
        tmp_path = self.filepath + '.tmp'
        try:
            directory = os.path.dirname(self.filepath)
            if directory:
                os.makedirs(directory, exist_ok=True)

            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, stat.S_IRUSR | stat.S_IWUSR)
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump({'records': records}, f, indent=2)

            shutil.move(tmp_path, self.filepath)

            if not self._set_file_permissions(self.filepath):
                logger.warning(f"Failed to set secure file permissions for store: {self.filepath}.")

        except OSError as e:
            logger.error(f"Error saving store file {self.filepath}: {e}", exc_info=True)
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StoreError(f"Failed to save: {e}") from e

    def _set_file_permissions(self, filepath: str) -> bool:
        """
        Set file to be readable/writable by owner only."""
        if platform.system() == 'Windows':
            # NTFS ACLs are inherited from the user profile directory.
            return True
        try:
            os.chmod(filepath, stat.S_IRUSR | stat.S_IWUSR)  # 600
        except OSError as e:
            logger.warning(f"chmod failed for {filepath}: {e}")
            return False
        return True

