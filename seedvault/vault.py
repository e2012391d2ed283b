"""
Password-protected storage of a single recovery phrase.

SecretVault turns a phrase and a password into an EncryptedRecord and back.
Persistence goes through the store passed to the constructor.
"""

import asyncio
import logging

from cryptography.exceptions import InvalidTag

from . import config
from .crypto import CryptoManager
from .errors import DecryptionError, InvalidInputError, NotFoundError, RecordFormatError
from .record import EncryptedRecord
from .storage import RecordStore

logger = logging.getLogger(__name__)


class SecretVault:
    """
    Encrypts and decrypts the recovery phrase.

    Key derivation and store calls run in worker threads, so the coroutines
    never block the event loop. Saves through one vault are serialized; the
    last save issued is the one left in the store.
    """

    def __init__(self, store: RecordStore,
                 iterations: int = config.PBKDF2_ITERATIONS,
                 hash_name: str = config.PBKDF2_HASH,
                 record_id: str = config.RECORD_ID):
        """
        Args:
            store: Record store the UI-facing calls read from and write to
            iterations: PBKDF2 iteration count for new records
            hash_name: PBKDF2 hash for new records
            record_id: Slot the phrase is stored under
        """
        self.store = store
        self.crypto = CryptoManager()
        self.iterations = iterations
        self.hash_name = hash_name
        self.record_id = record_id
        self._write_lock = asyncio.Lock()

    async def save(self, secret: str, password: str) -> EncryptedRecord:
        """
        Encrypt a phrase under a password.

        A fresh salt and nonce are drawn on every call. Nothing is persisted.

        Raises:
            InvalidInputError: If secret or password is empty
        """
        if not secret or not password:
            raise InvalidInputError(config.MSG_SAVE_INPUT_REQUIRED)
        return await asyncio.to_thread(self._seal, secret, password)

    async def load(self, record: EncryptedRecord, password: str) -> str:
        """
        Decrypt a record with a password.

        Raises:
            InvalidInputError: If password is empty
            NotFoundError: If record is None
            DecryptionError: On a wrong password or any corruption of the record
        """
        if not password:
            raise InvalidInputError(config.MSG_PASSWORD_REQUIRED)
        if record is None:
            raise NotFoundError()
        return await asyncio.to_thread(self._open, record, password)

    async def save_secret(self, secret: str, password: str) -> str:
        """Encrypt the phrase and store it, replacing any earlier one. Returns a status message."""
        if not secret or not password:
            raise InvalidInputError(config.MSG_SAVE_INPUT_REQUIRED)
        async with self._write_lock:
            record = await self.save(secret, password)
            await asyncio.to_thread(self.store.put, record)
        logger.info(f"Save: phrase stored under '{self.record_id}'")
        return config.MSG_SAVED

    async def load_secret(self, password: str) -> str:
        """Read the stored record and decrypt it."""
        if not password:
            raise InvalidInputError(config.MSG_PASSWORD_REQUIRED)
        record = await asyncio.to_thread(self.store.get, self.record_id)
        if record is None:
            logger.info(f"Load: no record under '{self.record_id}'")
            raise NotFoundError()
        return await self.load(record, password)

    def _seal(self, secret: str, password: str) -> EncryptedRecord:
        salt = self.crypto.generate_salt()
        nonce = self.crypto.generate_nonce()
        password_bytes = bytearray(password.encode('utf-8'))
        key = bytearray()
        try:
            key = self.crypto.derive_key(password_bytes, salt, self.iterations, self.hash_name)
            encrypted = self.crypto.encrypt(secret.encode('utf-8'), key, nonce)
        finally:
            self.crypto.clear_bytes(password_bytes)
            self.crypto.clear_bytes(key)
        return EncryptedRecord.from_bytes(
            salt, nonce, encrypted,
            iterations=self.iterations, hash_name=self.hash_name, record_id=self.record_id,
        )

    def _open(self, record: EncryptedRecord, password: str) -> str:
        password_bytes = bytearray(password.encode('utf-8'))
        key = bytearray()
        try:
            salt, nonce, encrypted = record.decode()
            key = self.crypto.derive_key(password_bytes, salt, record.iterations, record.hash)
            plaintext = self.crypto.decrypt(encrypted, key, nonce)
            return plaintext.decode('utf-8')
        except RecordFormatError as e:
            logger.warning(f"Load: record '{record.id}' is malformed: {e.detail}")
            raise
        except InvalidTag:
            logger.warning("Load: authentication failed")
            raise DecryptionError() from None
        except ValueError as e:
            logger.warning(f"Load: decryption failed: {type(e).__name__}")
            raise DecryptionError() from None
        finally:
            self.crypto.clear_bytes(password_bytes)
            self.crypto.clear_bytes(key)
