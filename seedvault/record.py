"""
The persisted record holding the encrypted phrase.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Tuple

from . import config
from .crypto import CryptoManager
from .errors import RecordFormatError

_BYTE_FIELDS = ("salt", "iv", "encrypted")


@dataclass(frozen=True)
class EncryptedRecord:
    """
    One encrypted secret plus everything needed to decrypt it.

    salt, iv and encrypted are lowercase hex strings. iterations and hash are
    the PBKDF2 parameters the record was written with, so the vault can change
    its defaults without breaking records that are already stored.
    """
    salt: str
    iv: str
    encrypted: str
    id: str = config.RECORD_ID
    iterations: int = config.PBKDF2_ITERATIONS
    hash: str = config.PBKDF2_HASH

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'EncryptedRecord':
        """
        Create from a stored dictionary.

        Records written before the KDF parameters were stored lack
        iterations and hash; they get the LEGACY_PBKDF2_* values from config.
        """
        if not isinstance(data, Mapping):
            raise RecordFormatError("record is not a mapping")
        for field in _BYTE_FIELDS:
            if not isinstance(data.get(field), str):
                raise RecordFormatError(f"record field {field!r} is missing or not a string")
        return cls(
            id=data.get("id", config.RECORD_ID),
            salt=data["salt"],
            iv=data["iv"],
            encrypted=data["encrypted"],
            iterations=data.get("iterations", config.LEGACY_PBKDF2_ITERATIONS),
            hash=data.get("hash", config.LEGACY_PBKDF2_HASH),
        )

    @classmethod
    def from_bytes(cls, salt: bytes, iv: bytes, encrypted: bytes,
                   iterations: int = config.PBKDF2_ITERATIONS,
                   hash_name: str = config.PBKDF2_HASH,
                   record_id: str = config.RECORD_ID) -> 'EncryptedRecord':
        return cls(
            id=record_id,
            salt=CryptoManager.to_hex(salt),
            iv=CryptoManager.to_hex(iv),
            encrypted=CryptoManager.to_hex(encrypted),
            iterations=iterations,
            hash=hash_name,
        )

    def decode(self) -> Tuple[bytes, bytes, bytes]:
        """
        Decode the hex fields.

        Returns:
            Tuple of (salt, iv, encrypted)

        Raises:
            RecordFormatError: If a field is not hex or has an impossible length
        """
        salt = CryptoManager.from_hex(self.salt)
        iv = CryptoManager.from_hex(self.iv)
        encrypted = CryptoManager.from_hex(self.encrypted)
        if len(salt) != config.SALT_SIZE:
            raise RecordFormatError(f"salt is {len(salt)} bytes, expected {config.SALT_SIZE}")
        if len(iv) != config.NONCE_SIZE:
            raise RecordFormatError(f"iv is {len(iv)} bytes, expected {config.NONCE_SIZE}")
        if len(encrypted) < config.TAG_SIZE:
            raise RecordFormatError("ciphertext is shorter than the authentication tag")
        return salt, iv, encrypted
