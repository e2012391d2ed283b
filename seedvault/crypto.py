"""
Cryptographic operations for SeedVault.

Keys are derived with PBKDF2-HMAC and secrets are sealed with AES-256-GCM.
The GCM tag is kept at the end of the ciphertext so a stored record has a
single `encrypted` field.
"""

import os
import re
from typing import Union

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.backends import default_backend
from cryptography.exceptions import InvalidTag

from . import config
from .errors import RecordFormatError

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")

_HASHES = {name: getattr(hashes, name.upper()) for name in config.PBKDF2_HASHES}


class CryptoManager:
    """Handles all cryptographic operations for the vault."""

    SALT_SIZE = config.SALT_SIZE
    KEY_SIZE = config.KEY_SIZE
    NONCE_SIZE = config.NONCE_SIZE
    TAG_SIZE = config.TAG_SIZE

    def __init__(self):
        """Initialize the crypto manager."""
        self.backend = default_backend()

    def generate_salt(self) -> bytes:
        """Generate a cryptographically secure random salt."""
        return os.urandom(self.SALT_SIZE)

    def generate_nonce(self) -> bytes:
        """Generate a cryptographically secure random GCM nonce."""
        return os.urandom(self.NONCE_SIZE)

    def derive_key(self, password: Union[bytes, bytearray], salt: bytes,
                   iterations: int = config.PBKDF2_ITERATIONS,
                   hash_name: str = config.PBKDF2_HASH) -> bytearray:
        """
        Derive a 256-bit key from a password with PBKDF2-HMAC.

        Args:
            password: UTF-8 encoded password
            salt: Random salt stored alongside the ciphertext
            iterations: PBKDF2 iteration count
            hash_name: Hash identifier, one of config.PBKDF2_HASHES

        Returns:
            32-byte key in a mutable buffer, so callers can clear it

        Raises:
            RecordFormatError: If the iteration count or hash is unusable
        """
        algorithm = _HASHES.get(hash_name) if isinstance(hash_name, str) else None
        if algorithm is None:
            raise RecordFormatError(f"unsupported KDF hash {hash_name!r}")
        if (isinstance(iterations, bool) or not isinstance(iterations, int)
                or not 1 <= iterations <= config.PBKDF2_MAX_ITERATIONS):
            raise RecordFormatError(f"invalid KDF iteration count {iterations!r}")

        kdf = PBKDF2HMAC(
            algorithm=algorithm(),
            length=self.KEY_SIZE,
            salt=salt,
            iterations=iterations,
            backend=self.backend
        )
        return bytearray(kdf.derive(bytes(password)))

    def encrypt(self, plaintext: bytes, key: Union[bytes, bytearray], nonce: bytes) -> bytes:
        """
        Encrypt data using AES-256-GCM.

        No associated data is authenticated.

        Returns:
            Ciphertext with the 16-byte tag appended
        """
        cipher = Cipher(
            algorithms.AES(bytes(key)),
            modes.GCM(nonce),
            backend=self.backend
        )
        encryptor = cipher.encryptor()
        ciphertext = encryptor.update(plaintext) + encryptor.finalize()
        return ciphertext + encryptor.tag

    def decrypt(self, data: bytes, key: Union[bytes, bytearray], nonce: bytes) -> bytes:
        """
        Decrypt data produced by encrypt().

        Raises:
            InvalidTag: If authentication fails or data is shorter than the tag
        """
        if len(data) < self.TAG_SIZE:
            raise InvalidTag()
        ciphertext, tag = data[:-self.TAG_SIZE], data[-self.TAG_SIZE:]
        cipher = Cipher(
            algorithms.AES(bytes(key)),
            modes.GCM(nonce, tag),
            backend=self.backend
        )
        decryptor = cipher.decryptor()
        return decryptor.update(ciphertext) + decryptor.finalize()

    @staticmethod
    def to_hex(data: bytes) -> str:
        """Lowercase hex, two characters per byte, no separators."""
        return bytes(data).hex()

    @staticmethod
    def from_hex(value: str) -> bytes:
        """Decode a hex field; raises RecordFormatError on anything that is not plain hex."""
        if not isinstance(value, str) or not _HEX_RE.fullmatch(value):
            raise RecordFormatError("field is not a valid hex string")
        return bytes.fromhex(value)

    def clear_bytes(self, data: bytearray) -> None:
        """Overwrite a sensitive buffer with zeros."""
        if isinstance(data, bytearray):
            for i in range(len(data)):
                data[i] = 0
