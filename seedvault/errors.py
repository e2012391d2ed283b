"""
Error types raised by SeedVault.

Every error carries a message that can be shown to the user as-is.
"""

from . import config


class VaultError(Exception):
    """Base class for all SeedVault errors."""


class InvalidInputError(VaultError, ValueError):
    """A required value (phrase, password, address) was missing or empty."""


class NotFoundError(VaultError):
    """No record exists under the expected id."""

    def __init__(self, message: str = config.MSG_NOT_FOUND):
        super().__init__(message)


class DecryptionError(VaultError):
    """
    The record could not be decrypted.

    Wrong passwords and corrupted records raise the same error with the same
    message.
    """

    def __init__(self, message: str = config.MSG_DECRYPTION_FAILED):
        super().__init__(message)


class RecordFormatError(DecryptionError):
    """A stored record has a malformed field (bad hex, wrong length, unknown KDF parameters)."""

    def __init__(self, detail: str):
        super().__init__()
        self.detail = detail


class StoreError(VaultError):
    """The local record store failed to read or write."""


class BalanceLookupError(VaultError):
    """A balance request failed or returned an unusable payload."""
