"""
Configuration constants for the SeedVault application.
"""

# Application Metadata
APP_VERSION = "1.0"  # Use: Current version of the application. Type: str. Range: Semantic versioning string (e.g., "1.0.0")
APP_NAME = "SeedVault"  # Use: Full name of the application. Type: str. Range: Any valid string.
APP_TITLE_PREFIX = f"{APP_NAME} v{APP_VERSION}"  # Use: Prefix for the application window titles, combining name and version. Type: str (f-string). Range: Derived from APP_NAME and APP_VERSION.

# Security Settings
SALT_SIZE = 16  # Use: Size of the random salt in bytes for key derivation, generated fresh on every save. Type: int. Range: At least 16 bytes (128 bits).
KEY_SIZE = 32  # Use: Size of the derived encryption key in bytes. Corresponds to AES-256. Type: int. Range: 32 bytes.
NONCE_SIZE = 12  # Use: Size of the GCM nonce (IV) in bytes, generated fresh on every save. Type: int. Range: 12 bytes (96 bits) is the recommended size for GCM.
TAG_SIZE = 16  # Use: Size of the GCM authentication tag appended to the ciphertext. Type: int. Range: 16 bytes (128 bits).
PBKDF2_ITERATIONS = 200000  # Use: PBKDF2-HMAC iteration count for newly saved records. Each record stores its own count, so raising this keeps old records readable. Type: int. Range: Positive integer, at least 100,000 recommended.
PBKDF2_MAX_ITERATIONS = 10000000  # Use: Largest iteration count accepted from a stored record. Anything above is treated as corruption. Type: int. Range: Well above PBKDF2_ITERATIONS; derivation at this count takes seconds, not hours.
PBKDF2_HASH = "sha256"  # Use: Hash identifier for PBKDF2-HMAC on newly saved records. Type: str. Range: One of the keys of PBKDF2_HASHES.
PBKDF2_HASHES = ("sha256", "sha384", "sha512")  # Use: Hash identifiers accepted in a stored record. Type: tuple[str]. Range: Names understood by crypto.CryptoManager.
LEGACY_PBKDF2_ITERATIONS = 200000  # Use: Iteration count assumed for records stored without an iterations field. Must never change. Type: int. Range: 200000.
LEGACY_PBKDF2_HASH = "sha256"  # Use: Hash assumed for records stored without a hash field. Must never change. Type: str. Range: "sha256".

# Record Settings
RECORD_ID = "mnemonic"  # Use: Fixed id of the single record slot holding the encrypted phrase. Type: str. Range: Any non-empty string.

# File and Directory Names
CONFIG_DIR_NAME = ".seedvault"  # Use: Name of the hidden directory within the user's home directory where SeedVault stores its data. Type: str. Range: Any valid directory name.
DEFAULT_STORE_FILE = "vault.json"  # Use: Default filename for the local record store. Type: str. Range: Any valid filename.

# Balance Lookup Settings
BALANCE_API_URL = "https://api.blockcypher.com/v1/btc/main"  # Use: Base URL of the public balance API. Address balances are read from {BALANCE_API_URL}/addrs/{address}/balance. Type: str. Range: Valid HTTPS URL without trailing slash.
BALANCE_REQUEST_TIMEOUT_SECONDS = 15  # Use: Timeout for a single balance request. Type: int. Range: Positive integer.
SATOSHIS_PER_BTC = 100000000  # Use: Scale between the API's satoshi amounts and displayed BTC. Type: int. Range: 10^8.
BALANCE_DECIMALS = 8  # Use: Number of decimal places shown for BTC balances. Type: int. Range: 0 to 8.
BALANCE_LOADING_TEXT = "Loading..."  # Use: Text shown in a balance cell while its request is pending. Type: str. Range: Any string.
BALANCE_ERROR_TEXT = "Error"  # Use: Text shown in a balance cell when its request failed. Type: str. Range: Any string.

# Status Messages
MSG_SAVED = "Saved successfully."  # Use: Status returned after the phrase was encrypted and stored. Type: str. Range: Any string.
MSG_LOADED = "Loaded successfully."  # Use: Status shown after the phrase was decrypted. Type: str. Range: Any string.
MSG_SAVE_INPUT_REQUIRED = "Mnemonic and password are required."  # Use: Error message when saving without a phrase or password. Type: str. Range: Any string.
MSG_PASSWORD_REQUIRED = "Password is required."  # Use: Error message when loading without a password. Type: str. Range: Any string.
MSG_NOT_FOUND = "No saved data found."  # Use: Error message when the record slot is empty. Type: str. Range: Any string.
MSG_DECRYPTION_FAILED = "Failed to load: incorrect password or corrupted data."  # Use: Single generic error for every decryption failure. Type: str. Range: Any string.

# Application UI Settings
APP_STYLE = 'Fusion'  # Use: PyQt5 application style. Type: str. Range: Valid PyQt5 style names (e.g., 'Fusion', 'Windows', 'Macintosh').
WINDOW_MIN_WIDTH = 560  # Use: Minimum width in pixels of the main window. Type: int. Range: Positive integer.
