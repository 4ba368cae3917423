"""
Exceptions for vaultcrypt
Every primitive raises one of these so callers have a single error root to catch
"""


class VaultCryptError(Exception):
    # general container for errors
    pass


class RandomUnavailable(VaultCryptError):
    # raised when the OS entropy source cannot be read; fatal for the calling operation
    pass


class CryptoMisuseError(VaultCryptError, ValueError):
    # raised on caller misuse (programmer error), never on a normal outcome
    pass


class InvalidKeyLength(CryptoMisuseError):
    # raised when a key does not match a size the cipher accepts
    pass


class InvalidCiphertext(CryptoMisuseError):
    # raised when ciphertext is too short to hold an IV
    pass


class InvalidCharacterSet(CryptoMisuseError):
    # raised when a password alphabet has fewer than 2 distinct characters
    pass


class InvalidParameters(CryptoMisuseError):
    # raised on malformed sizes, counts or KDF parameters
    pass
