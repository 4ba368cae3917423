"""HMAC-SHA512 message authentication."""
import hashlib
import hmac

from vaultcrypt.core.exceptions import InvalidParameters

MAC_SIZE = 64  # SHA-512 output size

_BYTES_LIKE = (bytes, bytearray, memoryview)


def compute_tag(key: bytes, message: bytes) -> bytes:
    """Return the raw 64-byte HMAC-SHA512 of ``message`` under ``key``."""
    # bytes(int) would silently become a run of zero bytes
    if not isinstance(key, _BYTES_LIKE):
        raise InvalidParameters(f"MAC key must be bytes, got {type(key).__name__}")
    if not isinstance(message, _BYTES_LIKE):
        raise InvalidParameters(f"MAC message must be bytes, got {type(message).__name__}")
    return hmac.new(bytes(key), bytes(message), hashlib.sha512).digest()


def verify_tag(tag_a: bytes, tag_b: bytes) -> bool:
    """
    Compare two tags in constant time.

    Returns False on any mismatch, including different lengths or non-bytes
    input; a mismatch is an expected outcome, not an error.
    """
    if not isinstance(tag_a, (bytes, bytearray)) or not isinstance(tag_b, (bytes, bytearray)):
        return False
    # never use ==, it exits on the first differing byte
    return hmac.compare_digest(bytes(tag_a), bytes(tag_b))
