"""AES-CFB encryption of arbitrary-length messages.

Ciphertext layout (what every interoperating decryptor must expect):
- 16 bytes: IV, freshly random per encrypt() call
- N bytes: CFB-encrypted payload, N == len(plaintext)

CFB is a stream mode: no padding, no block alignment, and no integrity.
Flipping ciphertext bits garbles the plaintext without raising, so callers
pair this with :mod:`vaultcrypt.security.mac` (encrypt-then-MAC).
"""
import logging

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

try:
    # newer cryptography releases keep the legacy stream modes under decrepit
    from cryptography.hazmat.decrepit.ciphers.modes import CFB
except ImportError:
    from cryptography.hazmat.primitives.ciphers.modes import CFB

from vaultcrypt.core.exceptions import InvalidCiphertext, InvalidKeyLength, InvalidParameters
from . import rng

logger = logging.getLogger(__name__)

BLOCK_SIZE = 16  # AES block size, also the IV length
KEY_SIZES = (16, 24, 32)  # AES-128/192/256

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _check_key(key: bytes) -> None:
    if not isinstance(key, (bytes, bytearray)) or len(key) not in KEY_SIZES:
        size = len(key) if isinstance(key, (bytes, bytearray)) else type(key).__name__
        raise InvalidKeyLength(f"AES key must be 16, 24 or 32 bytes, got {size}")


def _check_data(data: bytes, what: str) -> None:
    # bytes(int) would silently become a run of zero bytes
    if not isinstance(data, _BYTES_LIKE):
        raise InvalidParameters(f"{what} must be bytes, got {type(data).__name__}")


def encrypt(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt ``plaintext`` under ``key`` and return ``IV || ciphertext``."""
    _check_key(key)
    _check_data(plaintext, "plaintext")
    iv = rng.random_bytes(BLOCK_SIZE)

    encryptor = Cipher(algorithms.AES(bytes(key)), CFB(iv)).encryptor()
    ct = encryptor.update(bytes(plaintext)) + encryptor.finalize()
    logger.debug("Encrypted %d bytes with AES-%d-CFB", len(ct), len(key) * 8)
    return iv + ct


def decrypt(key: bytes, data: bytes) -> bytes:
    """Decrypt an ``IV || ciphertext`` blob produced by :func:`encrypt`."""
    _check_key(key)
    _check_data(data, "ciphertext")
    if len(data) < BLOCK_SIZE:
        raise InvalidCiphertext("Invalid ciphertext (too short to contain an IV)")

    iv, ct = bytes(data[:BLOCK_SIZE]), bytes(data[BLOCK_SIZE:])
    decryptor = Cipher(algorithms.AES(bytes(key)), CFB(iv)).decryptor()
    pt = decryptor.update(ct) + decryptor.finalize()
    logger.debug("Decrypted %d bytes with AES-%d-CFB", len(pt), len(key) * 8)
    return pt
