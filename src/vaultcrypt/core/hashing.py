""" SHA-512 checksums for integrity checks (not secrecy, not forgery resistance). """

import hashlib
from pathlib import Path


CHUNK_SIZE = 65536  # 64KB
DIGEST_SIZE = 64


def checksum(message: bytes) -> bytes:
    """Return the raw 64-byte SHA-512 digest of ``message``."""
    return hashlib.sha512(message).digest()


def checksum_file(file_path: Path) -> bytes:

    # Same digest as checksum(), streamed so large files are not loaded at once.

    sha512 = hashlib.sha512()
    with open(file_path, 'rb') as f:
        while True:
            data = f.read(CHUNK_SIZE)
            if not data:
                break
            sha512.update(data)
    return sha512.digest()
