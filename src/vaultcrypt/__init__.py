"""vaultcrypt: cryptographic primitives for protecting secrets at rest and in transit."""

import logging

from vaultcrypt.core.exceptions import (
    VaultCryptError,
    RandomUnavailable,
    CryptoMisuseError,
    InvalidKeyLength,
    InvalidCiphertext,
    InvalidCharacterSet,
    InvalidParameters,
)
from vaultcrypt.core.hashing import checksum, checksum_file
from vaultcrypt.security import (
    DEFAULT_PASSWORD_CHARSET,
    ARGON2_PARAMS,
    Argon2Params,
    compute_tag,
    decrypt,
    default_password_charset,
    derive_key,
    encrypt,
    generate_password,
    generate_random_bytes,
    generate_salt,
    kdf_params_to_dict,
    verify_tag,
)

# library: the host application decides where log records go
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "VaultCryptError",
    "RandomUnavailable",
    "CryptoMisuseError",
    "InvalidKeyLength",
    "InvalidCiphertext",
    "InvalidCharacterSet",
    "InvalidParameters",
    "checksum",
    "checksum_file",
    "DEFAULT_PASSWORD_CHARSET",
    "ARGON2_PARAMS",
    "Argon2Params",
    "compute_tag",
    "decrypt",
    "default_password_charset",
    "derive_key",
    "encrypt",
    "generate_password",
    "generate_random_bytes",
    "generate_salt",
    "kdf_params_to_dict",
    "verify_tag",
]
