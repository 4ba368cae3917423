"""Security primitives for vaultcrypt.

This package provides:
- an OS-backed random source with unbiased index sampling
- salt, random byte and password generation
- Argon2 key derivation with a fixed, process-wide parameter set
- AES-CFB encryption/decryption (``IV || ciphertext``)
- HMAC-SHA512 tags with constant-time verification

Nothing here stores keys; callers own key material and its lifetime.
"""

from .rng import random_bytes, uniform_index
from .passwords import (
    DEFAULT_PASSWORD_CHARSET,
    SALT_LEN,
    default_password_charset,
    generate_password,
    generate_random_bytes,
    generate_salt,
)
from .kdf import ARGON2_PARAMS, Argon2Params, derive_key, kdf_params_to_dict
from .crypto import BLOCK_SIZE, KEY_SIZES, encrypt, decrypt
from .mac import MAC_SIZE, compute_tag, verify_tag

__all__ = [
    "random_bytes",
    "uniform_index",
    "DEFAULT_PASSWORD_CHARSET",
    "SALT_LEN",
    "default_password_charset",
    "generate_password",
    "generate_random_bytes",
    "generate_salt",
    "ARGON2_PARAMS",
    "Argon2Params",
    "derive_key",
    "kdf_params_to_dict",
    "BLOCK_SIZE",
    "KEY_SIZES",
    "encrypt",
    "decrypt",
    "MAC_SIZE",
    "compute_tag",
    "verify_tag",
]
