"""Salt, random byte and password generation on top of :mod:`vaultcrypt.security.rng`."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Union

from vaultcrypt.core.exceptions import InvalidCharacterSet, InvalidParameters
from . import rng

logger = logging.getLogger(__name__)

SALT_LEN = 32

_MIN_CHAR = 0x20  # ' '
_MAX_CHAR = 0x7E  # '~'

# printable ASCII in ascending order; a str so it can never be mutated
DEFAULT_PASSWORD_CHARSET = "".join(chr(c) for c in range(_MIN_CHAR, _MAX_CHAR + 1))

CharacterSet = Union[str, Sequence[str]]


def generate_salt() -> bytes:
    """Return a fresh 32-byte salt for password hashing."""
    return rng.random_bytes(SALT_LEN)


def generate_random_bytes(n: int) -> bytes:
    """Return ``n`` random bytes (nonces, tokens, raw key material)."""
    return rng.random_bytes(n)


def default_password_charset() -> str:
    """Return the 95 printable ASCII characters used by :func:`generate_password`."""
    return DEFAULT_PASSWORD_CHARSET


def _validate_charset(characters: CharacterSet) -> None:
    if isinstance(characters, (bytes, bytearray)):
        raise InvalidCharacterSet("character set must be text, not bytes")
    # sets and generators have no stable index to draw from
    if not isinstance(characters, Sequence):
        raise InvalidCharacterSet("character set must be a sequence of characters")
    items = list(characters)

    for ch in items:
        if not isinstance(ch, str) or len(ch) != 1:
            raise InvalidCharacterSet(f"character set entries must be single characters, got {ch!r}")
    if len(set(items)) < 2:
        raise InvalidCharacterSet("At least 2 distinct characters must be provided")


def generate_password(length: int, characters: CharacterSet = DEFAULT_PASSWORD_CHARSET) -> str:
    """
    Generate a random password of ``length`` characters drawn from ``characters``.

    Every position is picked independently with :func:`rng.uniform_index`, so
    each entry of ``characters`` is equally likely whatever its size.

    Raises:
        InvalidCharacterSet: fewer than 2 distinct characters, or an entry
            that is not a single character.
        InvalidParameters: negative ``length``.
    """
    _validate_charset(characters)
    if not isinstance(length, int) or isinstance(length, bool) or length < 0:
        raise InvalidParameters(f"password length must be a non-negative int, got {length!r}")

    bound = len(characters)
    result = [characters[rng.uniform_index(bound)] for _ in range(length)]
    logger.debug("Generated password from a %d-character set", bound)
    return "".join(result)
