"""Process-wide settings for vaultcrypt, read once from the environment.

Supported variables:

- ``VAULTCRYPT_ARGON2_PARALLELISM``: pin the Argon2 lane count. When unset,
  key derivation follows the host CPU count, which means derived keys only
  reproduce on hosts with the same core count.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional
import os

from vaultcrypt.core.exceptions import InvalidParameters


ENV_ARGON2_PARALLELISM = "VAULTCRYPT_ARGON2_PARALLELISM"


@dataclass(frozen=True)
class Settings:
    """Immutable snapshot of the configuration."""

    argon2_parallelism: Optional[int] = None


def _parse_positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError as e:
        raise InvalidParameters(f"{name} must be an integer, got {raw!r}") from e
    if value < 1:
        raise InvalidParameters(f"{name} must be >= 1, got {value}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``environ`` (defaults to ``os.environ``).

    Empty values are treated as unset.
    """
    if environ is None:
        environ = os.environ

    raw = environ.get(ENV_ARGON2_PARALLELISM)
    parallelism = None
    if raw is not None and raw.strip():
        parallelism = _parse_positive_int(ENV_ARGON2_PARALLELISM, raw)

    return Settings(argon2_parallelism=parallelism)


SETTINGS = load_settings()
