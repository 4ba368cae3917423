"""Argon2 password hashing / key derivation for vaultcrypt."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union
import logging
import os

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from vaultcrypt.core.config import SETTINGS
from vaultcrypt.core.exceptions import InvalidParameters

logger = logging.getLogger(__name__)

TIME_COST = 8
MEMORY_COST = 32 * 1024  # KiB
KEY_LEN = 32  # 32-byte keys are used with AES-256

_MIN_SALT_LEN = 8
_MIN_KEY_LEN = 4
_MAX_PARALLELISM = 2**24 - 1


@dataclass(frozen=True)
class Argon2Params:
    """Argon2 cost parameters. Changing any field changes every derived key."""

    time_cost: int = TIME_COST
    memory_cost: int = MEMORY_COST
    parallelism: int = 1
    key_len: int = KEY_LEN
    type: Type = Type.I
    version: int = ARGON2_VERSION

    def __post_init__(self) -> None:
        for name in ("time_cost", "memory_cost", "parallelism", "key_len"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidParameters(f"{name} must be an int, got {value!r}")
        if self.time_cost < 1:
            raise InvalidParameters("time_cost must be >= 1")
        if not 1 <= self.parallelism <= _MAX_PARALLELISM:
            raise InvalidParameters(f"parallelism must be in 1..{_MAX_PARALLELISM}")
        if self.memory_cost < 8 * self.parallelism:
            raise InvalidParameters("memory_cost must be at least 8 KiB per lane")
        if self.key_len < _MIN_KEY_LEN:
            raise InvalidParameters(f"key_len must be >= {_MIN_KEY_LEN}")


def _host_parallelism() -> int:
    if SETTINGS.argon2_parallelism is not None:
        return SETTINGS.argon2_parallelism
    # CPUs this process may run on, which is narrower than the machine under taskset or cpusets
    if hasattr(os, "sched_getaffinity"):
        return len(os.sched_getaffinity(0)) or 1
    return os.cpu_count() or 1


# process-wide, fixed at import
ARGON2_PARAMS = Argon2Params(parallelism=_host_parallelism())


def derive_key(password: Union[str, bytes, bytearray], salt: bytes) -> bytes:
    """
    Derive a key from a password and salt using Argon2 with ``ARGON2_PARAMS``.

    The same (password, salt) always yields the same key on a process with the
    same parameter set. Strings are UTF-8 encoded first, so ``"pw"`` and
    ``b"pw"`` derive the same key.

    Raises:
        InvalidParameters: salt is not bytes or shorter than 8 bytes, or the
            Argon2 binding rejected the parameter set.
        MemoryError: Argon2 could not allocate its working memory.
    """
    if isinstance(password, str):
        password = password.encode("utf-8")
    elif isinstance(password, bytearray):
        password = bytes(password)
    elif not isinstance(password, bytes):
        raise InvalidParameters("password must be str or bytes")

    if not isinstance(salt, (bytes, bytearray)):
        raise InvalidParameters("salt must be bytes")
    if len(salt) < _MIN_SALT_LEN:
        raise InvalidParameters(f"salt must be at least {_MIN_SALT_LEN} bytes")

    params = ARGON2_PARAMS
    logger.debug(
        "Deriving %d-byte key (t=%d, m=%d KiB, p=%d)",
        params.key_len,
        params.time_cost,
        params.memory_cost,
        params.parallelism,
    )
    try:
        return hash_secret_raw(
            secret=password,
            salt=bytes(salt),
            time_cost=params.time_cost,
            memory_cost=params.memory_cost,
            parallelism=params.parallelism,
            hash_len=params.key_len,
            type=params.type,
            version=params.version,
        )
    except HashingError as e:
        if "memory allocation" in str(e).lower():
            # resource failure, not a bad parameter set
            logger.error("Argon2 could not allocate %d KiB", params.memory_cost)
            raise MemoryError(f"Argon2 could not allocate {params.memory_cost} KiB") from e
        raise InvalidParameters(f"Argon2 rejected the parameter set: {e}") from e


def kdf_params_to_dict(salt: bytes, params: Argon2Params = ARGON2_PARAMS) -> Dict:
    """Describe how a key was derived, for storing next to the salt."""
    return {
        "algo": f"argon2{params.type.name.lower()}",
        "salt": salt.hex(),
        "time": params.time_cost,
        "memory": params.memory_cost,
        "parallelism": params.parallelism,
        "key_len": params.key_len,
        "version": params.version,
    }
