"""OS-backed random source shared by every primitive in vaultcrypt.

All randomness goes through :func:`random_bytes` so there is exactly one
place that talks to the OS entropy source and one place that turns its
failures into :class:`RandomUnavailable`.
"""
import logging
import os

from vaultcrypt.core.exceptions import InvalidParameters, RandomUnavailable

logger = logging.getLogger(__name__)


def random_bytes(n: int) -> bytes:
    """Return ``n`` bytes from the OS CSPRNG.

    Raises:
        InvalidParameters: ``n`` is not a non-negative int.
        RandomUnavailable: the OS entropy source could not be read.
    """
    if not isinstance(n, int) or isinstance(n, bool) or n < 0:
        raise InvalidParameters(f"byte count must be a non-negative int, got {n!r}")
    if n == 0:
        return b""

    try:
        data = os.urandom(n)
    except (OSError, NotImplementedError) as e:
        logger.error("OS entropy source unavailable: %s", e.__class__.__name__)
        raise RandomUnavailable("could not read from the OS entropy source") from e

    if len(data) != n:
        # short read; never hand back fewer bytes than asked for
        logger.error("OS entropy source returned %d of %d bytes", len(data), n)
        raise RandomUnavailable("short read from the OS entropy source")
    return data


def uniform_index(bound: int) -> int:
    """Return an integer uniformly distributed in ``[0, bound)``.

    Draws just enough bits to cover ``bound - 1`` and rejects values that
    fall outside the range, so no index is favoured the way a plain modulo
    would favour the low ones.
    """
    if not isinstance(bound, int) or isinstance(bound, bool) or bound < 1:
        raise InvalidParameters(f"bound must be a positive int, got {bound!r}")
    if bound == 1:
        return 0

    bits = (bound - 1).bit_length()
    nbytes = (bits + 7) // 8
    mask = (1 << bits) - 1
    while True:
        value = int.from_bytes(random_bytes(nbytes), "big") & mask
        if value < bound:
            return value
