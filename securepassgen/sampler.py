"""
securepassgen.sampler
Uniform index selection by rejection sampling over single bytes.

Plain ``byte % n`` favours low indices whenever n does not divide 256. Draws at
or above the largest multiple of n that fits in a byte are thrown away and
redrawn instead; at least half of all draws are accepted for any n <= 256.
"""

import logging

from .exceptions import SamplerPrecondition

logger = logging.getLogger(__name__)

BYTE_RANGE = 256


def rejection_limit(n: int) -> int:
    """Largest multiple of ``n`` not exceeding the byte range."""
    if not isinstance(n, int) or isinstance(n, bool) or n < 1 or n > BYTE_RANGE:
        raise SamplerPrecondition(f"alphabet size must be within 1..{BYTE_RANGE}, got {n!r}")
    return BYTE_RANGE - (BYTE_RANGE % n)


def uniform_index(source, n: int) -> int:
    """Return an index in ``[0, n)`` with exactly uniform probability."""
    limit = rejection_limit(n)
    while True:
        value = source.next_byte()
        if value < limit:
            return value % n
        logger.debug("Rejected draw for alphabet of size %d", n)
