"""
securepassgen.pools
Fixed character classes used as sampling alphabets.
"""

import string
from typing import Dict, Optional

from .sampler import uniform_index

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
# printable ASCII punctuation only; none of these are alphanumeric
SYMBOLS = "!@#$%^&*()-_=+[]"

ALL_CHARACTERS = UPPERCASE + LOWERCASE + NUMBERS + SYMBOLS

# class name -> pool, in the order required characters are placed
POOLS = (
    ("uppercase", UPPERCASE),
    ("lowercase", LOWERCASE),
    ("numbers", NUMBERS),
    ("symbols", SYMBOLS),
)


def pick_random(pool: str, source) -> str:
    return pool[uniform_index(source, len(pool))]


def classify(ch: str) -> Optional[str]:
    """Name of the class ``ch`` belongs to, or None if it is in no pool."""
    for name, pool in POOLS:
        if ch in pool:
            return name
    return None


def count_classes(text: str) -> Dict[str, int]:
    counts = {name: 0 for name, _ in POOLS}
    for ch in text:
        name = classify(ch)
        if name is not None:
            counts[name] += 1
    return counts
