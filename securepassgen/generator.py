"""
securepassgen.generator
Policy-enforcing password assembly.

Required characters for each class are drawn first, remaining slots are drawn
from the union of all pools, and the whole buffer is then Fisher-Yates shuffled
so the required characters carry no positional bias.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .buffer import SecureBuffer
from .config import load_config
from .entropy import EntropySource, default_source
from .exceptions import InvalidRequirements
from .pools import ALL_CHARACTERS, LOWERCASE, NUMBERS, SYMBOLS, UPPERCASE, count_classes, pick_random
from .sampler import uniform_index

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 12
MAX_PASSWORD_LENGTH = 128


@dataclass(frozen=True)
class PasswordRequirements:
    min_length: int
    min_uppercase: int = 0
    min_lowercase: int = 0
    min_numbers: int = 0
    min_symbols: int = 0

    @property
    def required_total(self) -> int:
        return self.min_uppercase + self.min_lowercase + self.min_numbers + self.min_symbols

    def class_minimums(self):
        """Pairs of (pool, minimum count) in placement order."""
        return (
            (UPPERCASE, self.min_uppercase),
            (LOWERCASE, self.min_lowercase),
            (NUMBERS, self.min_numbers),
            (SYMBOLS, self.min_symbols),
        )

    def validate(self) -> None:
        for name in ("min_length", "min_uppercase", "min_lowercase", "min_numbers", "min_symbols"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidRequirements(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise InvalidRequirements(f"{name} must be >= 0")
        if self.min_length < MIN_PASSWORD_LENGTH or self.min_length > MAX_PASSWORD_LENGTH:
            raise InvalidRequirements(
                f"Password length must be between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}"
            )
        if self.required_total > self.min_length:
            raise InvalidRequirements(
                f"Password length {self.min_length} too short for "
                f"{self.required_total} required characters"
            )


def parse_length(value: Union[str, int]) -> int:
    """
    Turn user input into a password length, rejecting anything non-numeric or
    outside the supported range.
    """
    if isinstance(value, bool):
        raise InvalidRequirements("Invalid password length")
    if isinstance(value, str):
        try:
            value = int(value.strip(), 10)
        except ValueError:
            raise InvalidRequirements(f"Invalid password length: {value!r}") from None
    if not isinstance(value, int):
        raise InvalidRequirements("Invalid password length")
    if value < MIN_PASSWORD_LENGTH or value > MAX_PASSWORD_LENGTH:
        raise InvalidRequirements(
            f"Password length must be between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}"
        )
    return value


def requirements_for_length(
    length: Union[str, int],
    min_uppercase: Optional[int] = None,
    min_lowercase: Optional[int] = None,
    min_numbers: Optional[int] = None,
    min_symbols: Optional[int] = None,
) -> PasswordRequirements:
    """Build requirements for ``length``, taking unspecified minimums from config."""
    cfg = load_config()
    req = PasswordRequirements(
        min_length=parse_length(length),
        min_uppercase=cfg["min_uppercase"] if min_uppercase is None else min_uppercase,
        min_lowercase=cfg["min_lowercase"] if min_lowercase is None else min_lowercase,
        min_numbers=cfg["min_numbers"] if min_numbers is None else min_numbers,
        min_symbols=cfg["min_symbols"] if min_symbols is None else min_symbols,
    )
    req.validate()
    return req


def meets_requirements(password: str, requirements: PasswordRequirements) -> bool:
    if len(password) != requirements.min_length:
        return False
    counts = count_classes(password)
    if sum(counts.values()) != len(password):
        return False
    return (
        counts["uppercase"] >= requirements.min_uppercase
        and counts["lowercase"] >= requirements.min_lowercase
        and counts["numbers"] >= requirements.min_numbers
        and counts["symbols"] >= requirements.min_symbols
    )


def generate(requirements: PasswordRequirements, source: Optional[EntropySource] = None) -> str:
    """
    Generate a password of exactly ``requirements.min_length`` characters with
    at least the requested number of characters from each class.

    ``source`` defaults to the process-wide ChaCha20 stream; pass a seeded
    EntropySource for reproducible output.
    """
    # validation comes first: no entropy consumed, nothing to wipe
    requirements.validate()
    if source is None:
        source = default_source()

    length = requirements.min_length
    with SecureBuffer(length) as buf:
        pos = 0
        for pool, minimum in requirements.class_minimums():
            for _ in range(minimum):
                buf.write(pos, pick_random(pool, source))
                pos += 1

        while pos < length:
            buf.write(pos, pick_random(ALL_CHARACTERS, source))
            pos += 1

        for i in range(length - 1, 0, -1):
            buf.swap(i, uniform_index(source, i + 1))

        password = buf.read_all()

    logger.debug(
        "Generated password of length %d (%d required, %d free)",
        length, requirements.required_total, length - requirements.required_total,
    )
    return password
