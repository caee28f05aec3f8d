"""Exception types raised by securepassgen."""


class SecurePassError(Exception):
    """Base class for all securepassgen errors."""


class InvalidRequirements(SecurePassError, ValueError):
    """Requested length or class minimums cannot be satisfied.

    Raised before any entropy is consumed, so callers may simply ask again.
    """


class EntropySourceFailure(SecurePassError, RuntimeError):
    """The secure random generator could not be seeded or read.

    This is fatal: there is no weaker fallback source.
    """


class SamplerPrecondition(SecurePassError, ValueError):
    """Alphabet size outside the range the sampler supports (1..256)."""


class SecureBufferError(SecurePassError, RuntimeError):
    """A secure buffer was used after release or copied."""
