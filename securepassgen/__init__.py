"""
securepassgen
Cryptographically secure, policy-compliant password generation.
"""

from .exceptions import (
    SecurePassError,
    InvalidRequirements,
    EntropySourceFailure,
    SamplerPrecondition,
    SecureBufferError,
)
from .entropy import EntropySource, default_source
from .generator import (
    PasswordRequirements,
    generate,
    meets_requirements,
    parse_length,
    requirements_for_length,
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
)

__version__ = "1.0.0"

__all__ = [
    "SecurePassError",
    "InvalidRequirements",
    "EntropySourceFailure",
    "SamplerPrecondition",
    "SecureBufferError",
    "EntropySource",
    "default_source",
    "PasswordRequirements",
    "generate",
    "meets_requirements",
    "parse_length",
    "requirements_for_length",
    "MIN_PASSWORD_LENGTH",
    "MAX_PASSWORD_LENGTH",
]
