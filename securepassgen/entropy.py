"""
securepassgen.entropy
ChaCha20 keystream used as the process CSPRNG.

The key is read once from the OS (os.urandom) and the cipher state only ever
moves forward, so no keystream position is handed out twice. Keystream is
pulled into a small pool in whole blocks; every byte is wiped from the pool as
soon as it has been handed to a caller.
"""

import logging
import os
import threading
from typing import Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from .exceptions import EntropySourceFailure

logger = logging.getLogger(__name__)

KEY_SIZE = 32
# cryptography's ChaCha20 takes a 16-byte nonce: 4-byte block counter + 12-byte nonce
NONCE_SIZE = 16
POOL_SIZE = 256


class EntropySource:
    """
    Cryptographically secure byte stream.

    ``seed`` fixes the ChaCha20 key and makes the stream reproducible; leave it
    out for anything but tests.
    """

    def __init__(self, seed: Optional[bytes] = None):
        if seed is None:
            try:
                key = bytearray(os.urandom(KEY_SIZE))
            except (OSError, NotImplementedError) as e:
                raise EntropySourceFailure("Unable to read seed material from the OS") from e
            if len(key) != KEY_SIZE:
                raise EntropySourceFailure("OS returned short seed material")
        else:
            if len(seed) != KEY_SIZE:
                raise ValueError(f"seed must be exactly {KEY_SIZE} bytes")
            key = bytearray(seed)

        try:
            cipher = Cipher(algorithms.ChaCha20(bytes(key), bytes(NONCE_SIZE)), mode=None)
            self._keystream = cipher.encryptor()
        except Exception as e:
            raise EntropySourceFailure("Unable to initialise ChaCha20") from e
        finally:
            key[:] = bytes(len(key))

        self._lock = threading.Lock()
        self._pool = bytearray(POOL_SIZE)
        self._index = POOL_SIZE  # force a refill on first draw
        self._refills = 0

    def _refill(self) -> None:
        try:
            block = self._keystream.update(bytes(POOL_SIZE))
        except Exception as e:
            raise EntropySourceFailure("ChaCha20 keystream read failed") from e
        self._pool[:] = block
        self._index = 0
        self._refills += 1

    def _take(self, out: bytearray, start: int, count: int) -> None:
        # caller holds the lock
        pos = start
        end = start + count
        while pos < end:
            if self._index >= POOL_SIZE:
                self._refill()
            n = min(end - pos, POOL_SIZE - self._index)
            out[pos:pos + n] = self._pool[self._index:self._index + n]
            self._pool[self._index:self._index + n] = bytes(n)
            self._index += n
            pos += n

    def fill(self, buffer: bytearray) -> None:
        """Overwrite ``buffer`` in place with fresh keystream bytes."""
        with self._lock:
            self._take(buffer, 0, len(buffer))

    def next_byte(self) -> int:
        with self._lock:
            if self._index >= POOL_SIZE:
                self._refill()
            value = self._pool[self._index]
            self._pool[self._index] = 0
            self._index += 1
            return value

    def next_u32(self) -> int:
        raw = bytearray(4)
        with self._lock:
            self._take(raw, 0, 4)
        value = int.from_bytes(raw, "little")
        raw[:] = bytes(4)
        return value


_default: Optional[EntropySource] = None
_default_lock = threading.Lock()


def default_source() -> EntropySource:
    """Return the process-wide source, seeding it from the OS on first use."""
    global _default
    with _default_lock:
        if _default is None:
            _default = EntropySource()
            logger.debug("Seeded process entropy source")
        return _default
