"""
securepassgen.buffer
Fixed-size byte container for password material that wipes itself on release.

Use it as a context manager so the wipe happens on every exit path:

    with SecureBuffer(16) as buf:
        buf.write(0, "A")
        ...
        password = buf.read_all()

``release`` overwrites the backing bytearray in place; the object is never
resized or copied, so no stray copy of the contents is left behind by the
buffer itself.
"""

from typing import Union

from .exceptions import SecureBufferError


class SecureBuffer:
    def __init__(self, size: int):
        if not isinstance(size, int) or size < 0:
            raise ValueError("size must be a non-negative integer")
        self._storage = bytearray(size)
        self._released = False

    def __len__(self) -> int:
        return len(self._storage)

    def __enter__(self) -> "SecureBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __del__(self):
        # last resort if the owner forgot the context manager
        if not getattr(self, "_released", True):
            self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else "live"
        return f"<SecureBuffer size={len(self._storage)} {state}>"

    def __copy__(self):
        raise SecureBufferError("SecureBuffer cannot be copied")

    def __deepcopy__(self, memo):
        raise SecureBufferError("SecureBuffer cannot be copied")

    def __reduce__(self):
        raise SecureBufferError("SecureBuffer cannot be pickled")

    @property
    def released(self) -> bool:
        return self._released

    def _check_live(self) -> None:
        if self._released:
            raise SecureBufferError("SecureBuffer used after release")

    def write(self, index: int, value: Union[str, int]) -> None:
        """Store one ASCII character (or its byte value) at ``index``."""
        self._check_live()
        if isinstance(value, str):
            if len(value) != 1 or ord(value) > 0x7F:
                raise ValueError("value must be a single ASCII character")
            value = ord(value)
        self._storage[index] = value

    def swap(self, i: int, j: int) -> None:
        self._check_live()
        s = self._storage
        s[i], s[j] = s[j], s[i]

    def read_all(self) -> str:
        """Explicitly copy the contents out as a string."""
        self._check_live()
        return self._storage.decode("ascii")

    def release(self) -> None:
        """Zero every byte of the backing storage. Safe to call repeatedly."""
        view = memoryview(self._storage)
        try:
            view[:] = bytes(len(view))
        finally:
            view.release()
        self._released = True
