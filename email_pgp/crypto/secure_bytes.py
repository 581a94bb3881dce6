"""Zeroable container for passphrases held during a request."""

import ctypes
from typing import Self


def _secure_zero(data: bytearray) -> None:
    if len(data) == 0:
        return
    buffer = (ctypes.c_char * len(data)).from_buffer(data)
    ctypes.memset(ctypes.addressof(buffer), 0, len(data))


class SecureBytes:
    """
    Bytes container whose memory is zeroed on clear().

    Use as context manager for guaranteed cleanup. Only this container's
    buffer is zeroed: the str it was built from and any str returned by
    decode() stay in memory until garbage-collected.
    """

    __slots__ = ("_data", "_cleared")

    def __init__(self, data: bytes | bytearray) -> None:
        self._data = bytearray(data)
        self._cleared = False

    def __del__(self) -> None:
        self.clear()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *_: object) -> None:
        self.clear()

    def clear(self) -> None:
        """Zero memory. Idempotent."""
        if self._cleared:
            return
        _secure_zero(self._data)
        self._cleared = True

    def __repr__(self) -> str:
        if self._cleared:
            return "SecureBytes(<cleared>)"
        return f"SecureBytes(<{len(self._data)} bytes>)"

    def decode(self, encoding: str = "utf-8") -> str:
        """Warning: returned string is not securely managed."""
        if self._cleared:
            raise RuntimeError("SecureBytes has been cleared")
        return self._data.decode(encoding)

    @classmethod
    def from_string(cls, s: str, encoding: str = "utf-8") -> Self:
        """Create from string. Zeros intermediate bytearray."""
        encoded = bytearray(s, encoding)
        try:
            return cls(encoded)
        finally:
            _secure_zero(encoded)
