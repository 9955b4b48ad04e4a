"""32-bit sequence numbers that wrap around, relative to an arbitrary zero point."""

from __future__ import annotations

_MOD = 1 << 32
_MASK = _MOD - 1


class Wrap32:
    """An unsigned 32-bit value that starts at an arbitrary zero point and wraps at 2**32."""

    __slots__ = ("_raw",)

    def __init__(self, raw_value: int) -> None:
        self._raw = int(raw_value) & _MASK

    @property
    def raw_value(self) -> int:
        """The raw 32-bit value."""
        return self._raw

    @classmethod
    def wrap(cls, n: int, zero_point: Wrap32) -> Wrap32:
        """Wrap the absolute sequence number ``n`` relative to ``zero_point``."""
        return cls(n + zero_point._raw)

    def unwrap(self, zero_point: Wrap32, checkpoint: int) -> int:
        """Return the absolute sequence number that wraps to this value and lies closest to ``checkpoint``."""
        base = (self._raw - zero_point._raw) & _MASK
        if base >= checkpoint:
            return base
        wraps = (checkpoint - base + (_MOD >> 1)) // _MOD
        return base + wraps * _MOD

    def __add__(self, n: int) -> Wrap32:
        if not isinstance(n, int):
            return NotImplemented
        return Wrap32(self._raw + n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wrap32):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"Wrap32({self._raw})"