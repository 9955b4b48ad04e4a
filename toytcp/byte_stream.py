"""A bounded in-memory byte stream with a writing end and a reading end."""

from __future__ import annotations


class ByteStream:
    """Bytes enter through ``push`` and leave through ``peek``/``pop``; at most ``capacity`` are buffered."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._buffer = bytearray()
        self._pushed = 0
        self._popped = 0
        self._closed = False
        self._error = False

    # Writing end

    def push(self, data: bytes) -> None:
        """Append as much of ``data`` as the available capacity allows."""
        if self._error or self._closed or not data:
            return
        accepted = data[: self.available_capacity()]
        self._buffer += accepted
        self._pushed += len(accepted)

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    def available_capacity(self) -> int:
        """How many bytes can be pushed right now."""
        return self._capacity - self._pushed + self._popped

    def bytes_pushed(self) -> int:
        """Total number of bytes ever pushed."""
        return self._pushed

    # Reading end

    def peek(self) -> bytes:
        """Return the buffered bytes without removing them."""
        return bytes(self._buffer)

    def pop(self, length: int) -> None:
        """Remove up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError("length must not be negative")
        if self._error or not self._buffer or length == 0:
            return
        length = min(length, self.bytes_buffered())
        del self._buffer[:length]
        self._popped += length

    def is_finished(self) -> bool:
        """True once the stream is closed and every byte has been popped."""
        return self._closed and not self._buffer

    def bytes_buffered(self) -> int:
        """Number of bytes pushed but not yet popped."""
        return self._pushed - self._popped

    def bytes_popped(self) -> int:
        """Total number of bytes ever popped."""
        return self._popped

    # Error state

    def set_error(self) -> None:
        """Mark the stream as having suffered an error."""
        self._error = True

    def has_error(self) -> bool:
        return self._error


def read(stream: ByteStream, length: int) -> bytes:
    """Peek and pop up to ``length`` bytes from ``stream`` and return them."""
    out = bytearray()
    while stream.bytes_buffered() and len(out) < length:
        view = stream.peek()
        if not view:
            raise RuntimeError("peek() returned no bytes while bytes were buffered")
        chunk = view[: length - len(out)]
        out += chunk
        stream.pop(len(chunk))
    return bytes(out)