"""Reassembles indexed, possibly overlapping substrings into a byte stream."""

from __future__ import annotations

from bisect import bisect_left
from typing import Optional

from toytcp.byte_stream import ByteStream


class Reassembler:
    """Writes substrings into ``output`` in order, holding early arrivals until gaps are filled."""

    def __init__(self, output: ByteStream) -> None:
        self._output = output
        self._pending: dict[int, bytes] = {}
        self._eof_index: Optional[int] = None

    def insert(self, first_index: int, data: bytes, is_last_substring: bool = False) -> None:
        """Accept ``data`` starting at stream index ``first_index``."""
        avail = self._output.available_capacity()
        next_index = self._output.bytes_pushed()
        first_unacceptable = next_index + avail
        end_index = first_index + len(data)

        if is_last_substring:
            self._eof_index = end_index

        if (
            first_index >= first_unacceptable
            or end_index <= next_index
            or not data
            or avail == 0
        ):
            self._close_if_done(next_index)
            return

        if end_index > first_unacceptable:
            data = data[: first_unacceptable - first_index]
            end_index = first_unacceptable
        if first_index < next_index:
            data = data[next_index - first_index :]
            first_index = next_index

        new_start, new_end, new_data = first_index, end_index, bytes(data)
        starts = sorted(self._pending)
        pos = bisect_left(starts, first_index)
        if pos > 0 and (pos == len(starts) or starts[pos] > first_index):
            pos -= 1
        for start in starts[pos:]:
            if start > new_end:
                break
            chunk = self._pending[start]
            end = start + len(chunk)
            if end < new_start:
                continue
            head = max(0, start - new_start)
            tail = min(len(new_data), end - new_start)
            new_data = new_data[:head] + chunk + new_data[tail:]
            new_start = min(new_start, start)
            new_end = max(new_end, end)
            del self._pending[start]

        self._pending[new_start] = new_data

        if min(self._pending) == next_index:
            chunk = self._pending.pop(next_index)
            self._output.push(chunk[:avail])
            if len(chunk) > avail:
                next_index += avail
                self._pending[next_index] = chunk[avail:]
            else:
                next_index += len(chunk)

        self._close_if_done(next_index)

    def _close_if_done(self, next_index: int) -> None:
        if self._eof_index == next_index and not self._pending:
            self._output.close()

    def bytes_pending(self) -> int:
        """Number of bytes held that could not yet be written."""
        return sum(len(chunk) for chunk in self._pending.values())

    def reader(self) -> ByteStream:
        """The output stream, for reading."""
        return self._output

    def writer(self) -> ByteStream:
        """The output stream, for inspecting its writing side."""
        return self._output