import pytest
from hypothesis import given
from hypothesis import strategies as st

from toytcp.byte_stream import ByteStream, read
from toytcp.reassembler import Reassembler


def make(capacity=64):
    return Reassembler(ByteStream(capacity))


def run(segments, capacity=64):
    reassembler = make(capacity)
    for index, chunk, last in segments:
        reassembler.insert(index, chunk, last)
    return reassembler


@pytest.mark.parametrize(
    "segments, peeked, pending, closed",
    [
        ([(0, b"abcd", False)], b"abcd", 0, False),
        ([(4, b"efgh", False)], b"", 4, False),
        ([(4, b"efgh", False), (0, b"abcd", False)], b"abcdefgh", 0, False),
        ([(2, b"cdef", False), (4, b"efghi", False)], b"", 7, False),
        (
            [(2, b"cdef", False), (4, b"efghi", False), (0, b"abc", False)],
            b"abcdefghi",
            0,
            False,
        ),
        ([(0, b"abc", False), (0, b"abc", False), (1, b"bc", False)], b"abc", 0, False),
        ([(0, b"xyz", True)], b"xyz", 0, True),
        ([(0, b"", True)], b"", 0, True),
        ([(2, b"llo", True)], b"", 3, False),
        ([(2, b"llo", True), (0, b"he", False)], b"hello", 0, True),
    ],
)
def test_insert_sequences(segments, peeked, pending, closed):
    reassembler = run(segments)
    assert reassembler.reader().peek() == peeked
    assert reassembler.bytes_pending() == pending
    assert reassembler.writer().bytes_pushed() == len(peeked)
    assert reassembler.writer().is_closed() is closed


def test_bytes_beyond_capacity_are_discarded():
    capacity = 4
    data = b"abcdefgh"
    reassembler = run([(0, data, False), (capacity, data[capacity:], False)], capacity)
    assert reassembler.reader().peek() == data[:capacity]
    assert reassembler.bytes_pending() == 0
    assert read(reassembler.reader(), capacity) == data[:capacity]
    reassembler.insert(capacity, data[capacity:], True)
    assert reassembler.reader().peek() == data[capacity:]
    assert reassembler.writer().is_closed()


def test_stream_finishes_once_drained():
    reassembler = run([(0, b"xyz", True)])
    assert not reassembler.reader().is_finished()
    assert read(reassembler.reader(), 3) == b"xyz"
    assert reassembler.reader().is_finished()


@st.composite
def pieces(draw):
    data = draw(st.binary(min_size=1, max_size=60))
    intervals = draw(
        st.lists(
            st.tuples(st.integers(0, len(data)), st.integers(0, len(data))),
            max_size=15,
        )
    )
    segments = [(min(a, b), data[min(a, b) : max(a, b)]) for a, b in intervals]
    segments.append((0, data))
    order = draw(st.permutations(segments))
    return data, order


@given(pieces())
def test_any_order_reassembles_original(case):
    data, segments = case
    reassembler = make(len(data))
    for index, chunk in segments:
        reassembler.insert(index, chunk, False)
        assert reassembler.bytes_pending() + reassembler.writer().bytes_pushed() <= len(data)
    reassembler.insert(len(data), b"", True)
    assert reassembler.reader().peek() == data
    assert reassembler.bytes_pending() == 0
    assert reassembler.writer().is_closed()