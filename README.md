# toytcp

Pure-Python building blocks for the receiving side of a TCP implementation.
The package needs nothing beyond the standard library.

- **`Wrap32`** (`toytcp.wrapping_integers`) is a 32-bit sequence number that
  wraps at 2**32. `Wrap32.wrap(n, zero_point)` turns an absolute stream index
  into a wrapped value, and `unwrap(zero_point, checkpoint)` turns it back into
  the absolute index closest to `checkpoint`.
- **`ByteStream`** and **`read`** (`toytcp.byte_stream`) form a bounded,
  in-memory byte pipe. `push`, `close`, `available_capacity` and
  `bytes_pushed` serve the writing end. `peek`, `pop`, `bytes_buffered`,
  `bytes_popped` and `is_finished` serve the reading end. `set_error` and
  `has_error` carry an error flag. `read(stream, length)` peeks and pops up to
  `length` bytes and returns them.
- **`Reassembler`** (`toytcp.reassembler`) takes indexed substrings, which may
  overlap and arrive out of order, and writes them in order into a
  `ByteStream`. Bytes beyond the stream's available capacity are discarded.
  Bytes that arrive early are held back, and `bytes_pending()` counts them.
  The stream is closed once the last substring has been written.
- **`TCPSenderMessage`** and **`TCPReceiverMessage`** (`toytcp.messages`) are
  dataclasses for the segments that pass between two peers.
  `TCPSenderMessage.sequence_length()` counts SYN and FIN as one sequence
  number each.
- **`TCPReceiver`** (`toytcp.tcp_receiver`) feeds incoming
  `TCPSenderMessage`s into a `Reassembler`. `send()` returns the
  acknowledgement number, the window size (capped at 65535) and the reset flag.

## Installation

```
pip install .
```

To also install the test tools:

```
pip install ".[test]"
```

## Example

```python
from toytcp.byte_stream import ByteStream, read
from toytcp.reassembler import Reassembler
from toytcp.wrapping_integers import Wrap32

stream = ByteStream(16)
reassembler = Reassembler(stream)

reassembler.insert(3, b"def", False)   # out of order, held back
reassembler.insert(0, b"abc", False)   # fills the gap
reassembler.insert(6, b"", True)       # end of stream

print(read(reassembler.reader(), 16))        # b'abcdef'
print(reassembler.reader().is_finished())    # True

isn = Wrap32(2**32 - 2)
seqno = Wrap32.wrap(5, isn)
print(seqno.unwrap(isn, 0))                  # 5
```

Receiving segments:

```python
from toytcp.byte_stream import ByteStream
from toytcp.messages import TCPSenderMessage
from toytcp.reassembler import Reassembler
from toytcp.tcp_receiver import TCPReceiver
from toytcp.wrapping_integers import Wrap32

receiver = TCPReceiver(Reassembler(ByteStream(64)))
receiver.receive(TCPSenderMessage(seqno=Wrap32(100), syn=True, payload=b"hi"))

reply = receiver.send()
print(reply.ackno)        # Wrap32(103)
print(reply.window_size)  # 62
print(receiver.reader().peek())  # b'hi'
```

## What the package does not do

The package has only the receiving half of a connection. Nothing in it
decides which segments to send from an outbound stream. Nothing in it tracks
outstanding segments, and nothing retransmits them on a timeout. It opens no
sockets and does no network I/O. Messages are plain Python objects, and it is
up to the caller to carry them between peers.

## Running the tests

```
pytest
```