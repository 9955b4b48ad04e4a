"""The receiving half of a TCP endpoint."""

from __future__ import annotations

from toytcp.byte_stream import ByteStream
from toytcp.messages import MAX_WINDOW_SIZE, TCPReceiverMessage, TCPSenderMessage
from toytcp.reassembler import Reassembler
from toytcp.wrapping_integers import Wrap32


class TCPReceiver:
    """Turns incoming segments into stream bytes and reports acknowledgements and window size."""

    def __init__(self, reassembler: Reassembler) -> None:
        self._reassembler = reassembler
        self._zero_point = Wrap32(0)
        self._received_syn = False

    def receive(self, message: TCPSenderMessage) -> None:
        """Insert the segment's payload into the reassembler at the right stream index."""
        if message.rst:
            self.reader().set_error()
            return

        if not self._received_syn:
            if not message.syn:
                return
            self._zero_point = message.seqno
            self._received_syn = True

        absolute_seqno = message.seqno.unwrap(self._zero_point, self.writer().bytes_pushed())
        stream_index = absolute_seqno + int(message.syn) - 1
        if stream_index < 0:
            # A segment without SYN that claims the SYN's own sequence number.
            return
        self._reassembler.insert(stream_index, message.payload, message.fin)

    def send(self) -> TCPReceiverMessage:
        """Build the message to send back to the peer's sender."""
        writer = self.writer()
        window_size = min(writer.available_capacity(), MAX_WINDOW_SIZE)
        ackno = None
        if self._received_syn:
            absolute_ackno = writer.bytes_pushed() + 1 + int(writer.is_closed())
            ackno = Wrap32.wrap(absolute_ackno, self._zero_point)
        return TCPReceiverMessage(ackno=ackno, window_size=window_size, rst=writer.has_error())

    def reassembler(self) -> Reassembler:
        return self._reassembler

    def reader(self) -> ByteStream:
        """The reassembled output stream, for reading."""
        return self._reassembler.reader()

    def writer(self) -> ByteStream:
        """The reassembled output stream, for inspecting its writing side."""
        return self._reassembler.writer()