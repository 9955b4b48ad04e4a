"""Messages exchanged between a TCP sender and the peer's receiver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from toytcp.wrapping_integers import Wrap32

MAX_WINDOW_SIZE = 0xFFFF


@dataclass
class TCPSenderMessage:
    """A segment as produced by a sender: sequence number, flags and payload."""

    seqno: Wrap32 = field(default_factory=lambda: Wrap32(0))
    syn: bool = False
    payload: bytes = b""
    fin: bool = False
    rst: bool = False

    def sequence_length(self) -> int:
        """How many sequence numbers this segment occupies (SYN and FIN count one each)."""
        return int(self.syn) + len(self.payload) + int(self.fin)


@dataclass
class TCPReceiverMessage:
    """What a receiver tells the peer's sender: acknowledgement, window and reset flag."""

    ackno: Optional[Wrap32] = None
    window_size: int = 0
    rst: bool = False