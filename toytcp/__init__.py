"""Building blocks for the receiving side of TCP: sequence numbers, byte streams, reassembly, messages and a receiver."""

__version__ = "0.1.0"

__all__ = ["wrapping_integers", "byte_stream", "reassembler", "messages", "tcp_receiver"]