"""Small networking programs: a leaky-bucket simulator and TCP/UDP client-server pairs."""

__version__ = "0.1.0"

__all__ = ["leaky", "tcp_reverse", "udp_echo", "udp_time", "tcp_chat"]