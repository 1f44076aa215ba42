"""Bit framing for text carried one bit at a time over SIGUSR1 and SIGUSR2."""

__all__ = ["protocol"]