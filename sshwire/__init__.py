"""SSH transport-layer building blocks: framing, ciphers, key exchange and compression."""

__version__ = "0.1.0"