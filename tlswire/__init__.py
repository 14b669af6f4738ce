"""Encoding and decoding of TLS 1.3 wire structures."""

__version__ = "0.1.0"