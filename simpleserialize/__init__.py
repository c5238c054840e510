"""Simple Serialize (SSZ): typed encoding, decoding, hash tree roots and JSON forms."""

__version__ = "0.8.0"