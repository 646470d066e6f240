"""Console tool for classic text ciphers, encodings and hashing."""

__version__ = "0.2.0"