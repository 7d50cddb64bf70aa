"""HTTP API for EVM wallet generation, balance queries and native transfers."""

__version__ = "0.1.0"
