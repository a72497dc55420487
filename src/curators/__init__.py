"""Curators backend: Solana swap quotes and unsigned swap transactions."""

__version__ = "0.1.0"
