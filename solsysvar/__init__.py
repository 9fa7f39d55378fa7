"""Cluster sysvar models (clock, fees, rent, instructions) and program address helpers."""

__version__ = "0.8.4"
__all__ = ["clock", "fees", "instructions", "pubkey", "rent", "sysvar"]