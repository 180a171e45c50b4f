"""Shared helpers."""

from .hexdigest import decode, encode, is_valid_hex

__all__ = ["decode", "encode", "is_valid_hex"]
