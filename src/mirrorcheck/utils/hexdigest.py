"""Hex digest validation and conversion."""

import re
from typing import Final

from ..domain.exceptions import HexDecodeError

_HEX_PATTERN: Final = re.compile(r"[0-9A-Fa-f]+")


def is_valid_hex(text: str, expected_byte_length: int) -> bool:
    """Check that ``text`` is a hex digest of exactly the expected size.

    Every character must be an ASCII hex digit (either case) and the string
    must hold two characters per raw digest byte.

    Args:
        text: Hex digest text to check
        expected_byte_length: Raw digest length in bytes

    Returns:
        True if the digest is well formed, False otherwise

    Examples:
        >>> is_valid_hex("d41d8cd98f00b204e9800998ecf8427e", 16)
        True
        >>> is_valid_hex("d41d8cd9", 16)
        False
    """
    if not text or expected_byte_length <= 0:
        return False
    if not _HEX_PATTERN.fullmatch(text):
        return False
    return len(text) == expected_byte_length * 2


def decode(text: str) -> bytes:
    """Convert a hex digest to raw bytes.

    Strict counterpart of ``bytes.fromhex``: whitespace, odd lengths and
    empty input are rejected rather than skipped or truncated.

    Raises:
        HexDecodeError: If ``text`` is not an even-length hex string
    """
    if not text:
        raise HexDecodeError("Hex digest cannot be empty")
    if len(text) % 2:
        raise HexDecodeError(f"Hex digest has odd length {len(text)}")
    if not _HEX_PATTERN.fullmatch(text):
        raise HexDecodeError(f"Hex digest contains non-hex characters: {text!r}")
    return bytes.fromhex(text)


def encode(data: bytes) -> str:
    """Convert raw digest bytes to lowercase hex."""
    return data.hex()
