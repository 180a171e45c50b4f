"""mirrorcheck - verify downloaded files against metalink descriptors."""

from .domain import (
    ChecksumMismatchError,
    HashAlgorithm,
    HashDeclaration,
    MetalinkContext,
    MetalinkError,
    MetalinkParseError,
    MetalinkVerificationError,
    NoUsableHashError,
    UrlDeclaration,
    VerificationResult,
)
from .parsing import MetalinkParser, parse, parse_file
from .validation import MetalinkVerifier, verify

__all__ = [
    "ChecksumMismatchError",
    "HashAlgorithm",
    "HashDeclaration",
    "MetalinkContext",
    "MetalinkError",
    "MetalinkParseError",
    "MetalinkParser",
    "MetalinkVerificationError",
    "MetalinkVerifier",
    "NoUsableHashError",
    "UrlDeclaration",
    "VerificationResult",
    "parse",
    "parse_file",
    "verify",
]
