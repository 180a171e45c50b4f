"""Domain layer - metalink models, hash registry and exceptions."""

from .exceptions import (
    ChecksumMismatchError,
    DigestError,
    DigestForbiddenError,
    FileAccessError,
    HexDecodeError,
    InvalidFileNameError,
    InvalidParameterError,
    MalformedMetalinkError,
    MetalinkError,
    MetalinkParseError,
    MetalinkVerificationError,
    MissingFileAttributeError,
    MissingFileSizeError,
    MissingHashAttributeError,
    MissingHashContentError,
    NoUsableHashError,
    PreferenceOutOfRangeError,
    UnsupportedDigestError,
)
from .hash_validation import (
    HASH_TYPE_ALIASES,
    HashAlgorithm,
    VerificationResult,
    resolve_hash_type,
)
from .metalink import (
    MIN_URL_LENGTH,
    HashDeclaration,
    MetalinkContext,
    UrlDeclaration,
)

__all__ = [
    # Metalink Models
    "MetalinkContext",
    "HashDeclaration",
    "UrlDeclaration",
    "MIN_URL_LENGTH",
    # Hash Registry
    "HASH_TYPE_ALIASES",
    "HashAlgorithm",
    "VerificationResult",
    "resolve_hash_type",
    # Exceptions
    "ChecksumMismatchError",
    "DigestError",
    "DigestForbiddenError",
    "FileAccessError",
    "HexDecodeError",
    "InvalidFileNameError",
    "InvalidParameterError",
    "MalformedMetalinkError",
    "MetalinkError",
    "MetalinkParseError",
    "MetalinkVerificationError",
    "MissingFileAttributeError",
    "MissingFileSizeError",
    "MissingHashAttributeError",
    "MissingHashContentError",
    "NoUsableHashError",
    "PreferenceOutOfRangeError",
    "UnsupportedDigestError",
]
