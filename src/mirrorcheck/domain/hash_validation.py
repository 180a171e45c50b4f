"""Hash algorithm registry and verification result models."""

import enum
from types import MappingProxyType
from typing import Final, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidParameterError


class HashAlgorithm(enum.IntEnum):
    """Supported checksum algorithms.

    The ordinal doubles as strength rank: higher values are preferred.
    """

    MD5 = 0
    SHA1 = 1
    SHA256 = 2
    SHA512 = 3

    @property
    def canonical_name(self) -> str:
        """Name understood by the digest engine."""
        return _CANONICAL_NAMES[self]

    @property
    def digest_length(self) -> int:
        """Raw digest length in bytes."""
        return {
            HashAlgorithm.MD5: 16,
            HashAlgorithm.SHA1: 20,
            HashAlgorithm.SHA256: 32,
            HashAlgorithm.SHA512: 64,
        }[self]

    @property
    def hex_length(self) -> int:
        """Expected hexadecimal string length for the algorithm."""
        return self.digest_length * 2


_CANONICAL_NAMES: Final = MappingProxyType(
    {
        HashAlgorithm.MD5: "md5",
        HashAlgorithm.SHA1: "sha1",
        HashAlgorithm.SHA256: "sha256",
        HashAlgorithm.SHA512: "sha512",
    }
)

# Spelling variants are listed explicitly; lookups are case-sensitive.
HASH_TYPE_ALIASES: Final[Mapping[str, HashAlgorithm]] = MappingProxyType(
    {
        "md5": HashAlgorithm.MD5,
        "sha1": HashAlgorithm.SHA1,
        "sha-1": HashAlgorithm.SHA1,
        "sha256": HashAlgorithm.SHA256,
        "sha-256": HashAlgorithm.SHA256,
        "sha512": HashAlgorithm.SHA512,
        "sha-512": HashAlgorithm.SHA512,
    }
)


def resolve_hash_type(name: str) -> HashAlgorithm | None:
    """Resolve a metalink hash type attribute to a supported algorithm.

    Metalinks may advertise algorithms we do not support yet. That is not an
    error: the entry is simply never picked as the best hash.

    Args:
        name: Raw ``type`` attribute of a hash element

    Returns:
        The matching algorithm, or None when the name is unsupported

    Raises:
        InvalidParameterError: If the name is empty
    """
    if not name:
        raise InvalidParameterError("Hash type name cannot be empty")
    return HASH_TYPE_ALIASES.get(name)


class VerificationResult(BaseModel):
    """Outcome of a successful metalink verification."""

    model_config = ConfigDict(frozen=True)

    algorithm: HashAlgorithm = Field(description="Algorithm used for the match")
    hash_type: str = Field(description="Raw type attribute of the matching entry")
    expected_hash: str = Field(description="Declared digest that matched")
    calculated_hash: str = Field(description="Digest computed from the file")
    candidates_tried: int = Field(
        ge=1,
        description="Best-rank candidates compared before the match",
    )
    duration_ms: float = Field(
        default=0.0,
        ge=0,
        description="Time spent verifying in milliseconds",
    )

    @property
    def is_valid(self) -> bool:
        """Whether the calculated digest equals the declared one."""
        return self.expected_hash.lower() == self.calculated_hash.lower()
