"""Metalink document model built by the parser."""

from pydantic import BaseModel, ConfigDict, Field

from .hash_validation import HashAlgorithm, resolve_hash_type

# Mirror entries this short are treated as noise and dropped.
MIN_URL_LENGTH = 4

MIN_PREFERENCE = 0
MAX_PREFERENCE = 100


class HashDeclaration(BaseModel):
    """A checksum published for the target file."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(description="Raw type attribute, e.g. sha-256")
    value: str = Field(min_length=1, description="Hex digest text content")

    @property
    def algorithm(self) -> HashAlgorithm | None:
        """Registry algorithm for this entry, None when unsupported."""
        if not self.type:
            return None
        return resolve_hash_type(self.type)


class UrlDeclaration(BaseModel):
    """A mirror URL for the target file."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1, description="Mirror URL")
    protocol: str | None = Field(default=None, description="Transfer protocol")
    type: str | None = Field(default=None, description="URL type, e.g. https")
    location: str | None = Field(default=None, description="Mirror country code")
    preference: int = Field(
        default=0,
        ge=MIN_PREFERENCE,
        le=MAX_PREFERENCE,
        description="Mirror preference - higher numbers are preferred",
    )


class MetalinkContext(BaseModel):
    """Parsed metalink for a single file.

    Populated by the parser, then handed read-only to verification.
    """

    filename: str | None = Field(
        default=None,
        description="Name from the file element, equal to the expected filename",
    )
    size: int | None = Field(
        default=None,
        description="Declared file size in bytes (informational)",
    )
    hashes: list[HashDeclaration] = Field(
        default_factory=list,
        description="Hash declarations in document order",
    )
    urls: list[UrlDeclaration] = Field(
        default_factory=list,
        description="Mirror declarations in document order",
    )

    def urls_by_preference(self) -> list[UrlDeclaration]:
        """Mirrors ordered by descending preference.

        Ties keep document order.
        """
        return sorted(self.urls, key=lambda url: url.preference, reverse=True)

    def hashes_of(self, algorithm: HashAlgorithm) -> list[HashDeclaration]:
        """Declarations whose type resolves to ``algorithm``."""
        return [entry for entry in self.hashes if entry.algorithm == algorithm]
