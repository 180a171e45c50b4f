"""Base interface for digest engines."""

from abc import ABC, abstractmethod
from pathlib import Path


class BaseDigester(ABC):
    """Abstract base class for file digest implementations."""

    @abstractmethod
    def digest(self, file_path: Path, algorithm: str) -> bytes:
        """Stream a file through the named algorithm.

        Args:
            file_path: File to digest (opened read-only)
            algorithm: Digest name in the engine's own namespace

        Returns:
            The raw digest bytes.

        Raises:
            FileAccessError: If the file cannot be opened or read.
            UnsupportedDigestError: If the engine does not know the algorithm.
            DigestForbiddenError: If the algorithm is disabled by FIPS mode.
        """
