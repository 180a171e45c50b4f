"""hashlib-backed digest engine adapter."""

import hashlib
import typing as t
from pathlib import Path

from ..domain.exceptions import (
    DigestForbiddenError,
    FileAccessError,
    UnsupportedDigestError,
)
from ..infrastructure.logging import get_logger
from .base import BaseDigester

if t.TYPE_CHECKING:
    from loguru import Logger

DEFAULT_CHUNK_SIZE = 8192
FIPS_ENABLED_PATH = Path("/proc/sys/crypto/fips_enabled")


def fips_mode_enabled() -> bool:
    """Whether OpenSSL or the kernel runs in FIPS mode."""
    try:
        import _hashlib
    except ImportError:
        _hashlib = None
    get_fips_mode = getattr(_hashlib, "get_fips_mode", None)
    if get_fips_mode is not None and get_fips_mode():
        return True
    try:
        return FIPS_ENABLED_PATH.read_text().strip() == "1"
    except OSError:
        return False


class HashlibDigester(BaseDigester):
    """Computes file digests with hashlib, reading in fixed-size chunks."""

    def __init__(
        self,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        logger: t.Optional["Logger"] = None,
    ) -> None:
        self._chunk_size = chunk_size
        self._logger = logger or get_logger(__name__)

    def digest(self, file_path: Path, algorithm: str) -> bytes:
        """Stream ``file_path`` through ``algorithm`` and return the raw digest.

        Raises:
            FileAccessError: If the file cannot be opened or read.
            UnsupportedDigestError: If hashlib does not know the algorithm.
            DigestForbiddenError: If MD5 is requested under FIPS mode.
        """
        try:
            handle = file_path.open("rb")
        except OSError as exc:
            self._logger.error(f"Metalink: validating ({file_path}) FAILED")
            raise FileAccessError(
                f"Unable to open file for validation: {file_path}: {exc.strerror}",
                path=file_path,
                errno=exc.errno,
            ) from exc

        with handle:
            hasher = self._new_hasher(algorithm)
            try:
                while chunk := handle.read(self._chunk_size):
                    hasher.update(chunk)
            except OSError as exc:
                self._logger.error(f"Metalink: validating ({file_path}) FAILED")
                raise FileAccessError(
                    f"Unable to read file for validation: {file_path}: {exc.strerror}",
                    path=file_path,
                    errno=exc.errno,
                ) from exc

        raw_digest = hasher.digest()
        self._logger.debug(
            f"Computed {algorithm} for {file_path.name}: {raw_digest.hex()}"
        )
        return raw_digest

    def _new_hasher(self, algorithm: str) -> "hashlib._Hash":
        # hashlib falls back to its builtin md5 when OpenSSL refuses it, so
        # FIPS mode has to be checked before the constructor runs.
        if algorithm.lower() == "md5" and fips_mode_enabled():
            self._logger.error("Digest init failed: md5 is disabled in FIPS mode")
            raise DigestForbiddenError(algorithm)
        try:
            return hashlib.new(algorithm)
        except ValueError as exc:
            self._logger.error(f"Unknown message digest {algorithm}")
            raise UnsupportedDigestError(algorithm) from exc


def digest_file(
    file_path: Path,
    algorithm: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> bytes:
    """Digest a file with a default :class:`HashlibDigester`."""
    return HashlibDigester(chunk_size=chunk_size).digest(Path(file_path), algorithm)
