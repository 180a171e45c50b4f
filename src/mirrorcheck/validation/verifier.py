"""Best-hash selection and verification of a downloaded file.

Mirrors often publish several digests for the same file, some weaker and
some mistyped. Verification picks the strongest supported algorithm present
in the metalink and accepts the file if any well-formed digest of that
algorithm matches. Weaker algorithms are never used as a fallback.
"""

import enum
import hmac
import time
import typing as t
from pathlib import Path

from ..domain.exceptions import ChecksumMismatchError, NoUsableHashError
from ..domain.hash_validation import (
    HashAlgorithm,
    VerificationResult,
    resolve_hash_type,
)
from ..domain.metalink import HashDeclaration, MetalinkContext
from ..infrastructure.logging import get_logger
from ..utils import hexdigest
from .base import BaseDigester
from .digest import HashlibDigester

if t.TYPE_CHECKING:
    from loguru import Logger


class CandidateOutcome(enum.Enum):
    """Result of checking one best-rank hash declaration."""

    MATCHED = "matched"
    MISMATCHED = "mismatched"
    SKIPPED = "skipped"  # malformed hex digest


def select_best_algorithm(context: MetalinkContext) -> HashAlgorithm:
    """Return the strongest supported algorithm declared in the metalink.

    Raises:
        NoUsableHashError: If no declaration uses a supported algorithm
        InvalidParameterError: If a declaration has an empty type name
    """
    best: HashAlgorithm | None = None
    for entry in context.hashes:
        algorithm = resolve_hash_type(entry.type)
        if algorithm is not None and (best is None or algorithm > best):
            best = algorithm

    if best is None:
        raise NoUsableHashError(
            "Invalid repo file: metalink has no hash of a supported type"
        )
    return best


class MetalinkVerifier:
    """Verifies a downloaded file against the hashes of a parsed metalink."""

    def __init__(
        self,
        *,
        digester: BaseDigester | None = None,
        logger: t.Optional["Logger"] = None,
    ) -> None:
        self._logger = logger or get_logger(__name__)
        self._digester = digester or HashlibDigester(logger=self._logger)

    def verify(self, file_path: Path, context: MetalinkContext) -> VerificationResult:
        """Check ``file_path`` against the best-rank hashes of ``context``.

        Candidates of the best rank are tried in document order until one
        matches. Malformed or mismatching candidates are skipped; file
        access and digest engine errors abort immediately.

        Returns:
            Details of the matching declaration.

        Raises:
            NoUsableHashError: If no declaration uses a supported algorithm.
            InvalidParameterError: If a declaration has an empty type name.
            ChecksumMismatchError: If no best-rank candidate matches.
            FileAccessError: If the file cannot be opened or read.
            DigestError: If the digest engine rejects the algorithm.
        """
        file_path = Path(file_path)
        start = time.perf_counter()
        algorithm = select_best_algorithm(context)
        self._logger.debug(
            f"Selected {algorithm.canonical_name} for verifying {file_path.name}"
        )

        # The file is digested at most once, on the first well-formed candidate.
        digests: dict[HashAlgorithm, bytes] = {}
        tried = 0
        skipped = 0
        for entry in context.hashes:
            if resolve_hash_type(entry.type) != algorithm:
                continue

            outcome = self._check_candidate(entry, algorithm, file_path, digests)
            if outcome is CandidateOutcome.SKIPPED:
                skipped += 1
                continue
            tried += 1
            if outcome is CandidateOutcome.MISMATCHED:
                continue

            duration_ms = (time.perf_counter() - start) * 1000
            self._logger.debug(
                f"Metalink hash verified for {file_path.name} ({entry.type})"
            )
            return VerificationResult(
                algorithm=algorithm,
                hash_type=entry.type,
                expected_hash=entry.value,
                calculated_hash=hexdigest.encode(digests[algorithm]),
                candidates_tried=tried,
                duration_ms=duration_ms,
            )

        self._logger.error(
            f"Error: Validating metalink ({file_path}) FAILED (digest mismatch)"
        )
        raise ChecksumMismatchError(
            file_path=file_path,
            algorithm=algorithm.canonical_name,
            candidates_tried=tried,
            candidates_skipped=skipped,
        )

    def _check_candidate(
        self,
        entry: HashDeclaration,
        algorithm: HashAlgorithm,
        file_path: Path,
        digests: dict[HashAlgorithm, bytes],
    ) -> CandidateOutcome:
        """Compare one declaration with the file digest.

        Only a correctly formatted digest is eligible; anything else is
        skipped so the next candidate of the same rank gets its chance.
        """
        if not hexdigest.is_valid_hex(entry.value, algorithm.digest_length):
            self._logger.debug(
                f"Skipping malformed {entry.type} digest: {entry.value!r}"
            )
            return CandidateOutcome.SKIPPED

        expected_digest = hexdigest.decode(entry.value)
        if algorithm not in digests:
            digests[algorithm] = self._digester.digest(
                file_path, algorithm.canonical_name
            )
        actual_digest = digests[algorithm]

        if hmac.compare_digest(expected_digest, actual_digest):
            return CandidateOutcome.MATCHED
        self._logger.warning(
            f"{entry.type} mismatch: expected {entry.value.lower()}, "
            f"got {hexdigest.encode(actual_digest)}"
        )
        return CandidateOutcome.MISMATCHED


def verify(
    file_path: Path,
    context: MetalinkContext,
    *,
    digester: BaseDigester | None = None,
) -> VerificationResult:
    """Verify a file with a default :class:`MetalinkVerifier`."""
    return MetalinkVerifier(digester=digester).verify(file_path, context)
