"""File digesting and metalink verification."""

from .base import BaseDigester
from .digest import HashlibDigester, digest_file, fips_mode_enabled
from .verifier import (
    CandidateOutcome,
    MetalinkVerifier,
    select_best_algorithm,
    verify,
)

__all__ = [
    "BaseDigester",
    "CandidateOutcome",
    "HashlibDigester",
    "MetalinkVerifier",
    "digest_file",
    "fips_mode_enabled",
    "select_best_algorithm",
    "verify",
]
