"""CLI state container."""

from ..config.settings import Settings
from ..infrastructure.logging import get_logger
from ..validation import HashlibDigester, MetalinkVerifier


class CLIState:
    """Application state container for CLI commands.

    Holds Settings and builds the collaborators commands need.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    def create_verifier(self) -> MetalinkVerifier:
        """Build a verifier reading files with the configured chunk size."""
        logger = get_logger("mirrorcheck.cli")
        digester = HashlibDigester(chunk_size=self.settings.chunk_size, logger=logger)
        return MetalinkVerifier(digester=digester, logger=logger)
