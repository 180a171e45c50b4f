"""Pytest configuration and fixtures for mirrorcheck tests."""

import hashlib
import typing as t

import loguru
import pytest
from typer.testing import CliRunner

from mirrorcheck.cli.app import create_cli_app
from mirrorcheck.config.settings import Environment, LogLevel, Settings
from mirrorcheck.infrastructure.logging import reset_logging


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
    )


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def calculate_hash():
    """Factory fixture to calculate hex digests for test content.

    Usage:
        def test_something(calculate_hash):
            hash_value = calculate_hash(b"content", "sha256")
    """

    def _calculate(content: bytes, algorithm: str) -> str:
        hasher = hashlib.new(algorithm)
        hasher.update(content)
        return hasher.hexdigest()

    return _calculate


@pytest.fixture
def metalink_xml():
    """Factory fixture building metalink documents.

    ``hashes`` is a list of ``(type, value)`` pairs and ``urls`` a list of
    ``(url, attributes)`` pairs, both emitted in order.
    """

    def _build(
        filename: str = "repomd.xml",
        size: int | str | None = 1024,
        hashes: t.Sequence[tuple[str, str]] = (),
        urls: t.Sequence[tuple[str, dict[str, str]]] = (),
    ) -> str:
        lines = [
            '<?xml version="1.0" encoding="utf-8"?>',
            '<metalink version="3.0" xmlns="http://www.metalinker.org/">',
            "  <files>",
            f'    <file name="{filename}">',
        ]
        if size is not None:
            lines.append(f"      <size>{size}</size>")
        lines.append("      <verification>")
        for hash_type, value in hashes:
            lines.append(f'        <hash type="{hash_type}">{value}</hash>')
        lines.append("      </verification>")
        lines.append("      <resources>")
        for url, attributes in urls:
            rendered = "".join(f' {key}="{value}"' for key, value in attributes.items())
            lines.append(f"        <url{rendered}>{url}</url>")
        lines.extend(
            [
                "      </resources>",
                "    </file>",
                "  </files>",
                "</metalink>",
            ]
        )
        return "\n".join(lines)

    return _build


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()


@pytest.fixture
def test_app(test_settings):
    """Provide CLI app with injected test settings."""
    return create_cli_app(settings=test_settings)
