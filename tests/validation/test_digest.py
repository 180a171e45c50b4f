"""Tests for the hashlib digest adapter."""

import hashlib
import sys
from pathlib import Path

import pytest

from mirrorcheck.domain.exceptions import (
    DigestForbiddenError,
    FileAccessError,
    UnsupportedDigestError,
)
from mirrorcheck.validation import digest as digest_module
from mirrorcheck.validation.digest import HashlibDigester, digest_file


class TestHashlibDigesterSuccess:
    """Happy-path digest computation."""

    @pytest.mark.parametrize("algorithm", ["md5", "sha1", "sha256", "sha512"])
    def test_digest_matches_hashlib(self, tmp_path: Path, algorithm):
        """Raw digests equal hashlib's for every supported algorithm."""
        content = b"metalink verification content"
        file_path = tmp_path / "file.bin"
        file_path.write_bytes(content)

        result = HashlibDigester().digest(file_path, algorithm)

        assert result == hashlib.new(algorithm, content).digest()

    def test_chunked_reading(self, tmp_path: Path):
        """Chunk size does not change the digest."""
        content = b"x" * (64 * 1024 + 3)
        file_path = tmp_path / "large.bin"
        file_path.write_bytes(content)

        result = HashlibDigester(chunk_size=7).digest(file_path, "sha256")

        assert result == hashlib.sha256(content).digest()

    def test_empty_file(self, tmp_path: Path):
        file_path = tmp_path / "empty.bin"
        file_path.write_bytes(b"")

        result = digest_file(file_path, "md5")

        assert result.hex() == "d41d8cd98f00b204e9800998ecf8427e"

    def test_logs_digest(self, tmp_path: Path, mock_logger):
        file_path = tmp_path / "file.bin"
        file_path.write_bytes(b"abc")

        HashlibDigester(logger=mock_logger).digest(file_path, "sha1")

        mock_logger.debug.assert_called_once()


class TestHashlibDigesterFailures:
    """Error mapping of the adapter."""

    def test_missing_file(self, tmp_path: Path):
        """Open failures carry the system errno."""
        file_path = tmp_path / "missing.bin"

        with pytest.raises(FileAccessError) as exc:
            digest_file(file_path, "sha256")

        assert exc.value.errno is not None
        assert exc.value.path == file_path

    def test_directory_path(self, tmp_path: Path):
        with pytest.raises(FileAccessError):
            digest_file(tmp_path, "sha256")

    def test_read_error(self, tmp_path: Path, mocker):
        """A read failure mid-stream aborts with FileAccessError."""
        file_path = tmp_path / "file.bin"
        file_path.write_bytes(b"data")
        handle = mocker.MagicMock()
        handle.__enter__.return_value = handle
        handle.read.side_effect = OSError(5, "Input/output error")
        mocker.patch.object(Path, "open", return_value=handle)

        with pytest.raises(FileAccessError) as exc:
            digest_file(file_path, "sha256")

        assert exc.value.errno == 5
        handle.__exit__.assert_called_once()

    def test_unknown_algorithm(self, tmp_path: Path):
        """Names unknown to hashlib raise UnsupportedDigestError."""
        file_path = tmp_path / "file.bin"
        file_path.write_bytes(b"data")

        with pytest.raises(UnsupportedDigestError) as exc:
            digest_file(file_path, "not-a-digest")

        assert exc.value.algorithm == "not-a-digest"

    def test_md5_forbidden_in_fips_mode(self, tmp_path: Path, mocker):
        """OpenSSL refusing MD5 under FIPS is not hidden by hashlib's builtin md5."""
        openssl = pytest.importorskip("_hashlib")
        file_path = tmp_path / "file.bin"
        file_path.write_bytes(b"data")
        mocker.patch.object(
            openssl,
            "new",
            side_effect=ValueError("[digital envelope routines] unsupported"),
        )
        mocker.patch.object(digest_module, "fips_mode_enabled", return_value=True)

        with pytest.raises(DigestForbiddenError) as exc:
            digest_file(file_path, "md5")

        assert exc.value.algorithm == "md5"

    def test_md5_never_constructed_in_fips_mode(self, tmp_path: Path, mocker):
        """The FIPS check runs before hashlib is asked for MD5."""
        file_path = tmp_path / "file.bin"
        file_path.write_bytes(b"data")
        new = mocker.spy(digest_module.hashlib, "new")
        mocker.patch.object(digest_module, "fips_mode_enabled", return_value=True)

        with pytest.raises(DigestForbiddenError):
            digest_file(file_path, "MD5")

        new.assert_not_called()

    def test_sha256_allowed_in_fips_mode(self, tmp_path: Path, mocker):
        file_path = tmp_path / "file.bin"
        file_path.write_bytes(b"data")
        mocker.patch.object(digest_module, "fips_mode_enabled", return_value=True)

        result = digest_file(file_path, "sha256")

        assert result == hashlib.sha256(b"data").digest()

    def test_md5_failure_without_fips_is_unsupported(self, tmp_path: Path, mocker):
        """Without FIPS mode the failure stays a generic unsupported digest."""
        file_path = tmp_path / "file.bin"
        file_path.write_bytes(b"data")
        mocker.patch.object(digest_module.hashlib, "new", side_effect=ValueError)
        mocker.patch.object(digest_module, "fips_mode_enabled", return_value=False)

        with pytest.raises(UnsupportedDigestError):
            digest_file(file_path, "md5")

    def test_other_algorithm_under_fips_is_unsupported(self, tmp_path: Path, mocker):
        """Only MD5 maps to the compliance error."""
        file_path = tmp_path / "file.bin"
        file_path.write_bytes(b"data")
        mocker.patch.object(digest_module.hashlib, "new", side_effect=ValueError)
        mocker.patch.object(digest_module, "fips_mode_enabled", return_value=True)

        with pytest.raises(UnsupportedDigestError):
            digest_file(file_path, "sha1")


class TestFipsModeEnabled:
    """FIPS detection."""

    def test_kernel_flag(self, tmp_path: Path, mocker):
        openssl = pytest.importorskip("_hashlib")
        flag = tmp_path / "fips_enabled"
        flag.write_text("1\n")
        mocker.patch.object(digest_module, "FIPS_ENABLED_PATH", flag)
        mocker.patch.object(openssl, "get_fips_mode", return_value=0, create=True)

        assert digest_module.fips_mode_enabled() is True

    def test_disabled(self, tmp_path: Path, mocker):
        openssl = pytest.importorskip("_hashlib")
        mocker.patch.object(digest_module, "FIPS_ENABLED_PATH", tmp_path / "absent")
        mocker.patch.object(openssl, "get_fips_mode", return_value=0, create=True)

        assert digest_module.fips_mode_enabled() is False

    def test_openssl_flag(self, tmp_path: Path, mocker):
        openssl = pytest.importorskip("_hashlib")
        mocker.patch.object(digest_module, "FIPS_ENABLED_PATH", tmp_path / "absent")
        mocker.patch.object(openssl, "get_fips_mode", return_value=1, create=True)

        assert digest_module.fips_mode_enabled() is True

    def test_without_openssl_module(self, tmp_path: Path, mocker):
        """Interpreters built without OpenSSL fall back to the kernel flag."""
        flag = tmp_path / "fips_enabled"
        flag.write_text("0\n")
        mocker.patch.object(digest_module, "FIPS_ENABLED_PATH", flag)
        mocker.patch.dict(sys.modules, {"_hashlib": None})

        assert digest_module.fips_mode_enabled() is False
