"""Custom exceptions for metalink parsing and verification."""

from pathlib import Path


class MetalinkError(Exception):
    """Base exception for mirrorcheck errors."""

    pass


class MetalinkParseError(MetalinkError):
    """Base exception for errors found while parsing a metalink document."""

    pass


class MalformedMetalinkError(MetalinkParseError):
    """Raised when the XML tokenizer rejects the document.

    Tokenizer errors indicate malformed XML rather than malformed metalink
    semantics, so they win over any element-level error found earlier.
    """

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class MissingFileAttributeError(MetalinkParseError):
    """Raised when the file element has no name attribute."""

    pass


class InvalidFileNameError(MetalinkParseError):
    """Raised when the file element names a different file than expected."""

    def __init__(self, *, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid filename in metalink: expected {expected!r}, got {actual!r}"
        )


class MissingFileSizeError(MetalinkParseError):
    """Raised when the size element carries no content."""

    pass


class MissingHashAttributeError(MetalinkParseError):
    """Raised when a hash element has no type attribute."""

    pass


class MissingHashContentError(MetalinkParseError):
    """Raised when a hash element carries no digest text."""

    pass


class InvalidParameterError(MetalinkParseError):
    """Raised for values that do not parse, such as a non-integer size."""

    pass


class PreferenceOutOfRangeError(MetalinkParseError):
    """Raised when a url preference falls outside 0-100."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(
            f'Bad value ("{value}") of "preference" attribute in url element '
            "(should be in range 0-100)"
        )


class MetalinkVerificationError(MetalinkError):
    """Base exception for verification failures of a downloaded file."""

    pass


class NoUsableHashError(MetalinkVerificationError):
    """Raised when no hash in the metalink uses a supported algorithm."""

    pass


class ChecksumMismatchError(MetalinkVerificationError):
    """Raised when no best-rank candidate matches the file digest."""

    def __init__(
        self,
        *,
        file_path: Path,
        algorithm: str,
        candidates_tried: int,
        candidates_skipped: int = 0,
    ) -> None:
        self.file_path = file_path
        self.algorithm = algorithm
        self.candidates_tried = candidates_tried
        self.candidates_skipped = candidates_skipped
        message = (
            f"Checksum validation failed for {file_path}: no {algorithm} digest "
            f"matched ({candidates_tried} compared, "
            f"{candidates_skipped} malformed)"
        )
        super().__init__(message)


class DigestError(MetalinkError):
    """Base exception for digest engine failures."""

    pass


class UnsupportedDigestError(DigestError):
    """Raised when the digest engine does not know the algorithm name."""

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(f"Unknown message digest {algorithm}")


class DigestForbiddenError(DigestError):
    """Raised when MD5 is requested while OpenSSL runs in FIPS mode."""

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(
            f"Digest {algorithm} is forbidden under FIPS compliance mode"
        )


class FileAccessError(MetalinkError):
    """Raised when a file cannot be opened or read.

    Keeps the underlying errno so callers can report the system error.
    """

    def __init__(self, message: str, *, path: Path, errno: int | None = None) -> None:
        self.path = path
        self.errno = errno
        super().__init__(message)


class HexDecodeError(MetalinkError, ValueError):
    """Raised when a hex digest string cannot be decoded."""

    pass
