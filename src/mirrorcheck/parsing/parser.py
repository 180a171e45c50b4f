"""Event-driven metalink parser.

The XML tokenizer (expat) reports start-element, character-data and
end-element events. ``MetalinkParser`` tracks the open elements and hands the
text of ``file``, ``size``, ``hash`` and ``url`` elements to element-specific
builders that populate a :class:`MetalinkContext`.

The first error raised by a builder is latched: every later event becomes a
no-op and the error is raised once the tokenizer returns. Tokenizer errors
take precedence, since they mean the XML itself is malformed.
"""

import re
import typing as t
from dataclasses import dataclass, field
from pathlib import Path
from xml.parsers import expat

from ..domain.exceptions import (
    FileAccessError,
    InvalidFileNameError,
    InvalidParameterError,
    MalformedMetalinkError,
    MetalinkParseError,
    MissingFileAttributeError,
    MissingFileSizeError,
    MissingHashAttributeError,
    MissingHashContentError,
    PreferenceOutOfRangeError,
)
from ..domain.hash_validation import resolve_hash_type
from ..domain.metalink import (
    MAX_PREFERENCE,
    MIN_PREFERENCE,
    MIN_URL_LENGTH,
    HashDeclaration,
    MetalinkContext,
    UrlDeclaration,
)
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    from loguru import Logger

TAG_FILE = "file"
TAG_SIZE = "size"
TAG_HASH = "hash"
TAG_URL = "url"

ATTR_NAME = "name"
ATTR_PROTOCOL = "protocol"
ATTR_TYPE = "type"
ATTR_LOCATION = "location"
ATTR_PREFERENCE = "preference"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def find_attribute(attributes: t.Sequence[str], name: str) -> str | None:
    """Look up ``name`` in a flat ``[name, value, name, value, ...]`` list."""
    for index in range(0, len(attributes) - 1, 2):
        if attributes[index] == name:
            return attributes[index + 1]
    return None


def _parse_integer(text: str) -> int | None:
    if not _INTEGER_PATTERN.fullmatch(text):
        return None
    return int(text)


@dataclass
class _ElementFrame:
    """An open element and its attributes, copied from the tokenizer."""

    name: str
    attributes: list[str] = field(default_factory=list)
    dispatched: bool = False


class MetalinkParser:
    """Builds a :class:`MetalinkContext` from tokenizer events.

    A parser instance handles a single document and owns the context it
    builds until :meth:`parse` returns it.
    """

    def __init__(
        self,
        expected_filename: str,
        *,
        logger: t.Optional["Logger"] = None,
    ) -> None:
        if not expected_filename:
            raise InvalidParameterError("Expected filename cannot be empty")
        self._expected_filename = expected_filename
        self._logger = logger or get_logger(__name__)
        self._context = MetalinkContext()
        self._stack: list[_ElementFrame] = []
        self._error: MetalinkParseError | None = None
        self._builders: dict[str, t.Callable[[list[str], str], None]] = {
            TAG_FILE: self._build_file,
            TAG_SIZE: self._build_size,
            TAG_HASH: self._build_hash,
            TAG_URL: self._build_url,
        }

    @property
    def error(self) -> MetalinkParseError | None:
        """First error reported by an element builder, if any."""
        return self._error

    @property
    def current_element(self) -> str | None:
        """Name of the innermost open element, None when idle."""
        return self._stack[-1].name if self._stack else None

    # ========== Tokenizer events ==========

    def on_start(self, name: str, attributes: t.Sequence[str]) -> None:
        """Open an element. Attributes are processed along with its text."""
        if self._error is not None:
            return
        self._stack.append(_ElementFrame(name=name, attributes=list(attributes)))

    def on_character_data(self, text: str) -> None:
        """Dispatch text to the builder of the currently open element."""
        if self._error is not None or not self._stack:
            return
        frame = self._stack[-1]
        frame.dispatched = True
        self._dispatch(frame, text)

    def on_end(self, name: str) -> None:
        """Close the current element.

        An element that never received text is dispatched once with empty
        content, so empty ``hash`` or ``size`` elements are reported.
        """
        if self._error is not None or not self._stack:
            return
        frame = self._stack.pop()
        if not frame.dispatched:
            self._dispatch(frame, "")

    def _dispatch(self, frame: _ElementFrame, text: str) -> None:
        builder = self._builders.get(frame.name)
        if builder is None:
            return
        try:
            builder(frame.attributes, text)
        except MetalinkParseError as exc:
            self._logger.error(f"Metalink parser error in <{frame.name}>: {exc}")
            self._error = exc

    # ========== Element builders ==========

    def _build_file(self, attributes: list[str], text: str) -> None:
        name = find_attribute(attributes, ATTR_NAME)
        if name is None:
            raise MissingFileAttributeError(
                'Missing attribute "name" of file element'
            )
        if name != self._expected_filename:
            raise InvalidFileNameError(expected=self._expected_filename, actual=name)
        self._context.filename = name

    def _build_size(self, attributes: list[str], text: str) -> None:
        text = text.strip()
        if not text:
            raise MissingFileSizeError("File size is missing")
        size = _parse_integer(text)
        if size is None:
            raise InvalidParameterError(f"Size is invalid value: {text}")
        self._context.size = size

    def _build_hash(self, attributes: list[str], text: str) -> None:
        hash_type = find_attribute(attributes, ATTR_TYPE)
        if hash_type is None:
            raise MissingHashAttributeError(
                'Hash element doesn\'t have attribute "type"'
            )
        value = text.strip()
        if not value:
            raise MissingHashContentError(
                "Hash value is not present in hash element"
            )
        if hash_type and resolve_hash_type(hash_type) is None:
            self._logger.debug(f"Keeping hash of unsupported type {hash_type!r}")
        self._context.hashes.append(HashDeclaration(type=hash_type, value=value))

    def _build_url(self, attributes: list[str], text: str) -> None:
        url = text.strip()
        if len(url.encode("utf-8")) <= MIN_URL_LENGTH:
            if url:
                self._logger.debug(f"Ignoring too short mirror url {url!r}")
            return

        preference = 0
        raw_preference = find_attribute(attributes, ATTR_PREFERENCE)
        if raw_preference is not None:
            parsed = _parse_integer(raw_preference.strip())
            if parsed is None:
                raise InvalidParameterError(
                    f"Preference is invalid value: {raw_preference}"
                )
            if not MIN_PREFERENCE <= parsed <= MAX_PREFERENCE:
                raise PreferenceOutOfRangeError(parsed)
            preference = parsed

        self._context.urls.append(
            UrlDeclaration(
                url=url,
                protocol=find_attribute(attributes, ATTR_PROTOCOL),
                type=find_attribute(attributes, ATTR_TYPE),
                location=find_attribute(attributes, ATTR_LOCATION),
                preference=preference,
            )
        )

    # ========== Driver ==========

    def parse(self, raw: bytes | str) -> MetalinkContext:
        """Tokenize the whole document in one call and return the model.

        Raises:
            MalformedMetalinkError: If the document is not well-formed XML.
            MetalinkParseError: The first element-level error encountered.
        """
        tokenizer = expat.ParserCreate()
        tokenizer.ordered_attributes = True
        tokenizer.buffer_text = True
        tokenizer.StartElementHandler = self.on_start
        tokenizer.CharacterDataHandler = self.on_character_data
        tokenizer.EndElementHandler = self.on_end

        try:
            tokenizer.Parse(raw, True)
        except expat.ExpatError as exc:
            self._logger.error(f"Malformed metalink document: {exc}")
            raise MalformedMetalinkError(
                expat.ErrorString(exc.code),
                line=exc.lineno,
                column=exc.offset,
            ) from exc

        if self._error is not None:
            raise self._error
        return self._context


def parse(
    raw: bytes | str,
    expected_filename: str,
    *,
    logger: t.Optional["Logger"] = None,
) -> MetalinkContext:
    """Parse a metalink document describing ``expected_filename``."""
    return MetalinkParser(expected_filename, logger=logger).parse(raw)


def parse_file(
    path: Path,
    expected_filename: str,
    *,
    logger: t.Optional["Logger"] = None,
) -> MetalinkContext:
    """Read a metalink file whole and parse it.

    Raises:
        FileAccessError: If the file cannot be read.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise FileAccessError(
            f"Failed to read the metalink file {path}: {exc.strerror}",
            path=path,
            errno=exc.errno,
        ) from exc
    return parse(raw, expected_filename, logger=logger)
