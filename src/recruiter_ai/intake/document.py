"""Resume document validation and encoding."""

import asyncio
import base64
import logging
import mimetypes
from pathlib import Path

from recruiter_ai.config import DEFAULT_MAX_DOCUMENT_BYTES
from recruiter_ai.exceptions import (
    DocumentNotFoundError,
    DocumentTooLargeError,
    EmptyDocumentError,
    UnsupportedDocumentTypeError,
)
from recruiter_ai.models.document import PDF_MIME_TYPE, ResumeDocument

logger = logging.getLogger(__name__)


def strip_data_url_prefix(encoded: str) -> str:
    """Remove a ``data:<mime>;base64,`` prefix if present.

    Args:
        encoded: Base64 text, optionally in data-URL form.

    Returns:
        The bare base64 payload.
    """
    if encoded.startswith("data:") and "," in encoded:
        return encoded.split(",", 1)[1]
    return encoded


def validate_document(
    mime_type: str | None,
    size: int,
    max_bytes: int = DEFAULT_MAX_DOCUMENT_BYTES,
) -> None:
    """Check a candidate file's declared type and size.

    The type is checked first, so a file that is both the wrong type and
    over ``max_bytes`` is rejected with the type error, not the size error.
    Every file over the limit is still rejected.

    Raises:
        UnsupportedDocumentTypeError: If the type is not PDF.
        DocumentTooLargeError: If the file is larger than ``max_bytes``.
        EmptyDocumentError: If the file has no content.
    """
    if mime_type != PDF_MIME_TYPE:
        raise UnsupportedDocumentTypeError(mime_type)
    if size > max_bytes:
        raise DocumentTooLargeError(size, max_bytes)
    if size == 0:
        raise EmptyDocumentError()


def load_document(
    filename: str,
    content: bytes,
    mime_type: str | None,
    max_bytes: int = DEFAULT_MAX_DOCUMENT_BYTES,
) -> ResumeDocument:
    """Validate a resume file and encode it for transport.

    Args:
        filename: Original file name, kept for display.
        content: Full file content.
        mime_type: Declared MIME type of the file.
        max_bytes: Size ceiling in bytes.

    Returns:
        ResumeDocument with a base64 payload.
    """
    validate_document(mime_type, len(content), max_bytes)

    encoded = strip_data_url_prefix(base64.b64encode(content).decode("ascii"))
    logger.debug(f"Loaded resume {filename!r} ({len(content)} bytes)")
    return ResumeDocument(
        filename=filename,
        mime_type=PDF_MIME_TYPE,
        size=len(content),
        data=encoded,
    )


async def aload_document(
    filename: str,
    content: bytes,
    mime_type: str | None,
    max_bytes: int = DEFAULT_MAX_DOCUMENT_BYTES,
) -> ResumeDocument:
    """Async variant of :func:`load_document`; encodes in a worker thread."""
    return await asyncio.to_thread(load_document, filename, content, mime_type, max_bytes)


def load_document_from_path(
    path: str | Path,
    max_bytes: int = DEFAULT_MAX_DOCUMENT_BYTES,
) -> ResumeDocument:
    """Load a resume from disk, guessing its MIME type from the file name.

    Raises:
        DocumentNotFoundError: If the path does not exist.
    """
    path = Path(path)
    if not path.is_file():
        raise DocumentNotFoundError(str(path))

    mime_type, _ = mimetypes.guess_type(path.name)
    # Check the type before reading so a large non-PDF is never loaded
    if mime_type != PDF_MIME_TYPE:
        raise UnsupportedDocumentTypeError(mime_type)
    if path.stat().st_size > max_bytes:
        raise DocumentTooLargeError(path.stat().st_size, max_bytes)

    return load_document(path.name, path.read_bytes(), mime_type, max_bytes)
