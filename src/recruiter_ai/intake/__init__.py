"""Resume intake: validation and encoding of uploaded documents."""

from recruiter_ai.intake.document import (
    aload_document,
    load_document,
    load_document_from_path,
    strip_data_url_prefix,
)

__all__ = ["aload_document", "load_document", "load_document_from_path", "strip_data_url_prefix"]
