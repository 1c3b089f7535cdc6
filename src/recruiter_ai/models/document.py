"""Resume document model."""

from pydantic import BaseModel, ConfigDict, Field

PDF_MIME_TYPE = "application/pdf"


class ResumeDocument(BaseModel):
    """An uploaded resume held in memory for the session.

    The payload is kept base64-encoded so it can be embedded in a JSON request
    body without further transcoding.
    """

    model_config = ConfigDict(frozen=True)

    filename: str
    mime_type: str = PDF_MIME_TYPE
    size: int = Field(ge=0, description="Size of the original file in bytes")
    data: str = Field(min_length=1, description="Base64 payload without a data-URL prefix")

    def __repr__(self) -> str:
        # The payload can be megabytes long
        return (
            f"ResumeDocument(filename={self.filename!r}, mime_type={self.mime_type!r}, "
            f"size={self.size})"
        )
