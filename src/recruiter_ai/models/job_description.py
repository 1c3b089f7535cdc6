"""Job description input model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

JobDescriptionMode = Literal["text", "url"]


class JobDescriptionInput(BaseModel):
    """Pasted job description text or a job posting URL.

    Both strings are retained regardless of mode; only the one selected by
    ``mode`` is sent for analysis. URL mode is a hint passed to the model, the
    URL itself is never fetched.
    """

    model_config = ConfigDict(frozen=True)

    mode: JobDescriptionMode = "text"
    text: str = ""
    url: str = ""

    @property
    def active_content(self) -> str:
        """The content selected by the current mode."""
        return self.url if self.mode == "url" else self.text

    @property
    def is_url(self) -> bool:
        return self.mode == "url"

    @property
    def is_blank(self) -> bool:
        """True when the active content is empty or whitespace only."""
        return not self.active_content.strip()

    def with_mode(self, mode: JobDescriptionMode) -> "JobDescriptionInput":
        if mode not in ("text", "url"):
            raise ValueError(f"Unknown job description mode: {mode}")
        return self.model_copy(update={"mode": mode})

    def with_text(self, text: str) -> "JobDescriptionInput":
        return self.model_copy(update={"text": text})

    def with_url(self, url: str) -> "JobDescriptionInput":
        return self.model_copy(update={"url": url})

    def toggle_mode(self) -> "JobDescriptionInput":
        """Switch between text and url mode, keeping both strings."""
        return self.with_mode("url" if self.mode == "text" else "text")
