"""Domain models for audio-to-notes processing."""

from pydantic import BaseModel, computed_field

NO_TRANSCRIPT = "No transcript available"
NO_SUMMARY = "No summary available"


class UploadedAudio(BaseModel, frozen=True):
    """Audio payload received from the caller."""

    filename: str
    data: bytes

    @computed_field
    @property
    def size(self) -> int:
        """Returns the payload length in bytes."""
        return len(self.data)


class AudioPart(BaseModel, frozen=True):
    """Inline binary content sent alongside a prompt."""

    data: bytes
    mime_type: str


class ParsedResult(BaseModel, frozen=True):
    """Transcript and summary extracted from the model output."""

    transcript: str
    summary: str
