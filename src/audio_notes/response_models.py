"""Response models for the audio-notes API."""

from pydantic import BaseModel


class ProcessAudioResponse(BaseModel):
    """Response returned after successful audio processing."""

    transcript: str
    summary: str
    success: bool = True


class ErrorResponse(BaseModel):
    """Envelope for every error response."""

    error: str
    success: bool = False
