"""Infrastructure interface exports."""

from audio_notes.infrastructure.interfaces.llm_service import LLMService

__all__ = ["LLMService"]
