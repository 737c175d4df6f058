"""Infrastructure layer exports."""

from audio_notes.infrastructure.gemini_llm import GeminiLLMService

__all__ = ["GeminiLLMService"]
