"""Abstract interface for LLM service operations."""

from abc import ABC, abstractmethod

from audio_notes.domain.models import AudioPart


class LLMService(ABC):
    """Abstract base class for LLM backends."""

    @abstractmethod
    async def generate(self, prompt: str, audio: AudioPart | None = None) -> str:
        """
        Sends a prompt, optionally with inline audio, and returns the text reply.

        Args:
            prompt: The natural-language instruction.
            audio: Optional inline audio content.

        Returns:
            The text completion, possibly empty.

        Raises:
            LLMServiceError: If the LLM call fails.
        """
        pass

    @abstractmethod
    async def aclose(self) -> None:
        """Releases connections held by the backend."""
        pass
