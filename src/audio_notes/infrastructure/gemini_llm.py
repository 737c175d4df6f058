"""Gemini LLM service implementation."""

from google import genai
from google.genai import types

from audio_notes.domain.models import AudioPart
from audio_notes.exceptions import LLMServiceError
from audio_notes.infrastructure.interfaces import LLMService
from audio_notes.logging import setup_logging

logger = setup_logging(__name__)


class GeminiLLMService(LLMService):
    """LLM service implementation using Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str):
        self._client = client
        self._model_name = model_name

    async def generate(self, prompt: str, audio: AudioPart | None = None) -> str:
        """
        Calls Gemini with the prompt and, if given, the audio as inline data.

        Raises:
            LLMServiceError: If the Gemini API call fails.
        """
        contents: list = [prompt]
        if audio is not None:
            contents.append(
                types.Part.from_bytes(data=audio.data, mime_type=audio.mime_type)
            )

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model_name,
                contents=contents,
            )
        except Exception as e:
            logger.exception(
                "Gemini API call failed", extra={"model": self._model_name}
            )
            raise LLMServiceError(f"Gemini request failed: {e}", cause=e) from e

        logger.info(
            "Gemini call completed",
            extra={"model": self._model_name, "with_audio": audio is not None},
        )
        return response.text or ""

    async def aclose(self) -> None:
        await self._client.aio.aclose()
