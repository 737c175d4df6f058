"""Core business logic for turning audio into a transcript and summary."""

import asyncio
from typing import Callable

from audio_notes.config import AppConfig, GeminiConfig
from audio_notes.domain.mime import resolve_mime_type
from audio_notes.domain.models import AudioPart, ParsedResult, UploadedAudio
from audio_notes.domain.response_parser import parse_ai_response
from audio_notes.exceptions import (
    EmptyAIResponseError,
    LLMTimeoutError,
    MissingAPIKeyError,
)
from audio_notes.infrastructure.interfaces import LLMService
from audio_notes.logging import setup_logging

logger = setup_logging(__name__)

LLMFactory = Callable[[GeminiConfig], LLMService]

NOTES_PROMPT = (
    "Generate a transcript and a concise summary with bullet points of the "
    "provided audio file. Format the response as a single JSON object with two "
    'keys: "transcript" and "summary".'
)

TRANSCRIPT_PROMPT = (
    "Transcribe the provided audio file verbatim. Respond with the transcript "
    "text only, without any commentary or formatting."
)

SUMMARY_PROMPT = (
    "Write a concise summary with bullet points of the following transcript. "
    "Respond with the summary text only.\n\nTranscript:\n{transcript}"
)


class AudioNotesProcessor:
    """Resolves the audio type, calls the LLM and normalizes its output."""

    def __init__(self, config: AppConfig, llm_factory: LLMFactory):
        self._config = config
        self._llm_factory = llm_factory

    async def process(self, audio: UploadedAudio) -> ParsedResult:
        """
        Produces a transcript and summary for an uploaded audio file.

        Args:
            audio: The uploaded audio payload.

        Returns:
            ParsedResult with transcript and summary text.

        Raises:
            UnsupportedAudioTypeError: If the file extension is unknown.
            MissingAPIKeyError: If no Gemini API key is configured.
            LLMServiceError: If the Gemini call fails.
            LLMTimeoutError: If the Gemini call exceeds the timeout.
            EmptyAIResponseError: If Gemini returns no text.
            InvalidAIResponseError: If no JSON can be extracted.
            MissingFieldsError: If the JSON lacks both fields.
        """
        mime_type = resolve_mime_type(audio.filename)
        gemini = self._config.gemini

        if not gemini.api_key:
            logger.error("Gemini API key not configured")
            raise MissingAPIKeyError()

        llm = self._llm_factory(gemini)
        part = AudioPart(data=audio.data, mime_type=mime_type)

        logger.info(
            "Processing audio",
            extra={
                "file_name": audio.filename,
                "mime_type": mime_type,
                "size": audio.size,
                "mode": gemini.invocation_mode,
            },
        )

        try:
            if gemini.invocation_mode == "two_call":
                result = await self._process_two_call(llm, part)
            else:
                result = await self._process_single_call(llm, part)
        finally:
            await llm.aclose()

        logger.info(
            "Audio processed",
            extra={
                "file_name": audio.filename,
                "transcript_length": len(result.transcript),
                "summary_length": len(result.summary),
            },
        )
        return result

    async def _process_single_call(
        self, llm: LLMService, part: AudioPart
    ) -> ParsedResult:
        """Asks for transcript and summary as one JSON object."""
        text = await self._generate(llm, NOTES_PROMPT, part)
        return parse_ai_response(text)

    async def _process_two_call(self, llm: LLMService, part: AudioPart) -> ParsedResult:
        """Transcribes first, then summarizes the transcript text."""
        transcript = (await self._generate(llm, TRANSCRIPT_PROMPT, part)).strip()
        if not transcript:
            raise EmptyAIResponseError()

        # A failed summary discards the transcript.
        prompt = SUMMARY_PROMPT.format(transcript=transcript)
        summary = (await self._generate(llm, prompt)).strip()
        if not summary:
            raise EmptyAIResponseError()

        return ParsedResult(transcript=transcript, summary=summary)

    async def _generate(
        self, llm: LLMService, prompt: str, part: AudioPart | None = None
    ) -> str:
        timeout = self._config.gemini.timeout_seconds
        try:
            return await asyncio.wait_for(llm.generate(prompt, part), timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.error("Gemini call timed out", extra={"timeout_seconds": timeout})
            raise LLMTimeoutError(timeout) from e
