import asyncio

from audio_notes.config import AppConfig, GeminiConfig, UploadConfig
from audio_notes.domain.models import AudioPart
from audio_notes.infrastructure.interfaces import LLMService


class StubLLMService(LLMService):
    """Returns canned replies in order and records every call."""

    def __init__(
        self,
        replies=None,
        error: Exception | None = None,
        delay: float = 0,
        fail_on_call: int | None = None,  # 1-based; None fails every call
    ):
        self.replies = list(replies or [])
        self.error = error
        self.delay = delay
        self.fail_on_call = fail_on_call
        self.closed = False
        self.calls: list[tuple[str, AudioPart | None]] = []

    async def generate(self, prompt: str, audio: AudioPart | None = None) -> str:
        self.calls.append((prompt, audio))
        if self.delay:
            await asyncio.sleep(self.delay)
        failing = self.fail_on_call is None or self.fail_on_call == len(self.calls)
        if self.error is not None and failing:
            raise self.error
        return self.replies.pop(0)

    async def aclose(self) -> None:
        self.closed = True


def make_config(**gemini_overrides) -> AppConfig:
    """Builds a config with a dummy key and a 1 KiB upload limit."""
    gemini = {"api_key": "test-key", **gemini_overrides}
    return AppConfig(gemini=GeminiConfig(**gemini), upload=UploadConfig(max_bytes=1024))
