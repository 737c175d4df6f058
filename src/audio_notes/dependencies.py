"""FastAPI dependency injection configuration."""

from typing import Annotated

from fastapi import Depends
from google import genai

from audio_notes.config import AppConfig, GeminiConfig, load_config
from audio_notes.domain import AudioNotesProcessor
from audio_notes.domain.audio_notes_processor import LLMFactory
from audio_notes.infrastructure import GeminiLLMService
from audio_notes.infrastructure.interfaces import LLMService


def get_config() -> AppConfig:
    """Returns configuration read from the environment for this request."""
    return load_config()


def build_gemini_service(config: GeminiConfig) -> LLMService:
    """Creates a Gemini-backed LLM service for one request."""
    client = genai.Client(api_key=config.api_key)
    return GeminiLLMService(client, config.model_name)


def get_llm_factory() -> LLMFactory:
    """Returns the callable used to construct the LLM service."""
    return build_gemini_service


ConfigDep = Annotated[AppConfig, Depends(get_config)]
LLMFactoryDep = Annotated[LLMFactory, Depends(get_llm_factory)]


def get_processor(config: ConfigDep, llm_factory: LLMFactoryDep) -> AudioNotesProcessor:
    """Returns a processor wired with the request configuration."""
    return AudioNotesProcessor(config, llm_factory)
