"""Application configuration loaded from environment variables."""

import os
from typing import Literal

from pydantic import BaseModel

MAX_UPLOAD_BYTES = 50 * 1024 * 1024


class GeminiConfig(BaseModel, frozen=True):
    """Gemini model configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash"
    invocation_mode: Literal["single", "two_call"] = "single"
    timeout_seconds: float = 120.0


class UploadConfig(BaseModel, frozen=True):
    """Multipart upload limits."""

    max_bytes: int = MAX_UPLOAD_BYTES


class ServerConfig(BaseModel, frozen=True):
    """ASGI server bind address."""

    host: str = "0.0.0.0"
    port: int = 8000


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    gemini: GeminiConfig
    upload: UploadConfig = UploadConfig()
    server: ServerConfig = ServerConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
            invocation_mode=os.getenv("AI_INVOCATION_MODE", "single"),
            timeout_seconds=float(os.getenv("AI_TIMEOUT_SECONDS", "120")),
        ),
        upload=UploadConfig(
            max_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(MAX_UPLOAD_BYTES))),
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
        ),
    )
