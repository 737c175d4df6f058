"""API routers."""

from audio_notes.routes.process_audio import router as process_audio_router

__all__ = ["process_audio_router"]
