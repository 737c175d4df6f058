"""Domain layer exports."""

from audio_notes.domain.audio_notes_processor import AudioNotesProcessor
from audio_notes.domain.mime import AUDIO_MIME_TYPES, resolve_mime_type
from audio_notes.domain.models import AudioPart, ParsedResult, UploadedAudio
from audio_notes.domain.response_parser import parse_ai_response

__all__ = [
    "AUDIO_MIME_TYPES",
    "AudioNotesProcessor",
    "AudioPart",
    "ParsedResult",
    "UploadedAudio",
    "parse_ai_response",
    "resolve_mime_type",
]
