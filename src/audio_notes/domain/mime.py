"""Maps audio file extensions to the MIME types Gemini accepts."""

import os

from audio_notes.exceptions import UnsupportedAudioTypeError

AUDIO_MIME_TYPES: dict[str, str] = {
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".m4a": "audio/mp4",
    ".aac": "audio/aac",
    ".ogg": "audio/ogg",
    ".flac": "audio/flac",
}


def resolve_mime_type(filename: str) -> str:
    """
    Resolves the audio MIME type for a filename by its extension.

    Args:
        filename: The original name of the uploaded file.

    Returns:
        The canonical audio MIME type.

    Raises:
        UnsupportedAudioTypeError: If the extension is not in the table.
    """
    extension = os.path.splitext(filename)[1].lower()
    mime_type = AUDIO_MIME_TYPES.get(extension)
    if mime_type is None:
        raise UnsupportedAudioTypeError(extension)
    return mime_type
