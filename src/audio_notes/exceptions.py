"""Custom exceptions for the audio-notes service."""


class AudioNotesError(Exception):
    """Base class for errors rendered as a JSON error envelope."""

    status_code = 500

    def __init__(self, message: str, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class MissingAudioError(AudioNotesError):
    """Raised when the request carries no audio file."""

    status_code = 400

    def __init__(self):
        super().__init__("No audio file provided")


class EmptyAudioError(AudioNotesError):
    """Raised when the uploaded audio file has no content."""

    status_code = 400

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__("Uploaded audio file is empty")


class AudioTooLargeError(AudioNotesError):
    """Raised when the upload exceeds the configured size limit."""

    status_code = 413

    def __init__(self, size: int, max_bytes: int):
        self.size = size
        self.max_bytes = max_bytes
        super().__init__(f"File too large: limit is {max_bytes // (1024 * 1024)} MB")


class UnsupportedAudioTypeError(AudioNotesError):
    """Raised when the file extension has no known audio MIME type."""

    status_code = 400

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unsupported file type: {extension}")


class MissingAPIKeyError(AudioNotesError):
    """Raised when the Gemini credential is not configured."""

    def __init__(self):
        super().__init__("API key not configured")


class LLMServiceError(AudioNotesError):
    """Raised when the LLM service call fails."""


class LLMTimeoutError(AudioNotesError):
    """Raised when the LLM service does not answer within the timeout."""

    status_code = 504

    def __init__(self, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__("AI service timed out")


class EmptyAIResponseError(AudioNotesError):
    """Raised when the LLM returns no text."""

    def __init__(self):
        super().__init__("Empty response from AI service")


class InvalidAIResponseError(AudioNotesError):
    """Raised when no JSON object can be extracted from the LLM text."""


class MissingFieldsError(AudioNotesError):
    """Raised when the parsed LLM output has neither transcript nor summary."""

    def __init__(self):
        super().__init__("AI response missing required fields")
