"""Audio processing endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile

from audio_notes.dependencies import ConfigDep, get_processor
from audio_notes.domain import AudioNotesProcessor, UploadedAudio
from audio_notes.exceptions import (
    AudioNotesError,
    AudioTooLargeError,
    EmptyAudioError,
    MissingAudioError,
)
from audio_notes.logging import setup_logging
from audio_notes.response_models import ErrorResponse, ProcessAudioResponse

logger = setup_logging(__name__)

router = APIRouter(prefix="/api", tags=["audio"])

ProcessorDep = Annotated[AudioNotesProcessor, Depends(get_processor)]

_ERROR_RESPONSES = {
    status: {"model": ErrorResponse} for status in (400, 405, 413, 500, 504)
}


async def _read_upload(audio: UploadFile | None, max_bytes: int) -> UploadedAudio:
    """Reads the uploaded file into memory, enforcing presence and size."""
    if audio is None:
        raise MissingAudioError()

    filename = audio.filename or ""
    if audio.size is not None and audio.size > max_bytes:
        raise AudioTooLargeError(audio.size, max_bytes)

    data = await audio.read()
    if len(data) > max_bytes:
        raise AudioTooLargeError(len(data), max_bytes)
    if not data:
        raise EmptyAudioError(filename)

    return UploadedAudio(filename=filename, data=data)


@router.options("/process-audio", status_code=200)
def process_audio_preflight() -> Response:
    """Answers CORS preflight requests."""
    return Response(status_code=200)


@router.post(
    "/process-audio",
    response_model=ProcessAudioResponse,
    responses=_ERROR_RESPONSES,
)
async def process_audio(
    config: ConfigDep,
    processor: ProcessorDep,
    audio: Annotated[UploadFile | None, File()] = None,
) -> ProcessAudioResponse:
    """
    Transcribes and summarizes an uploaded audio file.

    Expects a multipart body with the file in the `audio` field.
    """
    try:
        upload = await _read_upload(audio, config.upload.max_bytes)

        logger.info(
            "Received audio upload",
            extra={"file_name": upload.filename, "size": upload.size},
        )

        result = await processor.process(upload)
    except AudioNotesError as e:
        logger.warning(
            "Audio processing failed",
            extra={"error": e.message, "status_code": e.status_code},
        )
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Unexpected error processing audio")
        raise HTTPException(status_code=500, detail="Internal server error")

    return ProcessAudioResponse(transcript=result.transcript, summary=result.summary)
