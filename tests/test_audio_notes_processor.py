import asyncio

import pytest

from audio_notes.domain import AudioNotesProcessor, UploadedAudio
from audio_notes.domain.audio_notes_processor import NOTES_PROMPT, TRANSCRIPT_PROMPT
from audio_notes.exceptions import (
    EmptyAIResponseError,
    InvalidAIResponseError,
    LLMServiceError,
    LLMTimeoutError,
    MissingAPIKeyError,
    UnsupportedAudioTypeError,
)
from tests.helpers import StubLLMService, make_config

AUDIO = UploadedAudio(filename="memo.m4a", data=b"\x00\x01audio")


def _run(processor, audio=AUDIO):
    return asyncio.run(processor.process(audio))


def _processor(llm, **gemini_overrides):
    return AudioNotesProcessor(make_config(**gemini_overrides), lambda _config: llm)


def test_single_call_sends_audio_inline():
    llm = StubLLMService(['```json\n{"transcript": "t", "summary": "s"}\n```'])

    result = _run(_processor(llm))

    assert (result.transcript, result.summary) == ("t", "s")
    assert len(llm.calls) == 1
    prompt, part = llm.calls[0]
    assert prompt == NOTES_PROMPT
    assert part.mime_type == "audio/mp4"
    assert part.data == AUDIO.data


def test_two_call_summarizes_transcript():
    llm = StubLLMService(["  the full transcript  ", "- point one"])

    result = _run(_processor(llm, invocation_mode="two_call"))

    assert result.transcript == "the full transcript"
    assert result.summary == "- point one"
    first_prompt, first_part = llm.calls[0]
    second_prompt, second_part = llm.calls[1]
    assert first_prompt == TRANSCRIPT_PROMPT
    assert first_part is not None
    assert "the full transcript" in second_prompt
    assert second_part is None


def test_two_call_summary_failure_fails_whole_request():
    llm = StubLLMService(["transcript text", ""])

    with pytest.raises(EmptyAIResponseError):
        _run(_processor(llm, invocation_mode="two_call"))

    assert len(llm.calls) == 2


def test_missing_api_key_fails_before_llm_is_built():
    built = []

    def factory(config):
        built.append(config)
        return StubLLMService(["{}"])

    processor = AudioNotesProcessor(make_config(api_key=""), factory)

    with pytest.raises(MissingAPIKeyError):
        _run(processor)

    assert built == []


def test_unsupported_type_checked_before_api_key():
    processor = _processor(StubLLMService(), api_key="")

    with pytest.raises(UnsupportedAudioTypeError):
        _run(processor, UploadedAudio(filename="clip.xyz", data=b"data"))


def test_slow_llm_times_out():
    llm = StubLLMService(['{"transcript": "late"}'], delay=1)

    with pytest.raises(LLMTimeoutError) as exc_info:
        _run(_processor(llm, timeout_seconds=0.01))

    assert exc_info.value.status_code == 504


def test_llm_errors_propagate():
    llm = StubLLMService(error=LLMServiceError("Gemini request failed: boom"))

    with pytest.raises(LLMServiceError):
        _run(_processor(llm))


def test_llm_is_closed_after_success():
    llm = StubLLMService(['{"transcript": "t", "summary": "s"}'])

    _run(_processor(llm))

    assert llm.closed is True


def test_llm_is_closed_after_failure():
    llm = StubLLMService(["no json here"])

    with pytest.raises(InvalidAIResponseError):
        _run(_processor(llm))

    assert llm.closed is True


def test_llm_is_closed_after_timeout():
    llm = StubLLMService(["late"], delay=1)

    with pytest.raises(LLMTimeoutError):
        _run(_processor(llm, timeout_seconds=0.01))

    assert llm.closed is True


def test_two_call_summary_error_fails_whole_request():
    llm = StubLLMService(
        ["transcript text"],
        error=LLMServiceError("Gemini request failed: quota exceeded"),
        fail_on_call=2,
    )

    with pytest.raises(LLMServiceError):
        _run(_processor(llm, invocation_mode="two_call"))

    assert len(llm.calls) == 2
    assert llm.closed is True
