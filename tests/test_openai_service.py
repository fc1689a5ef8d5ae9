import base64
import logging
from unittest.mock import MagicMock, patch

import pytest

from modes import MODES
from services.openai_service import EmptyGenerationError, ProfileFeedbackService
from tests.fakes import MP3_BYTES, make_openai_mock


def _service(mock_openai, **kwargs) -> ProfileFeedbackService:
    return ProfileFeedbackService(api_key="test-key", client=mock_openai, **kwargs)


def test_generate_text_sends_prompt_then_every_image():
    mock_openai = make_openai_mock()
    urls = ["data:image/png;base64,AAA", "data:image/jpeg;base64,BBB"]

    _service(mock_openai, vision_model="gpt-4o", max_tokens=300).generate_text(MODES["roast"], urls)

    kwargs = mock_openai.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "gpt-4o"
    assert kwargs["stream"] is False
    assert kwargs["max_tokens"] == 300
    assert len(kwargs["messages"]) == 1
    content = kwargs["messages"][0]["content"]
    assert content[0] == {"type": "text", "text": MODES["roast"].prompt}
    assert [block["image_url"]["url"] for block in content[1:]] == urls


def test_generate_text_returns_stripped_text():
    mock_openai = make_openai_mock(text="  Nice hat. \n")

    result = _service(mock_openai).generate_text(MODES["compliment"], ["data:image/png;base64,AAA"])

    assert result == "Nice hat."


@pytest.mark.parametrize("content", [None, "", "   "])
def test_generate_text_raises_on_empty_content(content):
    mock_openai = make_openai_mock(text=content)

    with pytest.raises(EmptyGenerationError, match="Failed to generate AI message"):
        _service(mock_openai).generate_text(MODES["judging"], ["data:image/png;base64,AAA"])


def test_generate_text_raises_when_no_choices():
    mock_openai = make_openai_mock()
    mock_openai.chat.completions.create.return_value = MagicMock(choices=[])

    with pytest.raises(EmptyGenerationError):
        _service(mock_openai).generate_text(MODES["roast"], ["data:image/png;base64,AAA"])


def test_synthesize_speech_requests_mp3_with_voice():
    mock_openai = make_openai_mock()

    audio = _service(mock_openai, tts_model="tts-1").synthesize_speech("Nice hat.", "shimmer")

    assert audio == MP3_BYTES
    mock_openai.audio.speech.create.assert_called_once_with(
        model="tts-1",
        voice="shimmer",
        input="Nice hat.",
        response_format="mp3",
    )


def test_synthesize_speech_warns_on_non_mp3_bytes(caplog):
    mock_openai = make_openai_mock(audio=b"RIFF....WAVE")

    with caplog.at_level(logging.WARNING, logger="services.openai_service"):
        _service(mock_openai).synthesize_speech("hi", "shimmer")

    assert "MP3 header" in caplog.text


def test_process_returns_text_and_base64_audio():
    mock_openai = make_openai_mock()

    result = _service(mock_openai).process(MODES["roast"], ["data:image/png;base64,AAA"])

    assert result.text == "Nice hat."
    assert base64.b64decode(result.audio_base64) == MP3_BYTES
    assert mock_openai.audio.speech.create.call_args.kwargs["voice"] == MODES["roast"].voice


def test_process_skips_speech_when_generation_is_empty():
    mock_openai = make_openai_mock(text=None)

    with pytest.raises(EmptyGenerationError):
        _service(mock_openai).process(MODES["roast"], ["data:image/png;base64,AAA"])

    mock_openai.audio.speech.create.assert_not_called()


def test_process_propagates_speech_errors():
    mock_openai = make_openai_mock()
    mock_openai.audio.speech.create.side_effect = RuntimeError("TTS down")

    with pytest.raises(RuntimeError, match="TTS down"):
        _service(mock_openai).process(MODES["compliment"], ["data:image/png;base64,AAA"])


def test_missing_api_key_raises_on_first_call():
    service = ProfileFeedbackService(api_key="")

    with pytest.raises(RuntimeError, match="not configured"):
        service.generate_text(MODES["roast"], ["data:image/png;base64,AAA"])


def test_client_is_built_lazily_with_timeout():
    service = ProfileFeedbackService(api_key="test-key", timeout=12.5)

    with patch("services.openai_service.OpenAI") as mock_cls:
        first = service.client
        second = service.client

    mock_cls.assert_called_once_with(api_key="test-key", timeout=12.5)
    assert first is second
