# services/openai_service.py
from __future__ import annotations

import logging
from typing import List, Optional

from openai import OpenAI

from config import settings
from models import ProcessResult
from modes import Mode
from utils.audio import encode_audio, has_mp3_header

logger = logging.getLogger(__name__)

MSG_EMPTY_GENERATION = "Failed to generate AI message"


class EmptyGenerationError(RuntimeError):
    """The vision model answered without any text content."""

    def __init__(self, message: str = MSG_EMPTY_GENERATION) -> None:
        super().__init__(message)


class ProfileFeedbackService:
    """Turn profile pictures into a short spoken roast, compliment or critique via OpenAI."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        vision_model: str | None = None,
        tts_model: str | None = None,
        max_tokens: int | None = None,
        timeout: float | None = None,
        client: OpenAI | None = None,
    ) -> None:
        self._api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
        self._vision_model = vision_model or settings.OPENAI_VISION_MODEL
        self._tts_model = tts_model or settings.OPENAI_TTS_MODEL
        self._max_tokens = max_tokens or settings.MAX_OUTPUT_TOKENS
        self._timeout = timeout if timeout is not None else settings.OPENAI_TIMEOUT
        self._client = client

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            if not self._api_key:
                raise RuntimeError("OpenAI API key is not configured")
            kwargs = {"api_key": self._api_key}
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            self._client = OpenAI(**kwargs)
        return self._client

    def process(self, mode: Mode, image_urls: List[str]) -> ProcessResult:
        # Speech needs the generated text, so the two calls stay sequential
        text = self.generate_text(mode, image_urls)
        audio = self.synthesize_speech(text, mode.voice)
        return ProcessResult(text=text, audio_base64=encode_audio(audio))

    def generate_text(self, mode: Mode, image_urls: List[str]) -> str:
        content: List[dict] = [{"type": "text", "text": mode.prompt}]
        content.extend({"type": "image_url", "image_url": {"url": url}} for url in image_urls)

        response = self.client.chat.completions.create(
            model=self._vision_model,
            stream=False,
            messages=[{"role": "user", "content": content}],
            max_tokens=self._max_tokens,
        )

        message = _first_message_text(response)
        logger.info("AI message (%s): %s", mode.name, message)
        if not message:
            raise EmptyGenerationError()
        return message

    def synthesize_speech(self, text: str, voice: str) -> bytes:
        logger.info("Generating audio with voice %s", voice)
        response = self.client.audio.speech.create(
            model=self._tts_model,
            voice=voice,
            input=text,
            response_format="mp3",
        )
        audio = response.content
        logger.info("Finished generating audio (%d bytes)", len(audio))
        if not has_mp3_header(audio):
            logger.warning("Synthesized audio does not start with an MP3 header")
        return audio


def _first_message_text(response) -> Optional[str]:
    choices = getattr(response, "choices", None) or []
    if not choices:
        return None
    content = choices[0].message.content
    return content.strip() if content else None
