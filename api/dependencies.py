from functools import lru_cache

from config import settings
from services.openai_service import ProfileFeedbackService


@lru_cache()
def get_feedback_service() -> ProfileFeedbackService:
    return ProfileFeedbackService(
        api_key=settings.OPENAI_API_KEY,
        vision_model=settings.OPENAI_VISION_MODEL,
        tts_model=settings.OPENAI_TTS_MODEL,
        max_tokens=settings.MAX_OUTPUT_TOKENS,
        timeout=settings.OPENAI_TIMEOUT,
    )
