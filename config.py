import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = (
    "http://localhost:8501",
    "http://127.0.0.1:8501",
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    OPENAI_API_KEY: str = Field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))
    OPENAI_VISION_MODEL: str = Field(
        default_factory=lambda: os.getenv("MODEL_VISION", os.getenv("OPENAI_VISION_MODEL", "gpt-4o")),
        description="Vision-capable model that writes the roast/compliment/judgement.",
    )
    OPENAI_TTS_MODEL: str = Field(
        default_factory=lambda: os.getenv("MODEL_TTS", os.getenv("OPENAI_TTS_MODEL", "tts-1")),
        description="Text-to-speech model used for the audio rendition.",
    )
    MAX_OUTPUT_TOKENS: int = 300
    OPENAI_TIMEOUT: float | None = None
    MAX_IMAGES: int = 10  # 0 disables the limit
    MAX_IMAGE_BYTES: int = 8 * 1024 * 1024  # 8MB, 0 disables the limit
    LOG_LEVEL: str = "INFO"
    cors_origins_csv: str | None = Field(default=None, validation_alias="CORS_ORIGINS")

    @property
    def cors_origins(self) -> list[str]:
        if self.cors_origins_csv and self.cors_origins_csv.strip():
            return [origin.strip() for origin in self.cors_origins_csv.split(",") if origin.strip()]
        return list(DEFAULT_CORS_ORIGINS)

    @field_validator("OPENAI_TIMEOUT", mode="before")
    @classmethod
    def blank_timeout_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


settings = Settings()
