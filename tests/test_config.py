from config import Settings


def test_settings_defaults(monkeypatch):
    for name in ("MODEL_VISION", "OPENAI_VISION_MODEL", "MODEL_TTS", "OPENAI_TTS_MODEL", "CORS_ORIGINS", "OPENAI_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.OPENAI_VISION_MODEL == "gpt-4o"
    assert s.OPENAI_TTS_MODEL == "tts-1"
    assert s.MAX_OUTPUT_TOKENS == 300
    assert s.OPENAI_TIMEOUT is None
    assert s.MAX_IMAGES == 10
    assert s.MAX_IMAGE_BYTES == 8 * 1024 * 1024
    assert "http://localhost:8501" in s.cors_origins


def test_settings_model_aliases_from_env(monkeypatch):
    monkeypatch.setenv("MODEL_VISION", "gpt-4o-mini")
    monkeypatch.setenv("MODEL_TTS", "tts-1-hd")

    s = Settings(_env_file=None)

    assert s.OPENAI_VISION_MODEL == "gpt-4o-mini"
    assert s.OPENAI_TTS_MODEL == "tts-1-hd"


def test_settings_cors_csv_overrides_defaults(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example ,")

    s = Settings(_env_file=None)

    assert s.cors_origins == ["https://a.example", "https://b.example"]


def test_settings_blank_timeout_means_client_default(monkeypatch):
    monkeypatch.setenv("OPENAI_TIMEOUT", "")

    assert Settings(_env_file=None).OPENAI_TIMEOUT is None


def test_settings_limits_from_env(monkeypatch):
    monkeypatch.setenv("MAX_IMAGES", "3")
    monkeypatch.setenv("OPENAI_TIMEOUT", "20")

    s = Settings(_env_file=None)

    assert s.MAX_IMAGES == 3
    assert s.OPENAI_TIMEOUT == 20.0


def test_settings_blank_cors_csv_keeps_defaults(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", " , ")

    assert Settings(_env_file=None).cors_origins == ["http://localhost:8501", "http://127.0.0.1:8501"]
