from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PORT: int = 10000
    SERVICE_NAME: str = "Cardinal GaragePro backend"
    CORS_ORIGINS: list[str] = [
        "http://localhost:5500",
        "https://cardinalgaragepro.com",
        "https://www.cardinalgaragepro.com",
        "https://jared-hero2-backend.onrender.com",
    ]

    # Where /inference forwards its events. Empty = write the local log directly.
    BASE_URL: str = ""
    EVENT_TIMEOUT_SECONDS: float = 5.0

    # Train-collect log
    DATA_DIR: str = "data"
    TRAIN_LOG_FILENAME: str = "pipeline.json"
    TRAIN_LOG_MAX_ENTRIES: int = 200
    TRAIN_LOG_ENABLED: bool = True

    # OpenAI text-to-speech: optional, only /speak needs it
    OPENAI_API_KEY: str = ""
    TTS_MODEL: str = "gpt-4o-mini-tts"
    TTS_DEFAULT_VOICE: str = "alloy"

    class Config:
        env_file = ".env"


settings = Settings()
