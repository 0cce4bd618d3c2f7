from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # App
    app_name: str = "Darsana Gram Scorer"
    debug: bool = False
    log_level: str = "INFO"

    # Request limits
    max_corpus_length: int = 1_000_000  # characters per corpus

    # Lowercase and strip sentence punctuation before scoring
    normalize_input: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = False

@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
