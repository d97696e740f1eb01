# text_analyzer/config.py
# Runtime settings, read from the environment (and a local .env file if present).

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

DEFAULT_SENTIMENT_API_URL = (
    "https://api-inference.huggingface.co/models/"
    "distilbert-base-uncased-finetuned-sst-2-english"
)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


class Settings(BaseModel):
    """Everything the app needs to wire its long-lived objects."""
    hf_api_token: Optional[str] = None
    sentiment_api_url: str = DEFAULT_SENTIMENT_API_URL
    sentiment_timeout: float = Field(10.0, gt=0)
    sentiment_max_input_chars: int = Field(512, ge=1)
    cache_max_size: int = Field(1000, ge=1)
    stopwords_path: Optional[str] = None
    log_dir: str = "logs"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        token = os.environ.get("HUGGING_FACE_HUB_API_TOKEN")
        if not token:
            print("Warning: Hugging Face API token not found. Sentiment will use the keyword fallback.")

        return cls(
            hf_api_token=token or None,
            sentiment_api_url=os.environ.get("SENTIMENT_API_URL", DEFAULT_SENTIMENT_API_URL),
            sentiment_timeout=_env_float("SENTIMENT_TIMEOUT", 10.0),
            sentiment_max_input_chars=_env_int("SENTIMENT_MAX_INPUT_CHARS", 512),
            cache_max_size=_env_int("CACHE_MAX_SIZE", 1000),
            stopwords_path=os.environ.get("STOPWORDS_PATH") or None,
            log_dir=os.environ.get("LOG_DIR", "logs"),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
        )
