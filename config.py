# config.py
# Process-wide settings, read once at startup from the environment (or a .env file).
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# Hugging Face inference endpoints
TRANSLATION_URL = "https://api-inference.huggingface.co/models/Helsinki-NLP/opus-mt-id-en"
TABLE_QA_URL = "https://api-inference.huggingface.co/models/google/tapas-base-finetuned-wtq"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    token: str
    translation_url: str = TRANSLATION_URL
    table_qa_url: str = TABLE_QA_URL
    request_timeout: Optional[float] = None   # None -> requests default (no timeout)
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def load_settings() -> Settings:
    """
    Build Settings from environment variables:
      HUGGINGFACE_TOKEN, HF_TRANSLATION_URL, HF_TABLE_QA_URL, HF_REQUEST_TIMEOUT,
      JAWAB_HOST, JAWAB_PORT, JAWAB_LOG_LEVEL
    """
    port_raw = os.getenv("JAWAB_PORT", str(DEFAULT_PORT)).strip()
    try:
        port = int(port_raw)
    except ValueError:
        raise ValueError(f"JAWAB_PORT must be an integer, got {port_raw!r}")

    return Settings(
        token=os.getenv("HUGGINGFACE_TOKEN", "").strip(),
        translation_url=os.getenv("HF_TRANSLATION_URL", TRANSLATION_URL),
        table_qa_url=os.getenv("HF_TABLE_QA_URL", TABLE_QA_URL),
        request_timeout=_optional_float("HF_REQUEST_TIMEOUT"),
        host=os.getenv("JAWAB_HOST", DEFAULT_HOST),
        port=port,
        log_level=os.getenv("JAWAB_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
