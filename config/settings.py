"""Application settings and configuration."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings:
    """
    Environment-driven settings for the PandaScore StarCraft II client.

    PANDA_TOKEN is the only required value. AUTH_METHOD=query sends the
    token as a `token=` query parameter instead of a bearer header.
    """

    PANDA_TOKEN: str = os.getenv('PANDA_TOKEN', '')
    AUTH_METHOD: str = os.getenv('AUTH_METHOD', 'bearer').strip().lower()

    # ── API ────────────────────────────────────────────────────────────────
    BASE_URL:        str   = os.getenv('PANDASCORE_BASE_URL', 'https://api.pandascore.co')
    REQUEST_TIMEOUT: float = _float('SC2_REQUEST_TIMEOUT', 30.0)

    # ── Cache (in-memory, process lifetime) ───────────────────────────────
    CACHE_MAX_SIZE: int   = _int('SC2_CACHE_MAX_SIZE', 100)
    CACHE_TTL:      float = _float('SC2_CACHE_TTL', 300.0)

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    DATA_DIR: Path = BASE_DIR / 'data'
    LOG_DIR:  Path = DATA_DIR / 'logs'

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    LOG_TO_FILE: bool = os.getenv('LOG_TO_FILE', 'false').strip().lower() == 'true'

    @classmethod
    def validate(cls) -> None:
        if not cls.PANDA_TOKEN:
            raise ValueError("PANDA_TOKEN must be set in the environment or config/.env")

    @classmethod
    def log_dir(cls) -> Optional[Path]:
        return cls.LOG_DIR if cls.LOG_TO_FILE else None


settings = Settings()
