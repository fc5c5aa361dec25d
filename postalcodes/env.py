import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def load_env() -> None:
    """Load .env from the working directory if present.
    Variables already set in the environment win.
    """
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class Settings:
    data_url: Optional[str] = None
    data_path: Optional[Path] = None
    log_level: str = "INFO"
    log_dir: Optional[Path] = None


def get_settings() -> Settings:
    data_path = os.getenv("POSTALCODES_DATA_PATH")
    log_dir = os.getenv("POSTALCODES_LOG_DIR")
    return Settings(
        data_url=os.getenv("POSTALCODES_DATA_URL") or None,
        data_path=Path(data_path) if data_path else None,
        log_level=os.getenv("POSTALCODES_LOG_LEVEL", "INFO"),
        log_dir=Path(log_dir) if log_dir else None,
    )
