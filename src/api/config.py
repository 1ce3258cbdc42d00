"""Runtime settings read from the environment (optionally a .env file)."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


def load_env() -> None:
    """Load .env from repo root or current dir (first one found)."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def _env_log_level(name: str, default: str = "INFO") -> str:
    """Return an upper-cased logging level name, or default if it is not a real level."""
    raw = os.environ.get(name, "").strip().upper()
    if not raw or not isinstance(logging.getLevelName(raw), int):
        return default
    return raw


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    seed: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        port_raw = os.environ.get("CONTACTBOOK_PORT", "").strip()
        return cls(
            host=os.environ.get("CONTACTBOOK_HOST", DEFAULT_HOST).strip() or DEFAULT_HOST,
            port=int(port_raw) if port_raw else DEFAULT_PORT,
            seed=_env_flag("CONTACTBOOK_SEED", True),
            log_level=_env_log_level("CONTACTBOOK_LOG_LEVEL"),
        )
