from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_LOADED = False
_DEV_STORAGE_SECRET = "this is not very secure"
_THIRTY_ONE_DAYS = 31 * 24 * 60 * 60


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    storage_secret: str
    session_max_age: int
    debug: bool
    log_dir: Path


def load_env() -> None:
    global _LOADED
    if _LOADED:
        return
    _LOADED = True

    base_dir = Path(__file__).resolve().parent
    candidates = [
        Path.cwd() / ".env",
        base_dir.parents[1] / ".env",
    ]
    for path in candidates:
        if not path.exists():
            continue
        # real environment variables win over the file
        load_dotenv(dotenv_path=path, override=False)
        logger.debug("env.loaded path=%s", path)
        break


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def get_settings() -> Settings:
    load_env()
    secret = os.getenv("TODOS_STORAGE_SECRET") or ""
    if not secret:
        logger.warning("TODOS_STORAGE_SECRET not set, using the development secret")
        secret = _DEV_STORAGE_SECRET
    return Settings(
        host=(os.getenv("TODOS_HOST") or "localhost").strip(),
        port=_int_env("TODOS_PORT", 3000),
        storage_secret=secret,
        session_max_age=_int_env("TODOS_SESSION_MAX_AGE", _THIRTY_ONE_DAYS),
        debug=os.getenv("TODOS_DEBUG") == "1",
        log_dir=Path(os.getenv("TODOS_LOG_DIR") or "./data/logs"),
    )
