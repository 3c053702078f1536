from __future__ import annotations
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

def _getenv_bool(name: str, default: bool) -> bool:
    v = os.getenv(name, str(default)).strip().lower()
    return v in ("1", "true", "yes", "y", "on")

def _getenv_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default

def _parse_widths(s: str) -> tuple[int, ...]:
    """
    Convierte '375,1280' en (375, 1280).
    Ignora valores vacíos, no numéricos o <= 0.
    """
    out = []
    for part in (s or "").split(","):
        part = part.strip()
        if not part:
            continue
        try:
            w = int(part)
        except ValueError:
            continue
        if w > 0:
            out.append(w)
    return tuple(out)

@dataclass(frozen=True)
class Settings:
    # agente percy
    AGENT_HOST: str
    AGENT_PORT: int
    AGENT_JS_PATH: str
    REQUEST_TIMEOUT_SEC: int
    DEBUG: bool

    # snapshot (runner)
    PAGE_URL: str
    SNAPSHOT_NAME: str
    WIDTHS: tuple[int, ...]
    MIN_HEIGHT: Optional[int]
    ENABLE_JAVASCRIPT: bool

    # navegador (runner)
    SELENIUM_BROWSER: str
    HEADLESS: bool

    @property
    def snapshot_endpoint(self) -> str:
        return f"http://{self.AGENT_HOST}:{self.AGENT_PORT}/percy/snapshot"

def load_settings() -> Settings:
    env_path = Path(__file__).resolve().parent.parent / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
    else:
        load_dotenv()

    AGENT_HOST = os.getenv("PERCY_AGENT_HOST", "localhost").strip() or "localhost"
    AGENT_PORT = _getenv_int("PERCY_AGENT_PORT", 5338)
    AGENT_JS_PATH = os.getenv("PERCY_AGENT_JS", "").strip()
    REQUEST_TIMEOUT_SEC = _getenv_int("PERCY_REQUEST_TIMEOUT", 15)
    DEBUG = _getenv_bool("PERCY_DEBUG", False)

    PAGE_URL = os.getenv("SNAPSHOT_PAGE_URL", "").strip()
    SNAPSHOT_NAME = os.getenv("SNAPSHOT_NAME", "").strip()
    WIDTHS = _parse_widths(os.getenv("SNAPSHOT_WIDTHS", ""))
    MIN_HEIGHT = _getenv_int("SNAPSHOT_MIN_HEIGHT", None)
    if MIN_HEIGHT is not None and MIN_HEIGHT < 0:
        MIN_HEIGHT = None
    ENABLE_JAVASCRIPT = _getenv_bool("SNAPSHOT_ENABLE_JS", False)

    SELENIUM_BROWSER = os.getenv("SELENIUM_BROWSER", "chrome").strip()
    HEADLESS = _getenv_bool("SELENIUM_HEADLESS", True)

    return Settings(
        AGENT_HOST=AGENT_HOST,
        AGENT_PORT=AGENT_PORT,
        AGENT_JS_PATH=AGENT_JS_PATH,
        REQUEST_TIMEOUT_SEC=REQUEST_TIMEOUT_SEC,
        DEBUG=DEBUG,
        PAGE_URL=PAGE_URL,
        SNAPSHOT_NAME=SNAPSHOT_NAME,
        WIDTHS=WIDTHS,
        MIN_HEIGHT=MIN_HEIGHT,
        ENABLE_JAVASCRIPT=ENABLE_JAVASCRIPT,
        SELENIUM_BROWSER=SELENIUM_BROWSER,
        HEADLESS=HEADLESS,
    )
