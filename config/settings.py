from __future__ import annotations
import logging
import os
from pathlib import Path

__all__ = ["get_log_level", "get_trend_window", "get_currency_symbol"]

_DEFAULTS: dict[str, str] = {
    "LOG_LEVEL":       "INFO",
    "TREND_WINDOW":    "3",
    "CURRENCY_SYMBOL": "$",
}


def _load_dotenv(dotenv_path: Path | str = ".env") -> None:
    path = Path(dotenv_path)
    if not path.is_file():
        return
    for line in path.read_text().splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, _, value = stripped.partition("=")
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key and value and key not in os.environ:
            os.environ[key] = value


def _get_streamlit_secret(key: str) -> str:
    """
    Try to read a value from st.secrets (Streamlit Community Cloud).
    Returns empty string if streamlit is not available or key not set.
    Safe to call outside a Streamlit context.

    Uses key-in-secrets check before access to avoid FileNotFoundError
    (no secrets file) and KeyError (key not present) both cleanly.
    """
    try:
        import streamlit as st
        if key in st.secrets:
            return str(st.secrets[key]).strip()
        return ""
    except Exception:
        return ""


def _get_setting(key: str) -> str:
    """Priority: st.secrets → environment variable → .env file → default."""
    secret = _get_streamlit_secret(key)
    if secret:
        return secret
    _load_dotenv()
    return os.environ.get(key, _DEFAULTS[key]).strip()


def get_log_level() -> int:
    """Return the logging level for the app (LOG_LEVEL, default INFO)."""
    name = _get_setting("LOG_LEVEL").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_trend_window() -> int:
    """Return the moving-average window used by the dashboard trends."""
    try:
        window = int(_get_setting("TREND_WINDOW"))
    except ValueError:
        return int(_DEFAULTS["TREND_WINDOW"])
    return max(window, 1)


def get_currency_symbol() -> str:
    """Display-only currency symbol for summaries and the preview screen."""
    return _get_setting("CURRENCY_SYMBOL") or _DEFAULTS["CURRENCY_SYMBOL"]
