from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_PROMPT = "kflisp> "
_DEFAULT_HISTORY_FILE = Path.home() / ".kflisp_history"
_DEFAULT_HISTORY_LENGTH = 1000
_DEFAULT_LOG_LEVEL = "WARNING"


def get_prompt() -> str:
    return os.environ.get("KFLISP_PROMPT", _DEFAULT_PROMPT)


def get_history_file() -> Optional[Path]:
    # an explicitly empty value disables persistence
    raw = os.environ.get("KFLISP_HISTORY_FILE")
    if raw is None:
        return _DEFAULT_HISTORY_FILE
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def get_history_length() -> int:
    raw = os.environ.get("KFLISP_HISTORY_LENGTH")
    if not raw:
        return _DEFAULT_HISTORY_LENGTH
    try:
        return int(raw)
    except ValueError:
        return _DEFAULT_HISTORY_LENGTH


def get_log_level(override: Optional[str] = None) -> int:
    name = (override or os.environ.get("KFLISP_LOG_LEVEL") or _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(override: Optional[str] = None) -> None:
    logging.basicConfig(
        level=get_log_level(override),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
