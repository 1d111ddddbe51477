from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

MAX_HISTORY = 50
PREVIEW_TEXT_LIMIT = 80
PREVIEW_CODE_LIMIT = 200
POLL_INTERVAL_MS = 500
PUBLISH_LIMIT = 10
MAX_CONTENT_BYTES = 1024 * 1024


def _load_env_file(env_path: Optional[Path] = None) -> None:
    path = env_path or Path.cwd() / ".env"
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def _to_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _positive_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class EdgeBoardConfig:
    max_history: int = MAX_HISTORY
    preview_text_limit: int = PREVIEW_TEXT_LIMIT
    preview_code_limit: int = PREVIEW_CODE_LIMIT
    poll_interval: float = POLL_INTERVAL_MS / 1000
    publish_limit: int = PUBLISH_LIMIT
    max_content_bytes: int = MAX_CONTENT_BYTES
    classify_on_startup: bool = False
    sensitive_keywords: Tuple[str, ...] = ("password", "secret")
    api_host: str = "127.0.0.1"
    api_port: int = 3001

    @classmethod
    def from_env(cls, *, env_path: Optional[Path] = None) -> "EdgeBoardConfig":
        """Build a config from ``EDGEBOARD_*`` variables.

        A ``.env`` file is loaded first when present; variables already set in
        the process environment win over the file.
        """
        _load_env_file(env_path)

        keywords_raw = os.getenv("EDGEBOARD_SENSITIVE_KEYWORDS")
        if keywords_raw:
            keywords = tuple(
                word.strip().lower() for word in keywords_raw.split(",") if word.strip()
            )
        else:
            keywords = cls.sensitive_keywords

        return cls(
            max_history=_positive_int("EDGEBOARD_MAX_HISTORY", cls.max_history),
            preview_text_limit=_positive_int(
                "EDGEBOARD_PREVIEW_TEXT_LIMIT", cls.preview_text_limit),
            preview_code_limit=_positive_int(
                "EDGEBOARD_PREVIEW_CODE_LIMIT", cls.preview_code_limit),
            poll_interval=_positive_float(
                "EDGEBOARD_POLL_INTERVAL", cls.poll_interval),
            publish_limit=_positive_int(
                "EDGEBOARD_PUBLISH_LIMIT", cls.publish_limit),
            max_content_bytes=_positive_int(
                "EDGEBOARD_MAX_CONTENT_BYTES", cls.max_content_bytes),
            classify_on_startup=_to_bool(
                os.getenv("EDGEBOARD_CLASSIFY_ON_STARTUP"), default=cls.classify_on_startup),
            sensitive_keywords=keywords,
            api_host=os.getenv("EDGEBOARD_API_HOST", cls.api_host),
            api_port=_positive_int("EDGEBOARD_API_PORT", cls.api_port),
        )

    def with_overrides(self, **changes) -> "EdgeBoardConfig":
        """Return a copy with the non-``None`` values in ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
