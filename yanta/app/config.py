from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

GLOBAL_CONFIG = Path.home() / ".config" / "yanta" / "config.json"

WORD_WRAP_KEY = "WordWrap"
CUSTOM_CSS_KEY = "CustomCssPath"


@dataclass
class AppConfig:
    word_wrap: bool = False
    custom_css_path: str = ""

    def to_payload(self) -> dict:
        return {WORD_WRAP_KEY: bool(self.word_wrap), CUSTOM_CSS_KEY: self.custom_css_path or ""}

    @classmethod
    def from_payload(cls, payload: dict) -> "AppConfig":
        css = payload.get(CUSTOM_CSS_KEY)
        return cls(
            word_wrap=bool(payload.get(WORD_WRAP_KEY, False)),
            custom_css_path=css if isinstance(css, str) else "",
        )


def debug_enabled(var_name: str) -> bool:
    """Check if a debug flag is enabled."""
    return os.getenv(var_name, "0") not in ("0", "false", "False", "")


def _read_global_config() -> dict:
    """Return the parsed global config, or an empty dict on error/missing."""
    if not GLOBAL_CONFIG.exists():
        return {}
    try:
        payload = json.loads(GLOBAL_CONFIG.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", GLOBAL_CONFIG, exc)
        return {}
    if not isinstance(payload, dict):
        logger.warning("Ignoring config %s: expected a JSON object", GLOBAL_CONFIG)
        return {}
    return payload


def _update_global_config(updates: dict) -> None:
    """Merge updates into global config file."""
    existing = _read_global_config()
    existing.update(updates)
    GLOBAL_CONFIG.parent.mkdir(parents=True, exist_ok=True)
    GLOBAL_CONFIG.write_text(json.dumps(existing, indent=2), encoding="utf-8")


def load_app_config() -> AppConfig:
    return AppConfig.from_payload(_read_global_config())


def save_app_config(cfg: AppConfig) -> None:
    """Persist the config; raises OSError when the file cannot be written."""
    _update_global_config(cfg.to_payload())
