"""Read-only JSON config loading.

Reads history page sizes, git timeouts, custom remote domains, and the UI theme.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyhistory"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LEGACY_CONFIG_PATH = Path.home() / ".config" / "lazyhistory.json"
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_MAX_QUICK_HISTORY = 200
DEFAULT_EXPLORER_MAX_COUNT = 100
DEFAULT_SHOW_ALL_MAX_COUNT = 0
DEFAULT_GIT_TIMEOUT_SECONDS = 10.0
KNOWN_PROVIDER_KINDS = frozenset({"github", "gitlab", "bitbucket"})


@dataclass(frozen=True)
class HistorySettings:
    """Resolved settings consumed by the git service, commands, and explorer.

    ``show_all_max_count`` is the ``max_count`` a "show all" activation
    re-fetches with; ``0`` means unbounded.
    """

    max_quick_history: int = DEFAULT_MAX_QUICK_HISTORY
    explorer_max_count: int = DEFAULT_EXPLORER_MAX_COUNT
    show_all_max_count: int = DEFAULT_SHOW_ALL_MAX_COUNT
    git_timeout_seconds: float = DEFAULT_GIT_TIMEOUT_SECONDS
    remote_custom_domains: dict[str, str] = field(default_factory=dict)
    theme: str | None = None


def _load_config_path() -> Path:
    """Return preferred config path, falling back to legacy location when needed."""
    if CONFIG_PATH.exists():
        return CONFIG_PATH
    if CONFIG_PATH == DEFAULT_CONFIG_PATH and LEGACY_CONFIG_PATH.exists():
        return LEGACY_CONFIG_PATH
    return CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = _load_config_path()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_nonnegative_int(value: object, default: int) -> int:
    """Booleans and non-integers are treated as invalid and replaced by ``default``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return max(0, value)


def _coerce_positive_float(value: object, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value <= 0:
        return default
    return float(value)


def _coerce_custom_domains(value: object) -> dict[str, str]:
    """Keep only ``domain -> provider kind`` pairs naming a known provider."""
    if not isinstance(value, dict):
        return {}
    domains: dict[str, str] = {}
    for domain, kind in value.items():
        if not isinstance(domain, str) or not isinstance(kind, str):
            continue
        domain = domain.strip().lower()
        kind = kind.strip().lower()
        if not domain or kind not in KNOWN_PROVIDER_KINDS:
            continue
        domains[domain] = kind
    return domains


def _theme_from(data: dict[str, object]) -> str | None:
    value = data.get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_settings() -> HistorySettings:
    """Build ``HistorySettings`` from the config file with per-key fallbacks."""
    data = load_config()
    return HistorySettings(
        max_quick_history=_coerce_nonnegative_int(data.get("max_quick_history"), DEFAULT_MAX_QUICK_HISTORY),
        explorer_max_count=_coerce_nonnegative_int(data.get("explorer_max_count"), DEFAULT_EXPLORER_MAX_COUNT),
        show_all_max_count=_coerce_nonnegative_int(data.get("show_all_max_count"), DEFAULT_SHOW_ALL_MAX_COUNT),
        git_timeout_seconds=_coerce_positive_float(data.get("git_timeout_seconds"), DEFAULT_GIT_TIMEOUT_SECONDS),
        remote_custom_domains=_coerce_custom_domains(data.get("remote_custom_domains")),
        theme=_theme_from(data),
    )


__all__ = [
    "HistorySettings",
    "load_config",
    "load_settings",
]
