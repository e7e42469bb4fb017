"""JSON config helpers and browser settings.

Stores the sort policy, cursor wrap, refresh timing, preview style and the
external editor command. All access is defensive: malformed or missing config
falls back to defaults, and wrong-typed values are ignored key by key.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

from .directory_model import DEFAULT_SORT_POLICY, SortPolicy

APP_NAME = "lazyfm"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_TICK_MS = 250
DEFAULT_STYLE = "monokai"


@dataclass(frozen=True)
class BrowserSettings:
    """Tunables for one session.

    ``refresh_seconds <= 0`` re-reads listings on every tick; a positive value
    is the staleness threshold below which ticks leave listings alone.
    """

    sort_policy: SortPolicy = DEFAULT_SORT_POLICY
    wrap: bool = True
    refresh_seconds: float = 0.0
    tick_ms: int = DEFAULT_TICK_MS
    style: str = DEFAULT_STYLE
    editor: str | None = None

    def with_overrides(self, **overrides: object) -> BrowserSettings:
        """Return a copy with every non-``None`` override applied."""
        present = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **present)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _load_sort_policy(value: object) -> SortPolicy | None:
    if not isinstance(value, str):
        return None
    try:
        return SortPolicy.from_name(value)
    except ValueError:
        return None


def _load_nonnegative_float(value: object) -> float | None:
    """Accept JSON numbers >= 0; booleans are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value < 0:
        return None
    return float(value)


def _load_positive_int(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def _load_nonempty_str(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_settings() -> BrowserSettings:
    """Build ``BrowserSettings`` from the config file, keeping defaults for bad keys."""
    data = load_config()
    wrap = data.get("wrap")
    return BrowserSettings().with_overrides(
        sort_policy=_load_sort_policy(data.get("sort")),
        wrap=wrap if isinstance(wrap, bool) else None,
        refresh_seconds=_load_nonnegative_float(data.get("refresh_seconds")),
        tick_ms=_load_positive_int(data.get("tick_ms")),
        style=_load_nonempty_str(data.get("style")),
        editor=_load_nonempty_str(data.get("editor")),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "BrowserSettings",
    "load_config",
    "load_settings",
]
