from pathlib import Path
from typing import Any

import commentjson  # type: ignore

FALLBACK_SETTINGS: dict[str, Any] = {
    "banner_width": 60,
    "section_width": 40,
    "label_width": 15,
    "average_precision": 1,
    "emoji": True,
    "color": True,
}

_POSITIVE_INT_KEYS = ("banner_width", "section_width", "label_width")
_BOOL_KEYS = ("emoji", "color")


class SettingsManager:
    """
    Loads report display settings.

    Packaged defaults are merged over built-in fallbacks, then CLI overrides
    are applied.
    """

    def __init__(self, *, base_path: Path | None = None) -> None:
        self._base_path = base_path or Path(__file__).parent

    def load_settings(self, cli_overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        settings = dict(FALLBACK_SETTINGS)
        settings.update(self._load_defaults())

        overrides = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
        unknown = sorted(set(overrides) - set(FALLBACK_SETTINGS))
        if unknown:
            raise ValueError(f"Unknown setting(s): {', '.join(unknown)}")
        settings.update(overrides)

        self._validate(settings)
        return settings

    def _load_defaults(self) -> dict[str, Any]:
        defaults_path = self._base_path / "defaults.jsonc"
        if not defaults_path.exists():
            return {}

        try:
            with open(defaults_path, "r", encoding="utf-8") as f:
                data = commentjson.load(f)
        except Exception as e:
            raise IOError(f"Failed to parse settings file {defaults_path}: {e}")

        if not isinstance(data, dict):
            raise IOError(f"Settings file {defaults_path} must hold a JSON object")
        return {k: v for k, v in data.items() if k in FALLBACK_SETTINGS}

    def _validate(self, settings: dict[str, Any]) -> None:
        for key in _POSITIVE_INT_KEYS:
            value = settings[key]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"'{key}' must be a positive integer, got {value!r}")

        precision = settings["average_precision"]
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ValueError(
                f"'average_precision' must be a non-negative integer, got {precision!r}"
            )

        for key in _BOOL_KEYS:
            if not isinstance(settings[key], bool):
                raise ValueError(f"'{key}' must be true or false, got {settings[key]!r}")
