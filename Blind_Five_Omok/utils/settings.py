"""Game settings: YAML defaults merged with command-line overrides."""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

LOGGER = logging.getLogger(__name__)

PROJECT_DIR = Path(__file__).resolve().parents[1]
DEFAULT_SETTINGS_PATH = "config/settings.yaml"


def resolve_project_path(path):
    """Resolve a package-relative path when invoked from outside `Blind_Five_Omok/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


@dataclass(frozen=True)
class GameSettings:
    board_size: int = 18
    start_seconds: int = 180
    win_length: int = 5
    auto_commit: bool = False
    palette: tuple = ("red", "orange", "yellow", "green", "blue", "purple", "pink")
    default_appearance: str = "red"
    window_size: int = 860

    @classmethod
    def from_mapping(cls, data):
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        unknown = sorted(k for k in data if k not in known)
        if unknown:
            LOGGER.warning("Ignoring unknown settings: %s", ", ".join(unknown))
        if "palette" in values:
            values["palette"] = tuple(values["palette"])
        return cls(**values)

    def with_overrides(self, args):
        """Apply argparse values that were actually given (None means not set)."""
        mapping = {
            "board_size": getattr(args, "board_size", None),
            "start_seconds": getattr(args, "time_limit", None),
            "win_length": getattr(args, "win_length", None),
            "auto_commit": getattr(args, "auto_commit", None),
        }
        changes = {k: v for k, v in mapping.items() if v is not None}
        return replace(self, **changes)


def load_settings(path=None):
    """
    Load settings from YAML. An explicit path must exist; the bundled default
    is optional and falls back to built-in values.
    """
    explicit = path is not None
    resolved = resolve_project_path(path or DEFAULT_SETTINGS_PATH)
    if not resolved.exists():
        if explicit:
            raise FileNotFoundError(f"Settings file not found: {resolved}")
        LOGGER.info("No settings file at %s; using defaults", resolved)
        return GameSettings()
    with open(resolved, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return GameSettings.from_mapping(data)
