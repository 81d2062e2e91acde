"""Persistent JSON user config.

Stores the last opened folder, checked file paths, ignore patterns, the
include-binaries flag, and the history of opened projects.
All access is defensive: malformed or missing config falls back to defaults
and write failures never propagate.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from .ignore import DEFAULT_IGNORE_PATTERNS

logger = logging.getLogger(__name__)

APP_NAME = "ai-clipboard"
CONFIG_FILENAME = "userconfig.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LEGACY_CONFIG_PATH = Path(CONFIG_FILENAME)
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass
class UserConfig:
    last_folder: str | None = None
    checked_files: list[str] = field(default_factory=list)
    include_binaries: bool = False
    ignore_patterns: list[str] = field(default_factory=list)
    previous_projects: list[str] = field(default_factory=list)

    def effective_ignore_patterns(self) -> list[str]:
        """Return configured patterns, or the defaults when none are set."""
        if self.ignore_patterns:
            return list(self.ignore_patterns)
        return list(DEFAULT_IGNORE_PATTERNS)

    def remember_project(self, path: str) -> bool:
        """Append ``path`` to project history unless already present."""
        if path in self.previous_projects:
            return False
        self.previous_projects.append(path)
        return True

    def to_dict(self) -> dict[str, object]:
        return {
            "LastFolder": self.last_folder,
            "CheckedFiles": list(self.checked_files),
            "IncludeBinaries": bool(self.include_binaries),
            "IgnorePatterns": list(self.ignore_patterns),
            "PreviousProjects": list(self.previous_projects),
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> UserConfig:
        """Build a config from decoded JSON, dropping values of the wrong type."""
        last_folder = data.get("LastFolder")
        include_binaries = data.get("IncludeBinaries")
        return cls(
            last_folder=last_folder if isinstance(last_folder, str) and last_folder else None,
            checked_files=_string_list(data.get("CheckedFiles")),
            include_binaries=include_binaries if isinstance(include_binaries, bool) else False,
            ignore_patterns=_string_list(data.get("IgnorePatterns")),
            previous_projects=_dedupe(_string_list(data.get("PreviousProjects"))),
        )


def _string_list(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _dedupe(values: list[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        out.append(value)
    return out


def _load_config_path() -> Path:
    """Return preferred config path, falling back to legacy location when needed."""
    if CONFIG_PATH.exists():
        return CONFIG_PATH
    if CONFIG_PATH == DEFAULT_CONFIG_PATH and LEGACY_CONFIG_PATH.exists():
        return LEGACY_CONFIG_PATH
    return CONFIG_PATH


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = path if path is not None else _load_config_path()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", config_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object], path: Path | None = None) -> bool:
    """Persist config data as pretty-printed JSON.

    Returns ``False`` instead of raising when the file cannot be written.
    """
    config_path = path if path is not None else CONFIG_PATH
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not save config %s: %s", config_path, exc)
        return False
    return True


def load_user_config(path: Path | None = None) -> UserConfig:
    return UserConfig.from_dict(load_config(path))


def save_user_config(config: UserConfig, path: Path | None = None) -> bool:
    return save_config(config.to_dict(), path)


__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "CONFIG_PATH",
    "UserConfig",
    "load_config",
    "load_user_config",
    "save_config",
    "save_user_config",
]
