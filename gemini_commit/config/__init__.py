"""Configuration Management Package"""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from gemini_commit.output import print_warning

DEFAULT_MODEL = "gemini-1.5-flash-latest"
DEFAULT_API_HOST = "https://generativelanguage.googleapis.com"


@dataclass
class Config:
    """User configuration with sensible defaults. The API key never lives here."""
    model: str = DEFAULT_MODEL
    api_host: str = DEFAULT_API_HOST
    confirm: bool = True  # Ask before committing

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.model, str) or not self.model.strip():
            warnings.append(f"Invalid model '{self.model}', using '{defaults.model}'")
            self.model = defaults.model

        if not isinstance(self.api_host, str) or not self.api_host.startswith(('http://', 'https://')):
            warnings.append(f"Invalid api_host '{self.api_host}', using '{defaults.api_host}'")
            self.api_host = defaults.api_host

        if not isinstance(self.confirm, bool):
            warnings.append(f"Invalid confirm '{self.confirm}', using {str(defaults.confirm).lower()}")
            self.confirm = defaults.confirm

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print_warning(f"Config warning: {warning}")
        return config


class ConfigManager:
    """Loads configuration from .gcmrc (current directory first, then home)."""

    CONFIG_FILENAME = ".gcmrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
                return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (json.JSONDecodeError, ValueError, IOError) as e:
            print_warning(f"Could not load {path}: {e}")
            return Config()

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "get_config_path",
    "DEFAULT_MODEL",
    "DEFAULT_API_HOST",
]
