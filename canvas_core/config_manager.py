import json
import os
from pathlib import Path
from dataclasses import dataclass, fields

from canvas_core.log_utils import log

CONFIG_FILE = Path(os.environ.get("CANVAS_CONFIG", Path(__file__).parent.parent / "config.json"))
DEFAULT_PAGES_FILE = Path(__file__).parent.parent / "data" / "form-pages.json"


@dataclass
class AppConfig:
    """Application settings model."""
    title: str = "Busup Venture Canvas"
    pages_file: str = str(DEFAULT_PAGES_FILE)
    export_filename: str = "busup-canvas.json"
    status_timeout_seconds: float = 5.0
    port: int = 8090
    auto_open: bool = False


class ConfigManager:
    """Loads the configuration file (read-only at runtime)."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        self.config_path = Path(config_path)
        self._config: AppConfig = self._load()
        self._apply_env_overrides()

    def _load(self) -> AppConfig:
        """Loads config from disk or returns defaults."""
        if not self.config_path.exists():
            return AppConfig()

        try:
            data = json.loads(self.config_path.read_text(encoding='utf-8'))
            if not isinstance(data, dict):
                raise ValueError("config root must be an object")
            # Only known fields, junk keys are ignored
            valid_keys = {f.name for f in fields(AppConfig)}
            filtered_data = {k: v for k, v in data.items() if k in valid_keys}
            return AppConfig(**filtered_data)
        except (OSError, ValueError, TypeError) as e:
            log(f"[CONFIG] Failed to load {self.config_path}: {e}")
            return AppConfig()

    def _apply_env_overrides(self):
        port = os.environ.get("CANVAS_PORT")
        if port:
            try:
                self._config.port = int(port)
            except ValueError:
                log(f"[CONFIG] Ignoring invalid CANVAS_PORT={port!r}")
        if os.environ.get("CANVAS_AUTO_OPEN") == "1":
            self._config.auto_open = True

    @property
    def config(self) -> AppConfig:
        return self._config

