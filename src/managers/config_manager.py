"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files and exposes typed settings.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from models.enums import LogLevel, LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)

SRC_DIR = Path(__file__).parent.parent

DEFAULT_LOG_LEVEL = LogLevel.INFO
DEFAULT_USE_COLORS = True
DEFAULT_PREFS_PATH = "data/preferences.json"
DEFAULT_MAX_ATTEMPTS = 3


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes include: directive to load modular YAML files.
    Falls back to factory_defaults.yaml when the main file is missing or broken.

    Example:
        config = ConfigManager()
        config.load()

        configure_logger(config.log_level, config.use_colors)
        store = JsonPreferencesStore(config.preferences_path)
    """

    def __init__(
        self,
        config_path: Union[str, Path] = "config/config.yaml",
        defaults_path: Union[str, Path] = "config/factory_defaults.yaml",
    ):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main config.yaml (relative to src/ unless absolute)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}

    def load(self) -> Dict[str, Any]:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat as monolithic config
        4. Fallback to factory_defaults.yaml on failure

        Returns:
            Merged config data dict
        """
        try:
            full_path = SRC_DIR / self.config_path

            with open(full_path, "r", encoding="utf-8") as f:
                main_config = yaml.safe_load(f) or {}

            if not isinstance(main_config, dict):
                raise ValueError(f"Top level of {full_path.name} must be a mapping")

            if 'include' in main_config:
                log.info("Using include-based configuration")
                self.data = self._load_with_includes(main_config['include'], full_path.parent)
            else:
                log.info("Using monolithic configuration")
                self.data = main_config

        except Exception as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            defaults_path = SRC_DIR / self.factory_defaults_path
            with open(defaults_path, "r", encoding="utf-8") as f:
                self.data = yaml.safe_load(f) or {}

        return self.data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict[str, Any]:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["logging.yaml", "dialog.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict (later files override earlier top-level keys)
        """
        merged: Dict[str, Any] = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    file_data = yaml.safe_load(f)
                    if file_data:
                        merged.update(file_data)
                        log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise

        log.info("Config merge complete", total_keys=len(merged))
        return merged

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.data.get(name)
        return section if isinstance(section, dict) else {}

    # ===== Typed settings =====

    @property
    def log_level(self) -> LogLevel:
        raw: Optional[str] = self._section("logging").get("level")
        if raw is None:
            return DEFAULT_LOG_LEVEL
        try:
            return LogLevel[str(raw).upper()]
        except KeyError:
            log.warn("Unknown log level in config, using default", configured=raw)
            return DEFAULT_LOG_LEVEL

    @property
    def use_colors(self) -> bool:
        return bool(self._section("logging").get("use_colors", DEFAULT_USE_COLORS))

    @property
    def preferences_path(self) -> Path:
        """Preferences file; relative paths resolve against the working directory"""
        return Path(self._section("preferences").get("path", DEFAULT_PREFS_PATH))

    @property
    def max_attempts(self) -> int:
        value = self._section("dialog").get("max_attempts", DEFAULT_MAX_ATTEMPTS)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            log.warn("Invalid dialog.max_attempts, using default", value=value)
            return DEFAULT_MAX_ATTEMPTS
        return value
