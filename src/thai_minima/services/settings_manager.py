"""Settings Manager - Handles API key, model and local data configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class SettingsManager:
    """
    Manages settings and API key configuration.

    Values come from a .env file in the project root, overridden by the
    process environment. Blank values count as unset.
    """

    DEFAULT_MODEL = "gemini-2.5-flash"
    DEFAULT_LOG_LEVEL = "INFO"
    DATA_DIR_NAME = ".thai_minima"

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment (API_KEY is accepted as fallback)."""
        return self._get("GEMINI_API_KEY") or self._get("API_KEY")

    def get_gemini_model(self) -> str:
        return self._get("GEMINI_MODEL") or self.DEFAULT_MODEL

    def get_data_dir(self) -> Path:
        """Directory holding the persisted translation history."""
        configured = self._get("THAI_MINIMA_DATA_DIR")
        if configured:
            return Path(configured).expanduser()
        return Path.home() / self.DATA_DIR_NAME

    def get_log_level(self) -> int:
        """Logging level from THAI_MINIMA_LOG_LEVEL; unknown names fall back to INFO."""
        name = (self._get("THAI_MINIMA_LOG_LEVEL") or self.DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
