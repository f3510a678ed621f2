"""Configuration management for the safebin CLI."""

import json
import os
import shutil
from pathlib import Path

from common.constants import DEFAULT_MAX_MB, UPLOAD_CHUNK_SIZE
from common.logging_config import get_logger

logger = get_logger(__name__)


class Config:
    """Manages CLI configuration stored in JSON file."""

    DEFAULT_CONFIG = {
        "server_url": "http://localhost:8080",
        "max_mb": DEFAULT_MAX_MB,
        "timeout": 300,
        "chunk_size": UPLOAD_CHUNK_SIZE,
        "upload_id_strategy": "random",
    }

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.safebin/config.json)
        """
        self.config_path = config_path
        self.data = self._load()

    def _defaults(self) -> dict:
        """
        Build default configuration, applying SAFEBIN_SERVER and SAFEBIN_MAX_MB.

        A SAFEBIN_MAX_MB that is not an integer is ignored with a warning.
        """
        config = self.DEFAULT_CONFIG.copy()
        server_url = os.environ.get("SAFEBIN_SERVER")
        if server_url:
            config["server_url"] = server_url
        max_mb = os.environ.get("SAFEBIN_MAX_MB")
        if max_mb:
            try:
                config["max_mb"] = int(max_mb)
            except ValueError:
                logger.warning(f"Ignoring SAFEBIN_MAX_MB={max_mb!r}: not an integer")
        return config

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            import tempfile
            self.config_path = Path(tempfile.gettempdir()) / '.safebin' / 'config.json'
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                config = self._defaults()
                config.update(data)
                return config
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Unreadable config {self.config_path}: {e}; using defaults")
                backup_path = self.config_path.with_suffix('.json.bak')
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError as copy_error:
                    logger.warning(f"Could not back up config: {copy_error}")
                return self._defaults()
        else:
            config = self._defaults()
            try:
                with open(self.config_path, 'w') as f:
                    json.dump(config, f, indent=2)
            except IOError as e:
                logger.warning(f"Could not write default config: {e}")
            return config

    def save(self) -> None:
        """Save current configuration to file."""
        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
        except IOError as e:
            logger.warning(f"Could not save config: {e}")

    def get_base_url(self) -> str:
        """
        Get server base URL.

        Returns:
            Base URL string without trailing slash (e.g., "http://localhost:8080")
        """
        return str(self.data.get('server_url', 'http://localhost:8080')).rstrip('/')

    def set_base_url(self, url: str) -> None:
        """
        Set server base URL and save to file.

        Args:
            url: Base URL, scheme included
        """
        self.data['server_url'] = url.rstrip('/')
        self.save()

    def get_timeout(self) -> float:
        """Get request timeout in seconds."""
        return float(self.data.get('timeout', 300))

    def get_max_mb(self) -> int:
        """Get maximum upload size in megabytes."""
        return int(self.data.get('max_mb', DEFAULT_MAX_MB))

    def get_chunk_size(self) -> int:
        """Get chunk size in bytes."""
        return int(self.data.get('chunk_size', UPLOAD_CHUNK_SIZE))

    def get_upload_id_strategy(self) -> str:
        """Get upload id strategy name ('random' or 'uuid')."""
        return self.data.get('upload_id_strategy', 'random')
