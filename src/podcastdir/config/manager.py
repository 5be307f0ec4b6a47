"""Configuration manager for loading and saving podcastdir config."""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from podcastdir.config.schema import GlobalConfig
from podcastdir.utils.errors import InvalidConfigError
from podcastdir.utils.paths import get_config_dir, get_config_file

logger = logging.getLogger(__name__)

TTL_ENV_VAR = "PODCASTDIR_CACHE_TTL_HOURS"


class ConfigManager:
    """Manages the podcastdir configuration file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to XDG config dir.
        """
        if config_dir is None:
            self.config_dir = get_config_dir()
            self.config_file = get_config_file()
        else:
            self.config_dir = config_dir
            self.config_file = config_dir / "config.yaml"

    def load_config(self) -> GlobalConfig:
        """Load and validate global configuration.

        Creates a default config file on first use. The cache TTL can be
        overridden with the ``PODCASTDIR_CACHE_TTL_HOURS`` environment
        variable.

        Returns:
            Validated GlobalConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            config = GlobalConfig()
            self.save_config(config)
        else:
            try:
                with open(self.config_file) as f:
                    data = yaml.safe_load(f) or {}
                config = GlobalConfig(**data)
            except (yaml.YAMLError, ValidationError, TypeError) as e:
                raise InvalidConfigError(
                    f"Invalid configuration in {self.config_file}: {e}"
                ) from e

        return self._apply_env_overrides(config)

    def save_config(self, config: GlobalConfig) -> None:
        """Save global configuration.

        Args:
            config: GlobalConfig instance to save
        """
        data = config.model_dump(mode="json")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

        logger.debug("Wrote configuration to %s", self.config_file)

    def _apply_env_overrides(self, config: GlobalConfig) -> GlobalConfig:
        raw_ttl = os.environ.get(TTL_ENV_VAR)
        if not raw_ttl:
            return config

        try:
            ttl_hours = float(raw_ttl)
            cache = config.cache.model_validate(
                {**config.cache.model_dump(), "ttl_hours": ttl_hours}
            )
        except (ValueError, ValidationError) as e:
            raise InvalidConfigError(f"Invalid {TTL_ENV_VAR}={raw_ttl!r}: {e}") from e

        return config.model_copy(update={"cache": cache})
