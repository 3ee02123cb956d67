"""
Configuration management for the country reference registry.

Usage:
    from worldcodes.config.settings import Config
    config = Config()
    registry = CountryRegistry.from_config(config)

Environment Variables:
    WORLDCODES_DATA_FILE: Path to an alternative YAML country dataset
    WORLDCODES_DUPLICATE_POLICY: overwrite | error
    WORLDCODES_LOG_LEVEL: Default log level for the command line
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from ..data_loader import DEFAULT_DATA_FILE
from ..domain.enums import DuplicatePolicy

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DatasetConfig:
    """Country dataset source and indexing configuration."""
    data_file: Path = DEFAULT_DATA_FILE
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.OVERWRITE
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate dataset configuration."""
        self.data_file = Path(self.data_file)
        if self.data_file.suffix.lower() not in ('.yml', '.yaml'):
            raise ValueError(f"Dataset file must be YAML (.yml or .yaml), got '{self.data_file.name}'")

        try:
            self.duplicate_policy = DuplicatePolicy(self.duplicate_policy)
        except ValueError:
            allowed = ", ".join(p.value for p in DuplicatePolicy)
            raise ValueError(f"Duplicate policy must be one of: {allowed}")

        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {', '.join(_LOG_LEVELS)}")


class ConfigurationError(Exception):
    """Raised when configuration is invalid or incomplete."""
    pass


class Config:
    """
    Centralized configuration for the country registry.

    Environment variables loaded (in order of preference):
    1. Explicit environment file passed to constructor
    2. .env.{ENVIRONMENT} (where ENVIRONMENT=development|production|staging)
    3. .env file in project root
    4. System environment variables

    Example:
        config = Config()
        config = Config(env_file=Path("/etc/worldcodes.env"))
    """

    def __init__(self,
                 environment: Optional[str] = None,
                 env_file: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            environment: Target environment (development|staging|production)
            env_file: Explicit path to environment file
        """
        self.environment = environment or os.getenv("ENVIRONMENT", "development")
        self.project_root = self._find_project_root()

        self._load_environment_variables(env_file)
        self._load_dataset_config()

    def _find_project_root(self) -> Path:
        """Find project root directory containing pyproject.toml, .git or a .env file."""
        current = Path(__file__).resolve()

        for parent in current.parents:
            if any((parent / marker).exists() for marker in ['pyproject.toml', '.git']):
                return parent

        for parent in current.parents:
            if (parent / '.env').exists():
                return parent

        return Path.cwd()

    def _load_environment_variables(self, env_file: Optional[Path]) -> None:
        """Load environment variables from appropriate source."""
        loaded_files = []

        if env_file:
            env_file = Path(env_file)
            if not env_file.exists():
                raise ConfigurationError(f"Specified env file not found: {env_file}")
            load_dotenv(env_file)
            loaded_files.append(str(env_file))
            logger.info(f"Loaded configuration from {env_file}")

        else:
            env_specific_file = self.project_root / f".env.{self.environment}"
            if env_specific_file.exists():
                load_dotenv(env_specific_file)
                loaded_files.append(str(env_specific_file))
                logger.debug(f"Loaded environment-specific config: {env_specific_file}")

            generic_env_file = self.project_root / ".env"
            if generic_env_file.exists():
                load_dotenv(generic_env_file)
                loaded_files.append(str(generic_env_file))
                logger.debug(f"Loaded generic config: {generic_env_file}")

        if not loaded_files:
            logger.debug("No .env files found, using system environment variables only")

        self._loaded_env_files = loaded_files

        logger.debug(f"Project root: {self.project_root}")
        logger.debug(f"Environment: {self.environment}")

    def _load_dataset_config(self) -> None:
        """Load dataset configuration with bundled defaults."""
        data_file = os.getenv("WORLDCODES_DATA_FILE") or DEFAULT_DATA_FILE
        duplicate_policy = os.getenv("WORLDCODES_DUPLICATE_POLICY", DuplicatePolicy.OVERWRITE.value)
        log_level = os.getenv("WORLDCODES_LOG_LEVEL", "INFO")

        try:
            self.dataset = DatasetConfig(
                data_file=Path(data_file),
                duplicate_policy=duplicate_policy,
                log_level=log_level
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid dataset configuration: {e}") from e

    def get_dataset_settings(self) -> dict[str, Any]:
        """
        Get dataset configuration settings as dictionary.

        Returns:
            Dictionary of dataset settings
        """
        return {
            'data_file': str(self.dataset.data_file),
            'duplicate_policy': self.dataset.duplicate_policy.value,
            'log_level': self.dataset.log_level,
            'loaded_env_files': list(self._loaded_env_files),
        }

    def __repr__(self) -> str:
        return (
            f"Config(environment={self.environment}, "
            f"data_file={self.dataset.data_file}, "
            f"duplicate_policy={self.dataset.duplicate_policy.value})"
        )
