"""Configuration provider following Black Box Design principles."""
import logging
import os
from dataclasses import dataclass
from typing import Optional, Protocol

from dotenv import load_dotenv

from keyqueue.errors import ConfigurationError

logger = logging.getLogger("keyqueue.config")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SequencerConfig:
    """Sequencer configuration."""
    log_level: str = "INFO"
    debug: bool = False
    depth_warning: Optional[int] = None

    @property
    def warns_on_depth(self) -> bool:
        """Check if queue depth warnings are enabled."""
        return self.depth_warning is not None


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_sequencer_config(self) -> SequencerConfig:
        """Get sequencer configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize provider.

        Args:
            env_file: Optional dotenv file loaded (overriding) before reading
        """
        self.env_file = env_file
        if env_file:
            load_dotenv(env_file, override=True)
            logger.debug(f"Loaded environment from {env_file}")

    def get_sequencer_config(self) -> SequencerConfig:
        """Get sequencer configuration from environment variables."""
        log_level = os.getenv("KEYQUEUE_LOG_LEVEL", "INFO").upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"KEYQUEUE_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got {log_level!r}"
            )

        return SequencerConfig(
            log_level=log_level,
            debug=os.getenv("KEYQUEUE_DEBUG", "false").lower() == "true",
            depth_warning=self._parse_depth_warning(os.getenv("KEYQUEUE_DEPTH_WARNING")),
        )

    @staticmethod
    def _parse_depth_warning(raw: Optional[str]) -> Optional[int]:
        if raw is None or not raw.strip():
            return None
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"KEYQUEUE_DEPTH_WARNING must be an integer, got {raw!r}")
        if value < 1:
            raise ConfigurationError(f"KEYQUEUE_DEPTH_WARNING must be positive, got {value}")
        return value
