"""
Config Module - Black Box Interface

Purpose: Sequencer configuration management
Interface: get_config(), reset_config(), EnvConfigProvider
Hidden: Config sources, validation logic, environment parsing

Can be replaced with any provider implementing ConfigProvider.
"""

from typing import Optional

from .provider import ConfigProvider, EnvConfigProvider, SequencerConfig

# Singleton instance
_instance: Optional[SequencerConfig] = None


def get_config() -> SequencerConfig:
    """Get the sequencer configuration singleton."""
    global _instance
    if _instance is None:
        _instance = EnvConfigProvider().get_sequencer_config()
    return _instance


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() re-reads it."""
    global _instance
    _instance = None


__all__ = ["get_config", "reset_config", "ConfigProvider", "EnvConfigProvider", "SequencerConfig"]
