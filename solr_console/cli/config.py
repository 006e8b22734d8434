"""Configuration management for the Solr Console CLI."""

from solr_console.models.config import ConsoleSettings

# Global configuration instance
_config: ConsoleSettings | None = None


def get_config() -> ConsoleSettings:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ConsoleSettings.load_from_file()
    return _config


def set_config(config: ConsoleSettings) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
