"""Console settings loaded from environment and config file."""

from pathlib import Path

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from solr_console.models.config.server import ServerConfig

DEFAULT_CONFIG_DIR = Path.home() / ".solr-console"


class ConsoleSettings(BaseSettings):
    """Main console configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SOLR_CONSOLE_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Server settings
    server: ServerConfig = Field(default_factory=ServerConfig)

    # Upstream Solr calls: reads, status and probes stay short so the UI
    # remains responsive. Writes use no client-side timeout.
    read_timeout: float = Field(default=5.0, gt=0)

    # AI providers
    ai_timeout: float = Field(default=60.0, gt=0)
    openrouter_url: str = "https://openrouter.ai/api/v1"
    openrouter_referer: str = "https://github.com/solr-console"
    default_ollama_url: str = "http://localhost:11434"

    # CLI settings
    color: bool = True
    config_dir: Path = Field(default_factory=lambda: DEFAULT_CONFIG_DIR)

    @classmethod
    def load_from_file(cls, config_path: Path | None = None) -> "ConsoleSettings":
        """Load configuration from file, falling back to defaults."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_DIR / "config.yaml"

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}

            if "server" in config_data:
                config_data["server"] = ServerConfig.model_validate(
                    config_data["server"]
                )
            if isinstance(config_data.get("config_dir"), str):
                config_data["config_dir"] = Path(config_data["config_dir"])

            return cls(**config_data)
        except Exception:
            # If config file is invalid, return default config
            return cls()

    def save_to_file(self, config_path: Path | None = None) -> Path:
        """Save configuration to file and return the path written."""
        if config_path is None:
            config_path = self.config_dir / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.model_dump(mode="json")

        with open(config_path, "w") as f:
            yaml.safe_dump(config_dict, f, default_flow_style=False)

        return config_path


__all__ = ["ConsoleSettings"]
