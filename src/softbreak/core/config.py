from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Dict, Any
from pathlib import Path


class Settings(BaseSettings):
    # Segmentation
    DEFAULT_LANG: str = "ja"  # ja|zh-hans|zh-hant|th
    THRESHOLD: int = 1000  # Boundary accepted when score > THRESHOLD
    SEPARATOR: str = "|"  # Chunk separator for plain output

    # Model data
    MODEL_DIR: Optional[str] = Field(
        default=None,
        description="Directory of <lang>.json tables checked before the packaged ones",
    )

    # HTML processing
    HTML_PARSER: str = "html.parser"  # BeautifulSoup tree builder

    # Input guard applied by the CLI before segmentation
    MAX_INPUT_CHARS: int = 1_000_000

    # Observability
    LOG_FORMAT: str = "auto"  # json|plain|auto
    LOG_LEVEL: str = "info"  # debug|info|warning|error

    model_config = SettingsConfigDict(
        env_prefix="SOFTBREAK_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @classmethod
    def load_config(cls, config_file: Optional[str] = None) -> "Settings":
        """Load settings with config file -> env -> CLI precedence."""
        config_data: Dict[str, Any] = {}

        # Find config file
        if config_file:
            config_path = Path(config_file)
        else:
            # Auto-discover .softbreak.{yaml,yml,toml}
            for ext in ["yaml", "yml", "toml"]:
                config_path = Path(f".softbreak.{ext}")
                if config_path.exists():
                    break
            else:
                config_path = None

        if config_path and config_path.exists():
            if config_path.suffix in [".yaml", ".yml"]:
                import yaml  # type: ignore[import-untyped]

                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            elif config_path.suffix == ".toml":
                import tomllib

                with open(config_path, "rb") as f:
                    config_data = tomllib.load(f)

        # Environment variables take precedence over file values
        from_env = cls().model_fields_set
        return cls(**{k: v for k, v in config_data.items() if k not in from_env})


# Default settings - will be replaced by load_config() during CLI startup
SETTINGS = Settings()
