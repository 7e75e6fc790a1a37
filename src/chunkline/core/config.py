from pathlib import Path
from typing import Any, Dict, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Chunk sizing (units of the configured tokenizer)
    CHUNK_SIZE: int = 1024
    CHUNK_OVERLAP: int = 64

    # Strategy: recursive|markdown|character|sentence
    CHUNK_STRATEGY: str = "recursive"
    CHUNK_SEPARATOR: str = "\n\n"  # Only used by the character strategy

    # Size model: chars|tiktoken
    TOKENIZER: str = "chars"
    TOKENIZER_MODEL: str = "text-embedding-3-small"

    # Observability
    LOG_FORMAT: str = "auto"  # json|plain|auto
    LOG_LEVEL: str = "info"  # debug|info|warning|error

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8"
    )

    @classmethod
    def load_config(cls, config_file: Optional[str] = None) -> "Settings":
        """Load settings with config file -> env -> CLI precedence."""
        config_data: Dict[str, Any] = {}

        # Find config file
        if config_file:
            config_path: Optional[Path] = Path(config_file)
        else:
            # Auto-discover .chunkline.{yaml,yml,toml}
            for ext in ["yaml", "yml", "toml"]:
                config_path = Path(f".chunkline.{ext}")
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

        # Environment variables override file values
        settings = cls()
        env_fields = settings.model_fields_set
        merged = {k.upper(): v for k, v in config_data.items()}
        merged.update({name: getattr(settings, name) for name in env_fields})
        return cls(**merged)


# Default settings - replaced by load_config() during CLI startup
SETTINGS = Settings()
