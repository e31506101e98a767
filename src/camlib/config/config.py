"""Configuration management for CamLib."""
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from camlib.config.paths import default_config_path
from camlib.platform.logging import logger

SHRINK_ENDPOINT_DEFAULT = "https://api.tinify.com/shrink"
FILE_HASH_CHUNK_SIZE_DEFAULT = 64 * 1024
DOWNLOAD_CHUNK_SIZE_DEFAULT = 64 * 1024
WORKER_THREADS_DEFAULT = 8


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Optional rotating log file; console logging is always enabled
    log_file: Path | None = _path_field()

    # Remote compression service
    shrink_endpoint: str = SHRINK_ENDPOINT_DEFAULT
    connect_timeout: float = 10.0
    read_timeout: float = 120.0

    # Local execution
    worker_threads: int = WORKER_THREADS_DEFAULT
    hash_chunk_size: int = FILE_HASH_CHUNK_SIZE_DEFAULT
    download_chunk_size: int = DOWNLOAD_CHUNK_SIZE_DEFAULT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults. Unknown keys are ignored with a
        warning so older binaries keep working with newer config files.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file exists but is not valid TOML.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        if not config_file.exists():
            instance = cls()
            cls._instance = instance
            cls._loaded_from = None
            return instance

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration from %s: %s", config_file, e)
            raise

        known = {f.name for f in fields(cls)}
        for key in sorted(set(config_dict) - known):
            logger.warning("Ignoring unknown configuration key '%s' in %s", key, config_file)
            _ = config_dict.pop(key)

        logger.debug("Configuration loaded from %s", config_file)
        instance = cls(**config_dict)
        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached singleton so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


# Global configuration instance
config = Config.load()
