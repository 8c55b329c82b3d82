"""
Configuration management for the movie database mock API.

Loads configuration from environment variables and provides
a centralized Config dataclass for all settings.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

from .models import COLLECTIONS

DATA_MODES = ("static", "files")


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass
class Config:
    """Centralized configuration from environment variables."""

    # Where records come from: built-in sample data or JSON resources
    data_mode: str = "static"
    data_dir: Path = field(default_factory=lambda: Path.cwd() / "data")
    sources: Dict[str, str] = field(default_factory=dict)

    # Loader settings
    load_delay_min: float = 0.3
    load_delay_max: float = 1.0
    request_timeout: float = 30.0

    # Query settings
    base_url: str = "http://localhost:8000/"
    default_limit: int = 10
    max_limit: int = 100

    # Paths
    log_dir: Path = field(default_factory=lambda: Path.cwd() / "logs")

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False

    # CORS settings
    allowed_origins: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.data_mode not in DATA_MODES:
            raise ValueError(
                f"data_mode must be one of {', '.join(DATA_MODES)}, got {self.data_mode!r}"
            )
        if self.load_delay_min < 0 or self.load_delay_max < self.load_delay_min:
            raise ValueError("load delay range must satisfy 0 <= min <= max")
        if self.default_limit < 1 or self.max_limit < self.default_limit:
            raise ValueError("limits must satisfy 1 <= default_limit <= max_limit")

        # Fill in default source paths for any collection not configured
        for name in COLLECTIONS:
            self.sources.setdefault(name, str(self.data_dir / f"{name}.json"))

    @property
    def uses_loader(self) -> bool:
        """Whether records are fetched asynchronously at startup."""
        return self.data_mode == "files"

    @classmethod
    def from_env(cls, env_path: Optional[str] = None) -> "Config":
        """
        Load configuration from environment variables.

        Args:
            env_path: Optional path to .env file. If not provided,
                     looks for .env in the current directory.

        Returns:
            Config instance with loaded values.

        Raises:
            ValueError: If an environment variable has an invalid value.
        """
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        project_dir = Path(os.getenv("PROJECT_DIR", Path.cwd()))
        data_dir = Path(os.getenv("MOVIEDB_DATA_DIR", project_dir / "data"))

        # Per-collection sources (file path or http(s) URL)
        sources = {}
        for name in COLLECTIONS:
            source = os.getenv(f"MOVIEDB_{name.upper()}_SOURCE")
            if source:
                sources[name] = source

        # CORS settings
        origins_str = os.getenv("ALLOWED_ORIGINS", "")
        allowed_origins = [o.strip() for o in origins_str.split(",") if o.strip()]

        return cls(
            data_mode=os.getenv("MOVIEDB_DATA_MODE", "static").lower(),
            data_dir=data_dir,
            sources=sources,
            load_delay_min=_get_float("MOVIEDB_LOAD_DELAY_MIN", 0.3),
            load_delay_max=_get_float("MOVIEDB_LOAD_DELAY_MAX", 1.0),
            request_timeout=_get_float("MOVIEDB_REQUEST_TIMEOUT", 30.0),
            base_url=os.getenv("MOVIEDB_BASE_URL", "http://localhost:8000/"),
            default_limit=_get_int("MOVIEDB_DEFAULT_LIMIT", 10),
            max_limit=_get_int("MOVIEDB_MAX_LIMIT", 100),
            log_dir=Path(os.getenv("MOVIEDB_LOG_DIR", project_dir / "logs")),
            api_host=os.getenv("API_HOST", "0.0.0.0"),
            api_port=_get_int("API_PORT", 8000),
            api_debug=os.getenv("API_DEBUG", "false").lower() == "true",
            allowed_origins=allowed_origins,
        )
