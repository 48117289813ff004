import os
from pathlib import Path

from pydantic import BaseModel, Field


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class SolverConfig(BaseModel):
    """Configuration for the solver, the CLI and the HTTP backend."""

    # Dictionary settings
    dictionary_path: str = Field("dict.txt", description="Newline-delimited word list")
    default_strategy: str = Field("astar", description="Strategy used when none is given")
    use_neighbor_cache: bool = Field(False, description="Memoize neighbor sets per word")

    # Logging
    log_level: str = Field("INFO", description="Root log level")

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    @property
    def dictionary_file(self) -> Path:
        """Get the dictionary location as a Path object."""
        return Path(self.dictionary_path)

    @classmethod
    def from_env(cls) -> "SolverConfig":
        """Create config from environment variables."""
        return cls(
            dictionary_path=os.getenv("WORD_LADDER_DICTIONARY", "dict.txt"),
            default_strategy=os.getenv("WORD_LADDER_STRATEGY", "astar"),
            use_neighbor_cache=_env_flag("WORD_LADDER_NEIGHBOR_CACHE"),
            log_level=os.getenv("WORD_LADDER_LOG_LEVEL", "INFO"),
            host=os.getenv("BACKEND_HOST", "0.0.0.0"),
            port=int(os.getenv("BACKEND_PORT", "8000")),
            debug=_env_flag("BACKEND_DEBUG"),
        )
