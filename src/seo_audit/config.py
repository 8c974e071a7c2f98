"""Configuration for the seo-audit command line.

The analysis engine itself reads no configuration; these settings only
drive logging and the batch thread pool.
"""

from dotenv import load_dotenv
from dataclasses import dataclass
from typing import Optional
import os

load_dotenv()  # Loads variables from .env file


@dataclass
class Config:
    """Runtime settings for the CLI."""
    log_level: str = "INFO"
    log_file: Optional[str] = None
    max_workers: Optional[int] = None  # None lets the thread pool decide

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        max_workers = os.getenv("MAX_WORKERS")
        try:
            workers = int(max_workers) if max_workers else None
        except ValueError:
            workers = None  # Keep default if conversion fails

        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE") or None,
            max_workers=workers if workers and workers > 0 else None,
        )
