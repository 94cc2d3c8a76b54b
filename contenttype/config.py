"""
Configuration management for content-type detection.
Loads settings from environment variables with sensible defaults.
"""
import logging
import os
from typing import Optional
from dotenv import load_dotenv


class Config:
    """Detection settings loaded from environment variables."""

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            env_file: Optional path to .env file
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        # Sniffing
        self.sniff_length = max(1, int(os.getenv('SNIFF_LENGTH', '8192')))

        # Logging
        self.log_level = os.getenv('LOG_LEVEL', 'INFO')
        self.log_bytes_preview = int(os.getenv('LOG_BYTES_PREVIEW', '32'))

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"Config(sniff_length={self.sniff_length}, "
            f"log_level={self.log_level}, "
            f"log_bytes_preview={self.log_bytes_preview})"
        )


# Global config instance
_config: Optional[Config] = None


def get_config(env_file: Optional[str] = None) -> Config:
    """
    Get or create global config instance (singleton).

    Args:
        env_file: Optional path to .env file

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        _config = Config(env_file)
    return _config


def reset_config():
    """Reset global config instance (useful for testing)."""
    global _config
    _config = None


def configure_logging(config: Optional[Config] = None):
    """Apply LOG_LEVEL to the root logger. Entry points only."""
    config = config or get_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
