"""
Configuration settings for dharma.

This module contains default configuration values used by the interpreter,
the interactive shell and the command-line interface.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Interpreter settings and configuration.

    Attributes:
        prompt: Prompt shown by the interactive shell
        banner: Lines printed when the shell starts
        exit_command: Shell input that ends the session
        log_level: Default logging level name
    """
    prompt: str = ":>"
    banner: List[str] = None
    exit_command: str = "exit"
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.banner is None:
            self.banner = ["Dharma interpreter (v0.1 alpha)"]

    @property
    def intro(self) -> str:
        """The banner joined into a single block of text."""
        return "\n".join(self.banner)


# Global default settings instance
DEFAULT_SETTINGS = Settings()
