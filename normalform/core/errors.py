"""Errors raised while loading game files."""

from pathlib import Path
from typing import Optional, Union


class GameFileError(Exception):
    """Base class for fatal game file errors."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"


class FileReadError(GameFileError):
    """The game file is missing or unreadable."""


class ParseError(GameFileError):
    """The game file is not valid TOML or does not match the game schema."""
