"""Errors raised while loading a webhook secret key."""
import os


class SecretKeyError(Exception):
    """Base class for secret key loading failures."""


class _PathError(SecretKeyError):
    def __init__(self, message: str, path: str | os.PathLike) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return f"{self.args[0]}: {os.fspath(self.path)}"


class SecretKeyNotFoundError(_PathError, FileNotFoundError):
    """Secret key file does not exist or is not a regular file."""


class SecretKeyReadError(_PathError, OSError):
    """Secret key file exists but could not be read or decoded."""


class SecretKeyFormatError(_PathError, ValueError):
    """Secret key file is empty or holds more than one line."""
