"""Shared-secret key for verifying Google Code webhook messages (HMAC-MD5).

The receiver feeds ``key.encoded`` into its HMAC routine, e.g.
``hmac.new(key.encoded, body, hashlib.md5)``.
"""
import logging
import os

from pydantic import BaseModel, Field, StrictStr

from .errors import SecretKeyFormatError, SecretKeyNotFoundError, SecretKeyReadError

logger = logging.getLogger("webhook_key.key")

ALGORITHM = "HmacMD5"
FORMAT = "RAW"


def read_key(path: str | os.PathLike) -> str:
    """Read a single-line secret key file and return the stripped line."""
    try:
        with open(path, encoding="utf-8") as f:
            first = f.readline()
            if not first:
                raise SecretKeyFormatError("secret key file is empty", path)
            if f.readline():
                raise SecretKeyFormatError(
                    "secret key file must contain exactly one line of text", path
                )
    except SecretKeyFormatError as e:
        logger.warning("Rejected secret key file %s: %s", os.fspath(path), e.args[0])
        raise
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
        logger.warning("Secret key file not found: %s", os.fspath(path))
        raise SecretKeyNotFoundError("secret key file not found", path) from e
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read secret key file %s: %s", os.fspath(path), e)
        raise SecretKeyReadError("could not read secret key file", path) from e
    return first.strip()


class SecretKey(BaseModel):
    """Immutable HMAC-MD5 key wrapping the project's webhook secret."""

    value: StrictStr = Field(repr=False)

    class Config:
        frozen = True
        extra = "forbid"

    def __init__(self, value: str, **data) -> None:
        super().__init__(value=value, **data)

    def model_copy(self, *, update: dict | None = None, deep: bool = False) -> "SecretKey":
        # pydantic skips validation on update; re-validate so value stays a str
        if not update:
            return self
        return type(self).model_validate({**self.model_dump(), **update})

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> "SecretKey":
        """Load the key from a file holding exactly one line of text."""
        key = cls(read_key(path))
        logger.debug("Loaded secret key from %s (length=%s)", os.fspath(path), len(key.value))
        return key

    @property
    def string_key(self) -> str:
        # debugging only
        return self.value

    @property
    def algorithm(self) -> str:
        return ALGORITHM

    @property
    def encoded(self) -> bytes:
        """Raw key material: the secret as UTF-8, independent of locale."""
        return self.value.encode("utf-8")

    @property
    def format(self) -> str:
        return FORMAT

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, SecretKey):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)
