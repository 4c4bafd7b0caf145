"""Resolve the webhook secret key from the environment at startup."""
import logging
import os
from collections.abc import Mapping

from .errors import SecretKeyError
from .key import SecretKey

logger = logging.getLogger("webhook_key.config")

SECRET_ENV = "WEBHOOK_SECRET"
SECRET_FILE_ENV = "WEBHOOK_SECRET_FILE"


def secret_key_from_env(environ: Mapping[str, str] | None = None) -> SecretKey:
    """Build the key from WEBHOOK_SECRET_FILE, falling back to WEBHOOK_SECRET."""
    if environ is None:
        environ = os.environ

    path = environ.get(SECRET_FILE_ENV)
    if path is not None:
        logger.info("Using webhook secret from %s=%s", SECRET_FILE_ENV, path)
        return SecretKey.from_file(path)

    value = environ.get(SECRET_ENV)
    if value is not None:
        logger.info("Using webhook secret from %s", SECRET_ENV)
        return SecretKey(value)

    raise SecretKeyError(f"no webhook secret configured; set {SECRET_FILE_ENV} or {SECRET_ENV}")
