"""Human-readable tracking ids handed to buyers, e.g. ``EDM-7K2Q9XA``."""

import secrets
import string

from protean.exceptions import ValidationError

DEFAULT_PREFIX = "EDM"
DEFAULT_LENGTH = 7

_ALPHABET = string.ascii_uppercase + string.digits


def generate_tracking_id(prefix: str = DEFAULT_PREFIX, length: int = DEFAULT_LENGTH) -> str:
    """Return ``<PREFIX>-<TOKEN>`` with a random uppercase alphanumeric token."""
    prefix = (prefix or "").strip().upper()
    if not prefix:
        raise ValidationError({"prefix": ["Tracking id prefix is required"]})
    if length < 1:
        raise ValidationError({"length": ["Tracking id length must be positive"]})

    token = "".join(secrets.choice(_ALPHABET) for _ in range(length))
    return f"{prefix}-{token}"
