"""Identifier generation."""

import secrets
import string

ID_LENGTH = 8


def random_id(length: int = ID_LENGTH) -> str:
    """Return a random identifier of lowercase ASCII letters."""
    return "".join(secrets.choice(string.ascii_lowercase) for _ in range(length))
