"""Utility functions for sharedcal."""

import secrets
import string
from collections.abc import Collection

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 7


def generate_id(taken: Collection[str] = ()) -> str:
    """
    Generate a short random event id.

    Args:
        taken: Ids already in use; the result is guaranteed not to be one of them

    Returns:
        Lowercase base-36 string of ID_LENGTH characters
    """
    while True:
        candidate = "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))
        if candidate not in taken:
            return candidate
