"""Public project identifiers."""

import secrets

MIN_SLUG_BYTES = 6


def generate_slug(nbytes: int = MIN_SLUG_BYTES) -> str:
    """
    Generate a random lowercase hex slug.

    The slug is the only handle on a project, so it comes from the OS CSPRNG.
    Errors from the random source propagate to the caller.

    Args:
        nbytes: Number of random bytes; the slug has twice as many characters

    Returns:
        Hex string of length ``2 * nbytes``
    """
    if nbytes < MIN_SLUG_BYTES:
        raise ValueError(f"Slugs need at least {MIN_SLUG_BYTES} random bytes, got {nbytes}")
    return secrets.token_hex(nbytes)
