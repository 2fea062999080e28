"""Identifier generation."""

import secrets

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def new_id(prefix: str = "id") -> str:
    """Generate an opaque identifier such as ``rut_k3v9x0qa``.

    The prefix only helps when reading stored data. Uniqueness holds within a
    process with overwhelming probability, not across devices.
    """
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(8))
    return f"{prefix}_{suffix}"
