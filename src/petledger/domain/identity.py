"""Caller identity keys.

How a caller reference becomes an identity is left to the host; the ledger
only needs a stable, hashable key. Here the key is the caller string with
surrounding whitespace removed.
"""

from __future__ import annotations


def normalize_identity(raw: str | None) -> str | None:
    """Return the identity key for *raw*, or None when it is blank.

    Examples:
        >>> normalize_identity("  alice ")
        'alice'
        >>> normalize_identity("   ") is None
        True
    """
    if raw is None:
        return None
    key = raw.strip()
    return key or None
