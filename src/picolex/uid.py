"""Stable numeric fingerprints for token text."""

from __future__ import annotations

import hashlib


def get_token_id(text: str) -> int:
    """Return a 32-bit fingerprint of *text*, stable across processes."""
    digest = hashlib.blake2b(text.encode("utf-8"), digest_size=4).digest()
    return int.from_bytes(digest, "big")
