"""
BLAKE3 Hashing

Deterministic digests for puzzle inputs and receipts.
"""

import blake3


def blake3_hash(data: bytes) -> str:
    """
    Return hex-encoded BLAKE3 digest of the byte stream.

    Args:
        data: Raw bytes to hash.

    Returns:
        str: Lowercase hexadecimal digest (64 characters).

    Example:
        >>> blake3_hash(b"test")
        '4878ca0425c739fa427f7eda20fe845f6b2e46ba5fe2a14df5b1e32f50603215'
    """
    hasher = blake3.blake3()
    hasher.update(data)
    return hasher.hexdigest()


def text_hash(text: str) -> str:
    """BLAKE3 of the UTF-8 encoding of text, with CRLF folded to LF first."""
    normalized = text.replace("\r\n", "\n")
    return blake3_hash(normalized.encode("utf-8"))
