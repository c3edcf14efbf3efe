"""
URL-safe text encoding for identifier bytes.

base64url alphabet (RFC 4648 section 5) with the padding stripped:
3 bytes -> 4 chars, a trailing byte -> 2 chars, a trailing pair -> 3 chars.
"""

import base64

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
_ALPHABET_SET = frozenset(ALPHABET)


def encode(data):
    """Encode bytes as unpadded base64url text."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def encoded_length(n):
    """Number of characters produced for n input bytes."""
    return (n * 4 + 2) // 3


def is_url_safe(text):
    if not isinstance(text, str) or not text:
        return False
    return all(ch in _ALPHABET_SET for ch in text)
