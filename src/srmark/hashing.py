"""Deterministic text fingerprints.

``cyrb53`` is a fast non-cryptographic 53-bit hash. It runs over UTF-16 code
units with 32-bit multiply semantics so that the digest of a given string is
identical to the one produced by other implementations of the same algorithm
(existing review data keys cards on it).
"""
from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK32


def _utf16_code_units(text: str) -> tuple[int, ...]:
    data = text.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


def cyrb53(text: str, seed: int = 0) -> str:
    """Return the cyrb53 digest of ``text`` as lowercase hex (no padding)."""
    h1 = (0xDEADBEEF ^ seed) & _MASK32
    h2 = (0x41C6CE57 ^ seed) & _MASK32
    for ch in _utf16_code_units(text):
        h1 = _imul(h1 ^ ch, 2654435761)
        h2 = _imul(h2 ^ ch, 1597334677)
    h1 = _imul(h1 ^ (h1 >> 16), 2246822507) ^ _imul(h2 ^ (h2 >> 13), 3266489909)
    h2 = _imul(h2 ^ (h2 >> 16), 2246822507) ^ _imul(h1 ^ (h1 >> 13), 3266489909)
    return format(4294967296 * (0x1FFFFF & h2) + h1, "x")
