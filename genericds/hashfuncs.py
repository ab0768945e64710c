"""Fixed-width 64-bit hash functions for integers, byte strings and floats."""

from __future__ import annotations

import struct

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

HASH_STRING_SEED = 0x12ABCE73F29AB

_MURMUR_ZERO_SUBSTITUTE = 0xFFF24654127DC
_MURMUR_C1 = 0xFF51AFD7ED558CCD
_MURMUR_C2 = 0xC4CEB9FE1A85EC53

_STRING_M = 0xC6A4A7935BD1E995
_STRING_R = 47


def hash_wang_uint64(n: int) -> int:
    """Thomas Wang's 64-bit integer mix."""
    n &= MASK64
    n = ((~n) + (n << 21)) & MASK64
    n ^= n >> 24
    n = (n + (n << 3) + (n << 8)) & MASK64
    n ^= n >> 14
    n = (n + (n << 2) + (n << 4)) & MASK64
    n ^= n >> 28
    n = (n + (n << 31)) & MASK64
    return n


def hash_murmur3_uint64(n: int) -> int:
    """MurmurHash3 finaliser; zero is replaced by a fixed constant first."""
    n &= MASK64
    if not n:
        n = _MURMUR_ZERO_SUBSTITUTE
    n ^= n >> 33
    n = (n * _MURMUR_C1) & MASK64
    n ^= n >> 33
    n = (n * _MURMUR_C2) & MASK64
    n ^= n >> 33
    return n


def hash_uint64(n: int) -> int:
    """The default integer hash."""
    return hash_murmur3_uint64(n)


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def hash_string_seeded(data: bytes | bytearray | memoryview | str, seed: int) -> int:
    """MurmurHash64A of ``data`` with the given seed (little-endian words)."""
    raw = _as_bytes(data)
    length = len(raw) & MASK32
    h = ((seed & MASK64) ^ ((length * _STRING_M) & MASK64)) & MASK64

    whole = (len(raw) // 8) * 8
    for (k,) in struct.iter_unpack("<Q", raw[:whole]):
        k = (k * _STRING_M) & MASK64
        k ^= k >> _STRING_R
        k = (k * _STRING_M) & MASK64
        h ^= k
        h = (h * _STRING_M) & MASK64

    tail = raw[whole:]
    if tail:
        h ^= int.from_bytes(tail, "little")
        h = (h * _STRING_M) & MASK64

    h ^= h >> _STRING_R
    h = (h * _STRING_M) & MASK64
    h ^= h >> _STRING_R
    return h


def hash_murmur3_string(data: bytes | bytearray | memoryview | str) -> int:
    """MurmurHash64A with the library's default seed."""
    return hash_string_seeded(data, HASH_STRING_SEED)


def hash_float(x: float) -> int:
    """Hash of ``x`` taken as a 32-bit float."""
    (bits,) = struct.unpack("<I", struct.pack("<f", x))
    n = ((bits << 32) | (~bits & MASK64)) & MASK64
    return hash_uint64(n)


def hash_double(x: float) -> int:
    """Hash of the 64-bit IEEE representation of ``x``."""
    (bits,) = struct.unpack("<Q", struct.pack("<d", x))
    return hash_uint64(bits)