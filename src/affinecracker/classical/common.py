from __future__ import annotations

import re
from enum import Enum
from typing import Tuple

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = len(ALPHABET)

# Integers in [1, 26) sharing no factor with 26. Ascending; brute force relies on the order.
COPRIME_KEYS: Tuple[int, ...] = (1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25)
_COPRIME_SET = frozenset(COPRIME_KEYS)

A_ORD = ord("A")
LOWER_A_ORD = ord("a")

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class Direction(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


def mod(n: int, m: int) -> int:
    """Mathematical modulo: result always in [0, m), also for negative n."""
    if m <= 0:
        raise ValueError(f"Modulus must be positive, got {m}.")
    return n % m


def modinv(a: int, m: int) -> int:
    """Modular inverse of a under mod m by linear scan; raises ValueError if none."""
    a = mod(a, m)
    for x in range(1, m):
        if mod(a * x, m) == 1:
            return x
    raise ValueError(f"No modular inverse for a={a} mod {m}.")


def is_coprime(k: int) -> bool:
    return k in _COPRIME_SET


def _block_base(ch: str) -> int | None:
    if "a" <= ch <= "z":
        return LOWER_A_ORD
    if "A" <= ch <= "Z":
        return A_ORD
    return None


def transform(text: str, a: int, b: int, direction: Direction) -> str:
    """
    Affine substitution over A-Z / a-z, preserving case.

    Encrypt: c = a*p + b (mod 26). Decrypt: p = a^-1 * (c - b) (mod 26).
    Anything outside the two letter blocks is copied through unchanged.
    Decrypting with an `a` that has no inverse raises ValueError.
    """
    if direction is Direction.DECRYPT:
        inv = modinv(a, ALPHABET_SIZE)
    out = []
    for ch in text:
        base = _block_base(ch)
        if base is None:
            out.append(ch)
            continue
        x = ord(ch) - base
        if direction is Direction.DECRYPT:
            y = mod(inv * (x - b), ALPHABET_SIZE)
        else:
            y = mod(a * x + b, ALPHABET_SIZE)
        out.append(chr(base + y))
    return "".join(out)


def encrypt_text(text: str, a: int, b: int) -> str:
    return transform(text, a, b, Direction.ENCRYPT)


def decrypt_text(text: str, a: int, b: int) -> str:
    return transform(text, a, b, Direction.DECRYPT)


def parse_int(raw: object) -> int | None:
    """
    Lenient integer parse for user-typed keys: optional sign plus leading digits,
    trailing junk ignored ("7abc" -> 7). Returns None when no integer is present.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str):
        return None
    m = _LEADING_INT_RE.match(raw)
    if not m:
        return None
    return int(m.group(1))


def split_two(key: str) -> tuple[str, str] | None:
    """
    Split keys like: "5,8" or "5:8" or "5 8" into their two parts.
    Returns None when the key does not have exactly two parts.
    """
    raw = key.strip().replace(":", ",").replace(" ", ",")
    parts = [p for p in raw.split(",") if p]
    if len(parts) != 2:
        return None
    return parts[0], parts[1]
