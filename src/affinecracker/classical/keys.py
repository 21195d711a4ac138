from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from affinecracker.classical.common import is_coprime, parse_int, split_two
from affinecracker.core.errors import InvalidKeyError


@dataclass(frozen=True)
class AdditiveKey:
    b: int

    def as_affine(self) -> tuple[int, int]:
        return 1, self.b

    @property
    def label(self) -> str:
        return f"Key {self.b}"

    @classmethod
    def parse(cls, raw: str | int | None) -> "AdditiveKey":
        b = parse_int(raw)
        if b is None:
            raise InvalidKeyError("Additive key is missing or invalid.")
        return cls(b)


@dataclass(frozen=True)
class MultiplicativeKey:
    a: int

    def __post_init__(self) -> None:
        if not is_coprime(self.a):
            raise InvalidKeyError("Multiplicative key must be coprime to 26.")

    def as_affine(self) -> tuple[int, int]:
        return self.a, 0

    @property
    def label(self) -> str:
        return f"Key {self.a}"

    @classmethod
    def parse(cls, raw: str | int | None) -> "MultiplicativeKey":
        a = parse_int(raw)
        if a is None:
            raise InvalidKeyError("Multiplicative key must be coprime to 26.")
        return cls(a)


@dataclass(frozen=True)
class AffineKey:
    a: int
    b: int

    def __post_init__(self) -> None:
        if not is_coprime(self.a):
            raise InvalidKeyError("Key A must be coprime to 26.")

    def as_affine(self) -> tuple[int, int]:
        return self.a, self.b

    @property
    def label(self) -> str:
        return f"Key ({self.a}, {self.b})"

    @classmethod
    def parse(cls, raw: str | tuple[int, int] | None) -> "AffineKey":
        """Accepts "a,b", "a:b", "a b" or an (a, b) tuple."""
        if raw is None:
            raise InvalidKeyError("Key A must be coprime to 26.")
        if isinstance(raw, tuple):
            parts = raw if len(raw) == 2 else None
        else:
            parts = split_two(raw)
        if parts is None:
            raise InvalidKeyError("Affine key must look like 'a,b' (e.g., '5,8').")
        a = parse_int(parts[0])
        if a is None or not is_coprime(a):
            raise InvalidKeyError("Key A must be coprime to 26.")
        b = parse_int(parts[1])
        if b is None:
            raise InvalidKeyError("Key B is missing or invalid.")
        return cls(a, b)


CipherKey = Union[AdditiveKey, MultiplicativeKey, AffineKey]
