from __future__ import annotations

def register_all() -> None:
    from .monoalphabetic import additive, multiplicative, affine  # noqa: F401
