from __future__ import annotations


class CipherError(ValueError):
    """Base class for every user-facing failure of a cipher operation."""


class EmptyInputError(CipherError):
    def __init__(self, message: str = "Input text cannot be empty.") -> None:
        super().__init__(message)


class InvalidKeyError(CipherError):
    """Key missing, not numeric, wrong shape, or `a` not coprime to 26."""


class UnknownCipherError(CipherError):
    pass
