from .errors import CipherError, EmptyInputError, InvalidKeyError, UnknownCipherError
from .results import BruteForceResult, Candidate
from .scoring import is_plausible_english
from .registry import register_plugin, encrypt_known, decrypt_known, brute_force

__all__ = [
    "BruteForceResult",
    "Candidate",
    "CipherError",
    "EmptyInputError",
    "InvalidKeyError",
    "UnknownCipherError",
    "is_plausible_english",
    "register_plugin",
    "encrypt_known",
    "decrypt_known",
    "brute_force",
]
