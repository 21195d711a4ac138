from __future__ import annotations

from typing import Iterator

from affinecracker.classical.common import ALPHABET_SIZE, decrypt_text, encrypt_text
from affinecracker.classical.keys import AdditiveKey
from affinecracker.core.errors import InvalidKeyError
from affinecracker.core.registry import register_plugin
from affinecracker.core.results import Candidate


def _coerce(key) -> AdditiveKey:
    if isinstance(key, AdditiveKey):
        return key
    if isinstance(key, (str, int)) or key is None:
        return AdditiveKey.parse(key)
    raise InvalidKeyError("Additive key is missing or invalid.")


class AdditiveCipher:
    """Caesar shift: affine with a fixed at 1."""

    name = "additive"
    aliases = ("caesar", "shift")

    def parse_key(self, key) -> AdditiveKey:
        return _coerce(key)

    def keys(self) -> Iterator[AdditiveKey]:
        for b in range(ALPHABET_SIZE):
            yield AdditiveKey(b)

    def encrypt(self, plaintext: str, key) -> str:
        a, b = _coerce(key).as_affine()
        return encrypt_text(plaintext, a, b)

    def decrypt(self, ciphertext: str, key) -> str:
        a, b = _coerce(key).as_affine()
        return decrypt_text(ciphertext, a, b)

    def crack(self, ciphertext: str) -> list[Candidate]:
        return [Candidate(label=k.label, text=self.decrypt(ciphertext, k)) for k in self.keys()]


register_plugin(AdditiveCipher())
