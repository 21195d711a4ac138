from __future__ import annotations

from typing import Iterator

from affinecracker.classical.common import COPRIME_KEYS, decrypt_text, encrypt_text
from affinecracker.classical.keys import MultiplicativeKey
from affinecracker.core.errors import InvalidKeyError
from affinecracker.core.registry import register_plugin
from affinecracker.core.results import Candidate


def _coerce(key) -> MultiplicativeKey:
    if isinstance(key, MultiplicativeKey):
        return key
    if isinstance(key, (str, int)) or key is None:
        return MultiplicativeKey.parse(key)
    raise InvalidKeyError("Multiplicative key must be coprime to 26.")


class MultiplicativeCipher:
    name = "multiplicative"
    aliases = ()

    def parse_key(self, key) -> MultiplicativeKey:
        return _coerce(key)

    def keys(self) -> Iterator[MultiplicativeKey]:
        for a in COPRIME_KEYS:
            yield MultiplicativeKey(a)

    def encrypt(self, plaintext: str, key) -> str:
        a, b = _coerce(key).as_affine()
        return encrypt_text(plaintext, a, b)

    def decrypt(self, ciphertext: str, key) -> str:
        a, b = _coerce(key).as_affine()
        return decrypt_text(ciphertext, a, b)

    def crack(self, ciphertext: str) -> list[Candidate]:
        return [Candidate(label=k.label, text=self.decrypt(ciphertext, k)) for k in self.keys()]


register_plugin(MultiplicativeCipher())
