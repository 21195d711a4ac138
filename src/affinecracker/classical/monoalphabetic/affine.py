from __future__ import annotations

from typing import Iterator

from affinecracker.classical.common import ALPHABET_SIZE, COPRIME_KEYS, decrypt_text, encrypt_text
from affinecracker.classical.keys import AffineKey
from affinecracker.core.errors import InvalidKeyError
from affinecracker.core.registry import register_plugin
from affinecracker.core.results import Candidate


def _coerce(key) -> AffineKey:
    if isinstance(key, AffineKey):
        return key
    if isinstance(key, (str, tuple)) or key is None:
        return AffineKey.parse(key)
    raise InvalidKeyError("Affine key must look like 'a,b' (e.g., '5,8').")


class AffineCipher:
    name = "affine"
    aliases = ()

    def parse_key(self, key) -> AffineKey:
        return _coerce(key)

    def keys(self) -> Iterator[AffineKey]:
        # a outer, b inner: (1, 0), (1, 1), ... (25, 25)
        for a in COPRIME_KEYS:
            for b in range(ALPHABET_SIZE):
                yield AffineKey(a, b)

    def encrypt(self, plaintext: str, key) -> str:
        a, b = _coerce(key).as_affine()
        return encrypt_text(plaintext, a, b)

    def decrypt(self, ciphertext: str, key) -> str:
        a, b = _coerce(key).as_affine()
        return decrypt_text(ciphertext, a, b)

    def crack(self, ciphertext: str) -> list[Candidate]:
        return [Candidate(label=k.label, text=self.decrypt(ciphertext, k)) for k in self.keys()]


register_plugin(AffineCipher())
