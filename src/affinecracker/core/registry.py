from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Optional, Protocol

from .config import Settings
from .errors import EmptyInputError, UnknownCipherError
from .results import BruteForceResult, Candidate, dedupe_candidates
from .scoring import is_plausible_english

logger = logging.getLogger(__name__)


class CipherPlugin(Protocol):
    name: str
    aliases: tuple[str, ...]

    def parse_key(self, key: Any) -> Any:
        ...

    def keys(self) -> Iterator[Any]:
        ...

    def encrypt(self, plaintext: str, key: Any) -> str:
        ...

    def decrypt(self, ciphertext: str, key: Any) -> str:
        ...

    def crack(self, ciphertext: str) -> list[Candidate]:
        ...


_PLUGINS: dict[str, CipherPlugin] = {}
_ALIASES: dict[str, str] = {}


def register_plugin(plugin: CipherPlugin) -> None:
    key = plugin.name.lower().strip()
    if not key:
        raise ValueError("Plugin must have a non-empty name.")
    _PLUGINS[key] = plugin
    for alias in getattr(plugin, "aliases", ()):
        _ALIASES[alias.lower().strip()] = key


def list_plugins() -> list[str]:
    return sorted(_PLUGINS.keys())


def get_plugin(cipher_name: str) -> CipherPlugin:
    name = (cipher_name or "").lower().strip()
    name = _ALIASES.get(name, name)
    if name not in _PLUGINS:
        raise UnknownCipherError(f"Unknown cipher '{cipher_name}'. Available: {', '.join(list_plugins())}")
    return _PLUGINS[name]


def _require_text(text: Optional[str]) -> str:
    if not text:
        raise EmptyInputError()
    return text


def encrypt_known(cipher_name: str, plaintext: str, key: Any) -> str:
    text = _require_text(plaintext)
    plugin = get_plugin(cipher_name)
    # Parse before transforming so a bad key never produces output
    k = plugin.parse_key(key)
    return plugin.encrypt(text, k)


def decrypt_known(cipher_name: str, ciphertext: str, key: Any) -> str:
    text = _require_text(ciphertext)
    plugin = get_plugin(cipher_name)
    k = plugin.parse_key(key)
    return plugin.decrypt(text, k)


def _plausible(candidates: Iterable[Candidate], settings: Optional[Settings]) -> list[Candidate]:
    out = []
    debug = logger.isEnabledFor(logging.DEBUG)
    for c in candidates:
        ok = is_plausible_english(c.text, settings)
        if debug:
            logger.debug("%s -> %r plausible=%s", c.label, c.text[:40], ok)
        if ok:
            out.append(c)
    return out


def brute_force(ciphertext: str, cipher_name: str, *, settings: Optional[Settings] = None) -> BruteForceResult:
    """
    Try every key of one cipher family.

    Candidates that pass the plausibility heuristic are returned in key order,
    with exact (label, text) repeats dropped. If none pass, every key's
    decryption is returned instead and `matched` is False.
    """
    text = _require_text(ciphertext)
    plugin = get_plugin(cipher_name)

    everything = plugin.crack(text)
    logger.debug("%s: %d keys tried", plugin.name, len(everything))

    passing = dedupe_candidates(_plausible(everything, settings))
    if passing:
        logger.info("%s: %d plausible candidate(s)", plugin.name, len(passing))
        return BruteForceResult(
            cipher_name=plugin.name,
            matched=True,
            candidates=tuple(passing),
            keys_tried=len(everything),
        )

    logger.info("%s: no plausible candidate, returning all %d", plugin.name, len(everything))
    return BruteForceResult(
        cipher_name=plugin.name,
        matched=False,
        candidates=tuple(everything),
        keys_tried=len(everything),
    )
