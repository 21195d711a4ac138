from __future__ import annotations

import logging
import re
from importlib import resources
from typing import Iterable, Optional

from .config import Settings, get_settings

logger = logging.getLogger(__name__)

# ----------------------------
# Dictionary (cached)
# ----------------------------

_WORDS_FILE = "english_words.txt"
_ENGLISH_WORDS: frozenset[str] | None = None


def get_english_words() -> frozenset[str]:
    """Load the cached word list from affinecracker.data/english_words.txt."""
    global _ENGLISH_WORDS
    if _ENGLISH_WORDS is not None:
        return _ENGLISH_WORDS

    raw = resources.files("affinecracker.data").joinpath(_WORDS_FILE).read_text(encoding="utf-8")
    words = set()
    for line in raw.splitlines():
        w = line.strip().lower()
        if w and not w.startswith("#"):
            words.add(w)
    if not words:
        raise ValueError(f"No words found in {_WORDS_FILE}.")

    _ENGLISH_WORDS = frozenset(words)
    logger.debug("loaded %d dictionary words", len(_ENGLISH_WORDS))
    return _ENGLISH_WORDS


# ----------------------------
# Plausibility heuristic
# ----------------------------

_NON_WORD_RE = re.compile(r"[^a-z\s]")


def extract_words(text: str) -> list[str]:
    """Lowercase, drop anything but a-z and whitespace, split on whitespace runs."""
    cleaned = _NON_WORD_RE.sub("", text.lower())
    return [w for w in cleaned.split() if w]


def has_long_dictionary_word(words: Iterable[str], min_long_length: int = 6) -> bool:
    english = get_english_words()
    for w in words:
        if len(w) >= min_long_length and w in english:
            return True
    return False


def word_hit_rate(text: str) -> float:
    words = extract_words(text)
    if not words:
        return 0.0
    english = get_english_words()
    hits = sum(1 for w in words if w in english)
    return hits / len(words)


def is_plausible_english(text: str, settings: Optional[Settings] = None) -> bool:
    """
    Dictionary check for a decrypted candidate:
      - any long dictionary word decides it on its own
      - 1-2 words need at least one dictionary hit
      - longer texts need a hit and at least half their words recognized
    """
    settings = settings or get_settings()
    words = extract_words(text)
    if not words:
        return False

    if has_long_dictionary_word(words, settings.min_long_word_length):
        return True

    english = get_english_words()
    match_count = sum(1 for w in words if w in english)

    if len(words) <= settings.short_text_max_words:
        return match_count > 0
    return match_count > 0 and match_count / len(words) >= settings.majority_threshold
