from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, TypeVar

ENV_PREFIX = "AFFINECRACKER_"

T = TypeVar("T")

_TYPE_NOUNS = {int: "an integer", float: "a number"}


def _env_value(env: Mapping[str, str], name: str, cast: Callable[[str], T], default: T) -> T:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{name} must be {_TYPE_NOUNS.get(cast, 'a value')}, got {raw!r}.") from e


@dataclass(frozen=True)
class Settings:
    """Knobs for the plausibility heuristic."""

    # A dictionary word at least this long marks a candidate plausible by itself
    min_long_word_length: int = 6
    # Texts with at most this many words need only one dictionary hit
    short_text_max_words: int = 2
    # Longer texts need this share of dictionary hits
    majority_threshold: float = 0.5

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            min_long_word_length=_env_value(env, "MIN_LONG_WORD", int, cls.min_long_word_length),
            short_text_max_words=_env_value(env, "SHORT_TEXT_MAX_WORDS", int, cls.short_text_max_words),
            majority_threshold=_env_value(env, "MAJORITY_THRESHOLD", float, cls.majority_threshold),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() re-reads the environment."""
    global _SETTINGS
    _SETTINGS = None
