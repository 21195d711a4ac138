from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

NO_MATCH_MESSAGE = "No plausible English text found. See all possibilities below."
CANDIDATE_SEPARATOR = "\n\n---\n\n"


@dataclass(frozen=True)
class Candidate:
    # (label, text) is the whole identity; dedupe relies on the generated __eq__/__hash__
    label: str
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "text": self.text}


@dataclass(frozen=True)
class BruteForceResult:
    cipher_name: str
    matched: bool
    candidates: tuple[Candidate, ...] = field(default_factory=tuple)

    # Size of the key space that was searched
    keys_tried: int = 0

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self):
        return iter(self.candidates)

    def labelled(self) -> str:
        """Candidates as "(Key k) text" blocks, separated by a --- rule."""
        return CANDIDATE_SEPARATOR.join(f"({c.label}) {c.text}" for c in self.candidates)

    def listing(self) -> str:
        return "\n".join(f"{c.label}: {c.text}" for c in self.candidates)

    def to_dict(self) -> dict[str, Any]:
        return {
            "cipher_name": self.cipher_name,
            "matched": self.matched,
            "keys_tried": self.keys_tried,
            "candidates": [c.to_dict() for c in self.candidates],
        }


def dedupe_candidates(candidates: Iterable[Candidate]) -> list[Candidate]:
    """Drop exact (label, text) repeats, keeping first-seen order."""
    seen: set[Candidate] = set()
    out: list[Candidate] = []
    for c in candidates:
        if c in seen:
            continue
        seen.add(c)
        out.append(c)
    return out
