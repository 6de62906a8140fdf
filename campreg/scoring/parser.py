"""Parse the model's tagged SCORE/EXPLANATION reply."""

from __future__ import annotations

import re
from dataclasses import dataclass

MIN_SCORE = 1
MAX_SCORE = 100

_SCORE_PATTERN = re.compile(r"SCORE:\s*(\d+)", re.IGNORECASE)
_EXPLANATION_PATTERN = re.compile(r"EXPLANATION:\s*(.+)", re.IGNORECASE | re.DOTALL)


@dataclass(frozen=True)
class ParsedScore:
    score: int | None
    explanation: str | None

    @property
    def is_complete(self) -> bool:
        return bool(self.score) and bool(self.explanation)


def parse_ai_response(text: str) -> ParsedScore:
    """Extract the score and explanation from free model text.

    Surrounding text is tolerated. The explanation runs from its marker to
    the end of the reply, with markdown emphasis (``*``) removed. A missing
    marker yields None for that field.
    """
    score_match = _SCORE_PATTERN.search(text or "")
    score = int(score_match.group(1)) if score_match else None

    explanation_match = _EXPLANATION_PATTERN.search(text or "")
    explanation = None
    if explanation_match:
        explanation = explanation_match.group(1).replace("*", "").strip() or None

    return ParsedScore(score=score, explanation=explanation)


def clamp_score(score: int) -> int:
    """Pull a score into [1, 100]."""
    return max(MIN_SCORE, min(MAX_SCORE, score))
