"""AI fit scoring for camp applicants."""

from .parser import ParsedScore, clamp_score, parse_ai_response
from .prompts import build_scoring_prompt
from .scorer import ApplicantScorer
from .types import ApplicantProfile, ScoreResult

__all__ = [
    "ApplicantProfile",
    "ApplicantScorer",
    "ParsedScore",
    "ScoreResult",
    "build_scoring_prompt",
    "clamp_score",
    "parse_ai_response",
]
