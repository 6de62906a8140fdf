"""Tests for parsing the model's SCORE/EXPLANATION reply."""

from __future__ import annotations

import pytest

from campreg.scoring.parser import MAX_SCORE, MIN_SCORE, clamp_score, parse_ai_response


class TestParseAIResponse:
    def test_well_formed_reply(self):
        parsed = parse_ai_response("SCORE: 85\nEXPLANATION: المشارك يظهر تحفيزاً عالياً.")

        assert parsed.score == 85
        assert parsed.explanation == "المشارك يظهر تحفيزاً عالياً."
        assert parsed.is_complete

    def test_surrounding_text_tolerated(self):
        text = "Here is my evaluation:\n\nscore: 72\nexplanation: Good fit.\nSecond line."
        parsed = parse_ai_response(text)

        assert parsed.score == 72
        # Explanation runs to the end of the reply
        assert parsed.explanation == "Good fit.\nSecond line."

    def test_markdown_emphasis_removed_from_explanation(self):
        parsed = parse_ai_response("SCORE: 90\n**EXPLANATION:** **ممتاز** جداً")

        assert parsed.score == 90
        assert parsed.explanation == "ممتاز جداً"

    def test_emphasized_score_marker_not_matched(self):
        parsed = parse_ai_response("**SCORE:** 90\nEXPLANATION: ممتاز")

        assert parsed.score is None
        assert not parsed.is_complete

    def test_missing_score(self):
        parsed = parse_ai_response("EXPLANATION: no number given")

        assert parsed.score is None
        assert not parsed.is_complete

    def test_missing_explanation(self):
        parsed = parse_ai_response("SCORE: 50")

        assert parsed.score == 50
        assert parsed.explanation is None
        assert not parsed.is_complete

    def test_empty_explanation_is_missing(self):
        assert parse_ai_response("SCORE: 50\nEXPLANATION:   ").explanation is None

    def test_zero_score_is_incomplete(self):
        assert not parse_ai_response("SCORE: 0\nEXPLANATION: weak").is_complete

    def test_empty_text(self):
        parsed = parse_ai_response("")
        assert parsed.score is None
        assert parsed.explanation is None


class TestClampScore:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(150, 100), (100, 100), (55, 55), (1, 1), (0, 1), (-5, 1)],
    )
    def test_clamped_into_range(self, raw: int, expected: int):
        assert clamp_score(raw) == expected

    def test_bounds(self):
        assert (MIN_SCORE, MAX_SCORE) == (1, 100)
