"""Tests for ApplicantScorer with a mocked OpenAI-compatible client."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from openai import APIConnectionError, APIError, APITimeoutError, OpenAIError

from campreg.errors import ConfigurationError, InvalidAIResponseError, UpstreamError
from campreg.logging_config import TRACE
from campreg.scoring import ApplicantProfile, ApplicantScorer, ScoreResult

REQUEST = httpx.Request("POST", "https://generativelanguage.googleapis.com/v1beta/openai/chat/completions")


def completion_with(text: str | None) -> MagicMock:
    mock_message = MagicMock()
    mock_message.content = text
    mock_choice = MagicMock()
    mock_choice.message = mock_message
    mock_completion = MagicMock()
    mock_completion.choices = [mock_choice]
    return mock_completion


@pytest.fixture
def applicant() -> ApplicantProfile:
    return ApplicantProfile(name="Hamza", email="hamza@example.com", age=17)


@pytest.fixture
def mock_openai_client() -> MagicMock:
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    return client


@pytest.fixture
def scorer(mock_openai_client: MagicMock) -> ApplicantScorer:
    scorer = ApplicantScorer(api_key="test-key", model="gemini-2.0-flash")
    scorer._client = mock_openai_client
    return scorer


class TestScore:
    @pytest.mark.asyncio
    async def test_returns_parsed_result(self, scorer, mock_openai_client, applicant):
        mock_openai_client.chat.completions.create.return_value = completion_with(
            "SCORE: 78\nEXPLANATION: دافع قوي."
        )

        result = await scorer.score(applicant)

        assert result == ScoreResult(score=78, explanation="دافع قوي.")
        call = mock_openai_client.chat.completions.create.await_args
        assert call.kwargs["model"] == "gemini-2.0-flash"
        assert call.kwargs["messages"][0]["role"] == "user"
        assert "Hamza" in call.kwargs["messages"][0]["content"]

    @pytest.mark.asyncio
    async def test_out_of_range_score_clamped(self, scorer, mock_openai_client, applicant):
        mock_openai_client.chat.completions.create.return_value = completion_with("SCORE: 250\nEXPLANATION: x")

        result = await scorer.score(applicant)

        assert result.score == 100

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["No structure at all", "SCORE: 40", "EXPLANATION: only words", None])
    async def test_incomplete_reply_rejected(self, scorer, mock_openai_client, applicant, text):
        mock_openai_client.chat.completions.create.return_value = completion_with(text)

        with pytest.raises(InvalidAIResponseError) as exc_info:
            await scorer.score(applicant)

        assert exc_info.value.message == "Invalid AI response format"
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_timeout_is_upstream_error(self, scorer, mock_openai_client, applicant):
        mock_openai_client.chat.completions.create.side_effect = APITimeoutError(request=REQUEST)

        with pytest.raises(UpstreamError):
            await scorer.score(applicant)

    @pytest.mark.asyncio
    async def test_connection_error_is_upstream_error(self, scorer, mock_openai_client, applicant):
        mock_openai_client.chat.completions.create.side_effect = APIConnectionError(request=REQUEST)

        with pytest.raises(UpstreamError):
            await scorer.score(applicant)

    @pytest.mark.asyncio
    async def test_api_error_is_upstream_error(self, scorer, mock_openai_client, applicant):
        mock_openai_client.chat.completions.create.side_effect = APIError("quota exceeded", request=REQUEST, body=None)

        with pytest.raises(UpstreamError) as exc_info:
            await scorer.score(applicant)

        assert "quota exceeded" in exc_info.value.message


class TestConfiguration:
    @pytest.mark.asyncio
    async def test_missing_key_raises_before_any_call(self, applicant):
        scorer = ApplicantScorer(api_key="")

        with pytest.raises(ConfigurationError) as exc_info:
            await scorer.score(applicant)

        assert exc_info.value.message == "Gemini API key not configured"

    def test_client_built_once(self):
        scorer = ApplicantScorer(api_key="k", base_url="https://example.test/v1/", timeout=5.0)

        client = scorer.client

        assert scorer.client is client
        assert client.max_retries == 0


class TestFailureMapping:
    @pytest.mark.asyncio
    async def test_base_client_error_is_upstream_error(self, scorer, mock_openai_client, applicant):
        mock_openai_client.chat.completions.create.side_effect = OpenAIError("stream interrupted")

        with pytest.raises(UpstreamError) as exc_info:
            await scorer.score(applicant)

        assert exc_info.value.message == "stream interrupted"


class TestLogging:
    @pytest.mark.asyncio
    async def test_prompt_logged_at_trace(self, scorer, mock_openai_client, applicant, caplog):
        mock_openai_client.chat.completions.create.return_value = completion_with("SCORE: 60\nEXPLANATION: x")

        with caplog.at_level(TRACE, logger="campreg.scoring.scorer"):
            await scorer.score(applicant)

        trace_records = [r for r in caplog.records if r.levelno == TRACE]
        assert len(trace_records) == 1
        assert "Hamza" in trace_records[0].getMessage()

    @pytest.mark.asyncio
    async def test_prompt_not_logged_at_debug(self, scorer, mock_openai_client, applicant, caplog):
        mock_openai_client.chat.completions.create.return_value = completion_with("SCORE: 60\nEXPLANATION: x")

        with caplog.at_level(logging.DEBUG, logger="campreg.scoring.scorer"):
            await scorer.score(applicant)

        assert all(r.levelno != TRACE for r in caplog.records)
