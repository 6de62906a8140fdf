"""Applicant scorer - one chat completion per applicant via the OpenAI SDK.

The default endpoint is Gemini's OpenAI-compatible API, so the same client
works against either provider by changing ``base_url`` and ``model``.
"""

from __future__ import annotations

import logging

from openai import APIConnectionError, APIError, APITimeoutError, AsyncOpenAI, OpenAIError

from ..errors import ConfigurationError, InvalidAIResponseError, UpstreamError
from ..logging_config import TRACE
from .parser import clamp_score, parse_ai_response
from .prompts import build_scoring_prompt
from .types import ApplicantProfile, ScoreResult

logger = logging.getLogger(__name__)

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_MODEL = "gemini-2.0-flash"


class ApplicantScorer:
    """Scores applicants with a generative-text model.

    Stateless: no retries, no streaming, no caching. Each ``score`` call
    makes exactly one outbound request.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str | None = GEMINI_OPENAI_BASE_URL,
        timeout: float = 30.0,
    ):
        """Initialize the scorer.

        Args:
            api_key: Generative-text API key (empty means not configured)
            model: Model name (e.g., 'gemini-2.0-flash')
            base_url: OpenAI-compatible API base URL
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self._client: AsyncOpenAI | None = None

    @property
    def client(self) -> AsyncOpenAI:
        if not self.api_key:
            raise ConfigurationError("Gemini API key not configured")
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    async def score(self, applicant: ApplicantProfile) -> ScoreResult:
        """Score one applicant.

        Raises:
            ConfigurationError: No API key configured
            UpstreamError: The model could not be reached
            InvalidAIResponseError: The reply lacked a score or explanation
        """
        client = self.client
        prompt = build_scoring_prompt(applicant)
        logger.log(TRACE, f"Scoring prompt for {applicant.email}:\n{prompt}")

        try:
            completion = await client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
        except (APITimeoutError, APIConnectionError) as e:
            # Unreachable and timed-out upstreams share the same failure class
            logger.error(f"Scoring model unreachable for {applicant.email}: {type(e).__name__}: {e}")
            raise UpstreamError(str(e) or type(e).__name__) from e
        except APIError as e:
            logger.error(f"Scoring model returned an error for {applicant.email}: {e}")
            raise UpstreamError(str(e)) from e
        except OpenAIError as e:
            logger.error(f"Scoring client failed for {applicant.email}: {type(e).__name__}: {e}")
            raise UpstreamError(str(e) or type(e).__name__) from e

        text = completion.choices[0].message.content if completion.choices else None
        logger.debug(f"Scoring model reply for {applicant.email}: {text!r}")

        parsed = parse_ai_response(text or "")
        if not parsed.is_complete:
            logger.warning(f"Unparseable scoring reply for {applicant.email}: {text!r}")
            raise InvalidAIResponseError()

        # is_complete guarantees both fields are set
        assert parsed.score is not None and parsed.explanation is not None
        result = ScoreResult(score=clamp_score(parsed.score), explanation=parsed.explanation)
        logger.info(f"Scored applicant {applicant.email}: {result.score}")
        return result
