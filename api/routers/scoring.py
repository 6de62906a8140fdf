"""
Scoring Router - AI fit score for camp applicants.

Stateless: one model call per request, nothing persisted here. The caller
(the registration form workflow) writes the score back.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from campreg.errors import ConfigurationError
from campreg.scoring import ApplicantScorer

from ..dependencies import get_scorer
from ..schemas import ParticipantScoreRequest, ParticipantScoreResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["scoring"])


@router.post("/score-participant", response_model=None)
async def score_participant(
    request: ParticipantScoreRequest,
    scorer: ApplicantScorer = Depends(get_scorer),
) -> ParticipantScoreResponse | JSONResponse:
    """Score an applicant from 1 to 100 with a short explanation."""
    if not (request.name or "").strip() or not (request.email or "").strip():
        return JSONResponse(
            status_code=400,
            content={"error": "Missing required participant data", "success": False},
        )

    try:
        result = await scorer.score(request.to_profile())
    except ConfigurationError as e:
        logger.error(f"Scoring unavailable: {e.message}")
        return JSONResponse(status_code=500, content={"error": e.message, "success": False})
    except Exception as e:
        logger.error(f"Error scoring participant: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to score participant", "details": str(e), "success": False},
        )

    return ParticipantScoreResponse(score=result.score, score_explanation=result.explanation)
