"""
Pydantic schemas for the participant scoring endpoint.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from campreg.models import TriState
from campreg.scoring import ApplicantProfile


class ParticipantScoreRequest(BaseModel):
    """Applicant fields to score. Only name and email are required (checked by the endpoint)."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    age: int | None = None
    niveau_scolaire: str | None = None
    school: str | None = None
    org_status: str | None = None
    previous_camps: bool | None = None
    can_pay_350dh: bool | None = None
    camp_expectation: str | None = None
    extra_info: str | None = None

    @field_validator("age", mode="before")
    @classmethod
    def blank_age_is_unspecified(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("previous_camps", "can_pay_350dh", mode="before")
    @classmethod
    def decode_yes_no(cls, v: Any) -> Any:
        """Accept the form's Arabic answers; blank means the question was skipped."""
        if isinstance(v, str):
            answer = TriState.from_arabic(v.strip())
            if answer is not TriState.UNSPECIFIED or not v.strip():
                return answer.to_optional_bool()
        return v

    def to_profile(self) -> ApplicantProfile:
        return ApplicantProfile(
            name=self.name or "",
            email=self.email or "",
            age=self.age,
            niveau_scolaire=self.niveau_scolaire,
            school=self.school,
            org_status=self.org_status,
            previous_camps=TriState.from_optional_bool(self.previous_camps),
            can_pay_350dh=TriState.from_optional_bool(self.can_pay_350dh),
            camp_expectation=self.camp_expectation,
            extra_info=self.extra_info,
        )


class ParticipantScoreResponse(BaseModel):
    score: int
    score_explanation: str
    success: bool = True
