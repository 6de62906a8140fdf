"""Scoring types - the applicant fields the model sees and the validated result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..models import TriState

if TYPE_CHECKING:
    from ..models import Registration


@dataclass(frozen=True)
class ApplicantProfile:
    """Applicant attributes embedded in the scoring prompt."""

    name: str
    email: str
    age: int | None = None
    niveau_scolaire: str | None = None
    school: str | None = None
    org_status: str | None = None
    previous_camps: TriState = TriState.UNSPECIFIED
    can_pay_350dh: TriState = TriState.UNSPECIFIED
    camp_expectation: str | None = None
    extra_info: str | None = None

    @classmethod
    def from_registration(cls, registration: Registration) -> ApplicantProfile:
        return cls(
            name=registration.name,
            email=registration.email,
            age=registration.age,
            niveau_scolaire=registration.niveau_scolaire,
            school=registration.school,
            org_status=registration.org_status,
            previous_camps=registration.previous_camps_answer,
            can_pay_350dh=registration.can_pay_answer,
            camp_expectation=registration.camp_expectation,
            extra_info=registration.extra_info,
        )


@dataclass(frozen=True)
class ScoreResult:
    """A validated score: ``score`` is always within [1, 100]."""

    score: int
    explanation: str
