"""Tests for rendering the applicant scoring prompt."""

from __future__ import annotations

from campreg.models import TriState
from campreg.scoring import ApplicantProfile, build_scoring_prompt
from campreg.scoring.prompts import SCORING_CRITERIA, UNSPECIFIED


class TestBuildScoringPrompt:
    def test_criteria_weights_sum_to_100(self):
        assert sum(weight for _, weight in SCORING_CRITERIA) == 100

    def test_applicant_fields_embedded(self):
        applicant = ApplicantProfile(
            name="Salma",
            email="salma@example.com",
            age=20,
            school="ENSA Tanger",
            niveau_scolaire="الإجازة",
            org_status="عضو(ة)",
            previous_camps=TriState.YES,
            can_pay_350dh=TriState.NO,
            camp_expectation="Leadership",
            extra_info="Asthma",
        )

        prompt = build_scoring_prompt(applicant)

        assert "- الاسم: Salma" in prompt
        assert "- العمر: 20 سنة" in prompt
        assert "ENSA Tanger" in prompt
        assert "- المشاركة في مخيمات سابقة: نعم" in prompt
        assert "- القدرة على دفع 350 درهم: لا" in prompt
        assert "Leadership" in prompt
        assert "التحفيز والاهتمام (30%)" in prompt

    def test_requests_tagged_reply(self):
        prompt = build_scoring_prompt(ApplicantProfile(name="A", email="a@b.ma"))

        assert "SCORE:" in prompt
        assert "EXPLANATION:" in prompt

    def test_missing_values_rendered_as_unspecified(self):
        prompt = build_scoring_prompt(ApplicantProfile(name="A", email="a@b.ma"))

        assert f"- العمر: {UNSPECIFIED} سنة" in prompt
        assert f"- المشاركة في مخيمات سابقة: {UNSPECIFIED}" in prompt
        assert f"- القدرة على دفع 350 درهم: {UNSPECIFIED}" in prompt
        assert f"- معلومات إضافية/صحية: {UNSPECIFIED}" in prompt

    def test_email_not_sent_to_model(self):
        prompt = build_scoring_prompt(ApplicantProfile(name="A", email="private@b.ma"))
        assert "private@b.ma" not in prompt
