"""Scoring prompt template.

The model is asked to reply with two tagged lines, ``SCORE:`` and
``EXPLANATION:``, which ``parser.parse_ai_response`` extracts.
"""

from __future__ import annotations

from ..models import TriState
from .types import ApplicantProfile

UNSPECIFIED = "غير محدد"

# (criterion, weight %) - weights sum to 100
SCORING_CRITERIA: tuple[tuple[str, int], ...] = (
    ("التحفيز والاهتمام", 30),
    ("الخلفية التعليمية والعمر المناسب", 25),
    ("القدرة المالية والالتزام", 20),
    ("الخبرة السابقة والنضج", 15),
    ("وضوح التوقعات والأهداف", 10),
)

SCORING_TEMPLATE = """
أنت خبير في تقييم المشاركين في المخيمات الصيفية التعليمية والتربوية. سأعطيك معلومات عن مشارك محتمل، وأريدك أن تعطيه درجة من 1 إلى 100 بناءً على مدى ملاءمته للمخيم.

معايير التقييم:
{criteria}

معلومات المشارك:
- الاسم: {name}
- العمر: {age} سنة
- المؤسسة التعليمية: {school}
- المستوى الدراسي: {niveau_scolaire}
- الحالة التنظيمية: {org_status}
- المشاركة في مخيمات سابقة: {previous_camps}
- القدرة على دفع 350 درهم: {can_pay}
- توقعات المشارك من المخيم: {camp_expectation}
- معلومات إضافية/صحية: {extra_info}

يرجى الرد بالتنسيق التالي بالضبط:
SCORE: [رقم من 1 إلى 100]
EXPLANATION: [شرح مختصر باللغة العربية لا يتجاوز 150 كلمة يوضح أسباب هذه الدرجة]

مثال على الرد:
SCORE: 85
EXPLANATION: المشارك يظهر تحفيزاً عالياً وتوقعات واضحة من المخيم. العمر مناسب والمستوى التعليمي جيد. القدرة المالية متوفرة مما يدل على الالتزام. ينصح بقبوله.
"""


def _or_unspecified(value: object) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        return UNSPECIFIED
    return str(value)


def _answer(value: TriState) -> str:
    return value.to_arabic() or UNSPECIFIED


def build_scoring_prompt(applicant: ApplicantProfile) -> str:
    """Render the scoring prompt for one applicant."""
    criteria = "\n".join(f"- {name} ({weight}%)" for name, weight in SCORING_CRITERIA)
    return SCORING_TEMPLATE.format(
        criteria=criteria,
        name=applicant.name,
        age=_or_unspecified(applicant.age),
        school=_or_unspecified(applicant.school),
        niveau_scolaire=_or_unspecified(applicant.niveau_scolaire),
        org_status=_or_unspecified(applicant.org_status),
        previous_camps=_answer(applicant.previous_camps),
        can_pay=_answer(applicant.can_pay_350dh),
        camp_expectation=_or_unspecified(applicant.camp_expectation),
        extra_info=_or_unspecified(applicant.extra_info),
    )
