"""Domain models for camp registrations."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

# Options offered by the public registration form
EDUCATION_LEVELS = ("الثانوي التأهيلي", "الإجازة", "الماستر", "اخر")
ORG_STATUSES = ("عضو(ة)", "منخرط(ة)", "متعاطف(ة)")
MIN_AGE = 14
MAX_AGE = 26

ARABIC_YES = "نعم"
ARABIC_NO = "لا"


class RegistrationStatus(str, Enum):
    NEW = "new"
    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"

    @property
    def arabic_label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    RegistrationStatus.NEW: "جديد",
    RegistrationStatus.PENDING: "قيد المراجعة",
    RegistrationStatus.APPROVED: "مقبول",
    RegistrationStatus.DECLINED: "مرفوض",
}


class TriState(Enum):
    """Yes/no answer where the applicant may also have skipped the question."""

    YES = "yes"
    NO = "no"
    UNSPECIFIED = "unspecified"

    @classmethod
    def from_optional_bool(cls, value: bool | None) -> TriState:
        if value is None:
            return cls.UNSPECIFIED
        return cls.YES if value else cls.NO

    @classmethod
    def from_arabic(cls, value: str | None) -> TriState:
        if value == ARABIC_YES:
            return cls.YES
        if value == ARABIC_NO:
            return cls.NO
        return cls.UNSPECIFIED

    def to_optional_bool(self) -> bool | None:
        if self is TriState.UNSPECIFIED:
            return None
        return self is TriState.YES

    def to_arabic(self) -> str:
        if self is TriState.YES:
            return ARABIC_YES
        if self is TriState.NO:
            return ARABIC_NO
        return ""

    @classmethod
    def from_store(cls, value: Any) -> TriState:
        """Decode a stored answer.

        PocketBase bool fields cannot hold null, so answers are stored as
        text ("yes", "no", ""). Older rows may still carry a bool.
        """
        if isinstance(value, bool):
            return cls.from_optional_bool(value)
        if value in (cls.YES.value, cls.NO.value):
            return cls(value)
        return cls.UNSPECIFIED

    def to_store(self) -> str:
        return "" if self is TriState.UNSPECIFIED else self.value


@dataclass
class Registration:
    """One applicant's submitted record plus administrative state.

    Field names match the PocketBase ``registrations`` collection.
    """

    id: str
    name: str
    email: str
    phone: str = ""
    age: int | None = None
    niveau_scolaire: str | None = None
    school: str | None = None
    org_status: str | None = None
    previous_camps: bool | None = None
    can_pay_350dh: bool | None = None
    camp_expectation: str | None = None
    extra_info: str | None = None
    photo_url: str | None = None
    status: RegistrationStatus = RegistrationStatus.NEW
    score: int | None = None
    score_explanation: str | None = None
    approved_notified: bool = False
    created: str | None = None
    updated: str | None = None

    @classmethod
    def from_record(cls, record: Any) -> Registration:
        """Build from a PocketBase record (attribute access, missing fields tolerated)."""

        def field(name: str) -> Any:
            value = getattr(record, name, None)
            # PocketBase returns "" for unset text fields
            return None if value == "" else value

        raw_status = getattr(record, "status", "") or RegistrationStatus.NEW.value
        try:
            status = RegistrationStatus(raw_status)
        except ValueError:
            status = RegistrationStatus.NEW

        age = field("age")
        score = field("score")

        return cls(
            id=record.id,
            name=getattr(record, "name", "") or "",
            email=getattr(record, "email", "") or "",
            phone=getattr(record, "phone", "") or "",
            age=int(age) if age else None,
            niveau_scolaire=field("niveau_scolaire"),
            school=field("school"),
            org_status=field("org_status"),
            previous_camps=TriState.from_store(getattr(record, "previous_camps", None)).to_optional_bool(),
            can_pay_350dh=TriState.from_store(getattr(record, "can_pay_350dh", None)).to_optional_bool(),
            camp_expectation=field("camp_expectation"),
            extra_info=field("extra_info"),
            photo_url=field("photo_url"),
            status=status,
            score=int(score) if score else None,
            score_explanation=field("score_explanation"),
            approved_notified=bool(getattr(record, "approved_notified", False)),
            created=_as_str(getattr(record, "created", None)),
            updated=_as_str(getattr(record, "updated", None)),
        )

    @property
    def previous_camps_answer(self) -> TriState:
        return TriState.from_optional_bool(self.previous_camps)

    @property
    def can_pay_answer(self) -> TriState:
        return TriState.from_optional_bool(self.can_pay_350dh)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data


def _as_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    if hasattr(value, "isoformat"):
        return str(value.isoformat())
    return str(value)
