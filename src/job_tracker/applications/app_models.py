# src/job_tracker/applications/app_models.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import date
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)


class Status(StrEnum):
    """
    Application status. Drives board columns and summary counts.

    UNKNOWN is the fallback for out-of-enum values found in persisted data.
    """

    APPLIED = "Applied"
    INTERVIEWING = "Interviewing"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, raw: Any) -> Status:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip())
        except ValueError:
            return cls.UNKNOWN

    @classmethod
    def known(cls) -> tuple[Status, ...]:
        return (cls.APPLIED, cls.INTERVIEWING, cls.ACCEPTED, cls.REJECTED)

    @property
    def is_known(self) -> bool:
        return self is not Status.UNKNOWN


class Priority(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, raw: Any) -> Priority:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip())
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_known(self) -> bool:
        return self is not Priority.UNKNOWN


class CoverLetterType(StrEnum):
    NONE = "none"
    FILE = "file"
    TEXT = "text"

    @classmethod
    def parse(cls, raw: Any) -> CoverLetterType:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.NONE


class YesNo(StrEnum):
    YES = "Yes"
    NO = "No"

    @classmethod
    def parse(cls, raw: Any) -> YesNo:
        if isinstance(raw, cls):
            return raw
        if raw is True:
            return cls.YES
        s = str(raw).strip().lower()
        return cls.YES if s in {"yes", "y", "true"} else cls.NO


class InterviewRound(StrEnum):
    NONE = ""
    PHONE_SCREEN = "Phone Screen"
    TECHNICAL = "Technical"
    BEHAVIORAL = "Behavioral"
    SYSTEM_DESIGN = "System Design"
    FINAL = "Final"

    @classmethod
    def parse(cls, raw: Any) -> InterviewRound:
        if isinstance(raw, cls):
            return raw
        if raw is None:
            return cls.NONE
        try:
            return cls(str(raw).strip())
        except ValueError:
            return cls.NONE


# attribute name -> persisted (camelCase) key
_JSON_KEYS: dict[str, str] = {
    "company_name": "companyName",
    "team_name": "teamName",
    "role": "role",
    "website_link": "websiteLink",
    "resume_file_name": "resumeFileName",
    "cover_letter": "coverLetter",
    "cover_letter_type": "coverLetterType",
    "referral_given": "referralGiven",
    "recruiter_outreach": "recruiterOutreach",
    "recruiter_contact": "recruiterContact",
    "date_applied": "dateApplied",
    "status": "status",
    "priority": "priority",
    "follow_up_date": "followUpDate",
    "salary_range": "salaryRange",
    "interview_round": "interviewRound",
    "notes": "notes",
}

_ENUM_PARSERS = {
    "cover_letter_type": CoverLetterType.parse,
    "referral_given": YesNo.parse,
    "recruiter_outreach": YesNo.parse,
    "status": Status.parse,
    "priority": Priority.parse,
    "interview_round": InterviewRound.parse,
}


def json_key(attr: str) -> str:
    return _JSON_KEYS.get(attr, attr)


def _as_text(raw: Any, attr: str = "") -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, bool):
        return "Yes" if raw else "No"
    if isinstance(raw, (int, float)):
        return str(raw)
    logger.debug("Dropping non-scalar %s value of type %s", attr or "field", type(raw).__name__)
    return ""


def _field_values(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Read draft fields from a mapping keyed by camelCase (persisted/form) or snake_case names.

    Absent keys are left out so dataclass defaults apply.
    """
    out: dict[str, Any] = {}
    for attr, key in _JSON_KEYS.items():
        if key in data:
            raw = data[key]
        elif attr in data:
            raw = data[attr]
        else:
            continue
        parser = _ENUM_PARSERS.get(attr)
        out[attr] = parser(raw) if parser is not None else _as_text(raw, attr)
    return out


@dataclass(frozen=True, slots=True)
class ApplicationDraft:
    """
    Everything a user submits for one application, minus identity.

    Defaults match a blank "new application" form.
    """

    company_name: str = ""
    role: str = ""
    team_name: str = ""
    website_link: str = ""
    resume_file_name: str = ""
    cover_letter_type: CoverLetterType = CoverLetterType.NONE
    cover_letter: str = ""
    referral_given: YesNo = YesNo.NO
    recruiter_outreach: YesNo = YesNo.NO
    recruiter_contact: str = ""
    date_applied: str = field(default_factory=lambda: date.today().isoformat())
    status: Status = Status.APPLIED
    priority: Priority = Priority.MEDIUM
    follow_up_date: str = ""
    salary_range: str = ""
    interview_round: InterviewRound = InterviewRound.NONE
    notes: str = ""

    @classmethod
    def blank(cls, *, today: date | None = None) -> ApplicationDraft:
        """Blank form with dateApplied pre-filled."""
        return cls(date_applied=(today or date.today()).isoformat())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ApplicationDraft:
        return cls(**_field_values(data))

    def missing_required(self) -> list[str]:
        missing: list[str] = []
        if not self.company_name or not self.company_name.strip():
            missing.append("companyName")
        if not self.role or not self.role.strip():
            missing.append("role")
        return missing

    def to_dict(self) -> dict[str, str]:
        return {json_key(f.name): str(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True, slots=True)
class ApplicationRecord:
    """One tracked job application. Immutable; edits produce a new record with the same id."""

    id: str
    company_name: str
    role: str
    team_name: str = ""
    website_link: str = ""
    resume_file_name: str = ""
    cover_letter_type: CoverLetterType = CoverLetterType.NONE
    cover_letter: str = ""
    referral_given: YesNo = YesNo.NO
    recruiter_outreach: YesNo = YesNo.NO
    recruiter_contact: str = ""
    date_applied: str = ""
    status: Status = Status.APPLIED
    priority: Priority = Priority.MEDIUM
    follow_up_date: str = ""
    salary_range: str = ""
    interview_round: InterviewRound = InterviewRound.NONE
    notes: str = ""
    # persisted text of an unrecognised status/priority, written back unchanged
    status_raw: str | None = field(default=None, repr=False)
    priority_raw: str | None = field(default=None, repr=False)

    @classmethod
    def from_draft(cls, record_id: str, draft: ApplicationDraft) -> ApplicationRecord:
        values = {f.name: getattr(draft, f.name) for f in fields(draft)}
        return cls(id=record_id, **values)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ApplicationRecord:
        """
        Build a record from persisted JSON, normalising every field.

        Out-of-enum status/priority become UNKNOWN (logged) and keep their stored text;
        other enums fall back to their default.
        """
        values = _field_values(data)
        values.setdefault("company_name", "")
        values.setdefault("role", "")
        rid = _as_text(data.get("id"), "id").strip()

        for attr in ("status", "priority"):
            if attr in values and not values[attr].is_known:
                raw = _as_text(data.get(json_key(attr), data.get(attr)), attr)
                logger.warning("Unrecognised %s=%r on application id=%s", attr, raw, rid)
                values[f"{attr}_raw"] = raw

        return cls(id=rid, **values)

    def to_draft(self) -> ApplicationDraft:
        values = {f.name: getattr(self, f.name) for f in fields(ApplicationDraft)}
        return ApplicationDraft(**values)

    def to_dict(self) -> dict[str, str]:
        out = {"id": self.id}
        out.update(self.to_draft().to_dict())
        if not self.status.is_known and self.status_raw is not None:
            out["status"] = self.status_raw
        if not self.priority.is_known and self.priority_raw is not None:
            out["priority"] = self.priority_raw
        return out

    def value_of(self, attr: str) -> str:
        """String value of an attribute for display/sorting; missing -> ""."""
        v = getattr(self, attr, None)
        return "" if v is None else str(v)
