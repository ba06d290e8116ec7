"""
Adapters for the position side: job postings and customer requirements.
"""

import json

from .base import EntityAdapter, MatchFields, get_field, is_truthy_flag, join_text, strip_html


def _as_text(value) -> str:
    if isinstance(value, (list, tuple)):
        return "\n".join(str(item) for item in value if item)
    if isinstance(value, dict):
        return "\n".join(f"{key}: {item}" for key, item in value.items() if item)
    return str(value) if value else ""


class JobAdapter(EntityAdapter):
    """Reads job postings."""

    @property
    def kind(self) -> str:
        return "job"

    def extract(self, record) -> MatchFields:
        profile = self._requirements_profile(record)

        description = join_text(
            get_field(record, "description"),
            strip_html(get_field(record, "rich_description")),
            _as_text(get_field(record, "requirements")),
            _as_text(profile),
        )

        return MatchFields(
            skills=get_field(record, "required_skills", "skills", "keywords")
            or get_field(profile, "skills", "required_skills"),
            location=get_field(record, "location"),
            experience_years=get_field(record, "experience_years", "experienceYears")
            or get_field(profile, "experience_years"),
            experience=None,
            education=get_field(record, "education_required", "education")
            or get_field(profile, "education_required", "education"),
            work_model=get_field(record, "work_model", "job_type"),
            description=description,
            remote_allowed=is_truthy_flag(get_field(record, "remote_work", "remote_option")),
        )

    def _requirements_profile(self, record):
        profile = get_field(record, "requirements_profile")
        if isinstance(profile, str):
            try:
                return json.loads(profile)
            except (ValueError, RecursionError):
                self.logger.debug("requirements_profile is not valid JSON, reading it as text")
        return profile


class RequirementAdapter(EntityAdapter):
    """Reads customer requirements (staffing requests)."""

    @property
    def kind(self) -> str:
        return "requirement"

    def extract(self, record) -> MatchFields:
        return MatchFields(
            skills=get_field(record, "skills"),
            location=get_field(record, "location"),
            experience_years=get_field(record, "experience", "experience_years"),
            education=get_field(record, "education"),
            work_model=get_field(record, "work_model"),
            description=join_text(get_field(record, "description")),
            remote_allowed=is_truthy_flag(get_field(record, "isRemote", "is_remote")),
        )
