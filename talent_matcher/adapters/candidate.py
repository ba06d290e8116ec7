"""
Adapters for the entity side: candidates, applications and talent-pool records.
"""

import json

from .base import EntityAdapter, MatchFields, get_field, join_text


class CandidateAdapter(EntityAdapter):
    """Reads candidate profiles."""

    @property
    def kind(self) -> str:
        return "candidate"

    def extract(self, record) -> MatchFields:
        profile = get_field(record, "qualificationProfile", "qualification_profile")
        certificates = get_field(profile, "certificates")

        return MatchFields(
            skills=get_field(record, "skills", "qualifications"),
            location=get_field(record, "location", "city"),
            experience_years=get_field(record, "experience_years", "experienceYears"),
            experience=get_field(record, "experience", "work_history"),
            education=get_field(record, "education", default=certificates),
            work_model=get_field(record, "preferred_work_model", "work_model"),
            description=join_text(get_field(record, "summary", "description")),
        )


class ApplicationAdapter(CandidateAdapter):
    """Reads job applications; the cover letter counts as description."""

    @property
    def kind(self) -> str:
        return "application"

    def extract(self, record) -> MatchFields:
        fields = super().extract(record)
        fields.location = get_field(record, "applicant_location", "location")
        fields.description = join_text(get_field(record, "cover_letter"), fields.description)
        return fields


class TalentPoolAdapter(EntityAdapter):
    """
    Reads talent-pool records.

    The pooled candidate or application is embedded as entity_data; the
    snapshots taken when it was pooled take precedence over it.
    """

    @property
    def kind(self) -> str:
        return "talent_pool"

    def extract(self, record) -> MatchFields:
        entity_data = get_field(record, "entity_data")
        if isinstance(entity_data, str):
            try:
                entity_data = json.loads(entity_data)
            except (ValueError, RecursionError):
                self.logger.debug("Talent-pool entity_data is not valid JSON, ignoring it")
                entity_data = None

        if get_field(record, "entity_type") == "application":
            inner = ApplicationAdapter()
        else:
            inner = CandidateAdapter()

        fields = inner.extract(entity_data or {})
        return fields.merged(
            skills=get_field(record, "skills_snapshot"),
            experience=get_field(record, "experience_snapshot"),
        )
