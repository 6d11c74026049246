"""User profile as read from the profiles table or posted by the client."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

ExpertiseLevel = Literal["beginner", "intermediate", "advanced", "expert"]

DEFAULT_EXPERTISE: ExpertiseLevel = "beginner"


class UserProfile(BaseModel):
    """Read-only input to both scorers.

    ``skills`` and ``skill_expertise`` are allowed to disagree: a skill
    missing from the mapping is treated as ``beginner`` and mapping keys
    with no matching skill are simply never looked up.
    """
    name: str = ""
    age: int = 0
    education_field: str = ""
    study_year: int = 0
    skills: list[str] = []
    skill_expertise: dict[str, ExpertiseLevel] = {}
    interests: str = ""
    career_goals: str = ""
    experience_level: str = ""
    availability_hours_per_week: int = Field(default=10, ge=0)

    @field_validator("skills")
    @classmethod
    def _dedupe_skills(cls, value: list[str]) -> list[str]:
        seen: list[str] = []
        for skill in value:
            skill = skill.strip()
            if skill and skill not in seen:
                seen.append(skill)
        return seen

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        # Profile rows store unanswered questions as NULL
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def expertise_for(self, skill: str) -> ExpertiseLevel:
        return self.skill_expertise.get(skill, DEFAULT_EXPERTISE)

    @property
    def interests_lower(self) -> str:
        return self.interests.lower()

    @property
    def education_lower(self) -> str:
        return self.education_field.lower()

    @property
    def skills_lower(self) -> list[str]:
        return [s.lower() for s in self.skills]
