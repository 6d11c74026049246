"""A single career recommendation, from the model or the fallback scorer."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AIRecommendation(BaseModel):
    """Serialized with camelCase keys (``careerPath``, ``matchScore`` ...).

    Instances are frozen; the reconciler only filters, appends and
    truncates collections of them.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    career_path: str
    reasoning: str
    match_score: int = Field(ge=0, le=100)
    next_steps: list[str]
    timeline_estimate: str
    skill_gaps: list[str]
    strength_areas: list[str]
