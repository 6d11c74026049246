from pydantic import BaseModel, ConfigDict, Field

from models.schemas.ai_recommendation import AIRecommendation
from models.schemas.career_path import Difficulty


class CareerSummary(BaseModel):
    id: str
    title: str
    description: str
    skills: list[str] = []
    salary_range: str = ""
    growth_rate: str = ""
    difficulty: Difficulty


class CareerPartitionResponse(BaseModel):
    recommended: list[str] = []
    other: list[str] = []


class AIRecommendationsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recommendations: list[AIRecommendation] = []
    from_cache: bool = Field(default=False, alias="fromCache")
