"""Pydantic contracts shared by the recommendation services."""

from models.schemas.ai_recommendation import AIRecommendation
from models.schemas.career_mapping import CareerMapping
from models.schemas.career_path import CareerPathDefinition, RoadmapPhase
from models.schemas.user_profile import UserProfile

__all__ = [
    "AIRecommendation",
    "CareerMapping",
    "CareerPathDefinition",
    "RoadmapPhase",
    "UserProfile",
]
