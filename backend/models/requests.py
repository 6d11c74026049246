from pydantic import BaseModel, ConfigDict, Field

from models.schemas.user_profile import UserProfile


class RecommendationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_profile: UserProfile = Field(..., alias="userProfile")


class AIRecommendationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", min_length=1, max_length=128)
    user_profile: UserProfile | None = Field(
        default=None,
        alias="userProfile",
        description="Profile to score; fetched from storage by userId when omitted",
    )
    available_courses: list[str] | None = Field(
        default=None,
        alias="availableCourses",
        description="Catalog titles the caller offers; defaults to the full catalog",
    )
