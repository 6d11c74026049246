"""Static catalog entries: one career path with its learning roadmap."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

Difficulty = Literal["Beginner", "Intermediate", "Advanced"]


class RoadmapPhase(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: str
    duration: str
    skills: tuple[str, ...] = ()
    projects: tuple[str, ...] = ()


class CareerPathDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    skills: tuple[str, ...] = ()
    salary_range: str = ""
    growth_rate: str = ""
    difficulty: Difficulty
    roadmap: tuple[RoadmapPhase, ...] = ()
