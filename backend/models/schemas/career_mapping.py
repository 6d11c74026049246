"""Keyword table entry consumed by the interest/skill match scorer."""

from pydantic import BaseModel, ConfigDict


class CareerMapping(BaseModel):
    """Interest and skill keywords for one catalog career.

    ``career`` is a catalog id. Entries whose id is not in the active
    catalog are skipped by the scorer.
    """
    model_config = ConfigDict(frozen=True)

    career: str
    interest_keywords: tuple[str, ...]
    skill_keywords: tuple[str, ...]
    reasoning: str
