"""AI recommendation reconciler.

Flow:
    profile + catalog titles
      ├─ prompt_builder          → prompt
      ├─ gemini_client           → raw text (None on transport failure)
      ├─ response_parser         → ParseResult
      │     └─ not SUCCESS / invalid records → DEFAULT_RECOMMENDATIONS
      ├─ keep records whose careerPath is a known title
      ├─ fewer than 3? → match_scorer.score(exclude the ones we have)
      └─ first 3, or the defaults flagged as degraded (never empty)
"""

import logging

from pydantic import ValidationError

from models.schemas.ai_recommendation import AIRecommendation
from models.schemas.user_profile import UserProfile
from services import catalog, gemini_client, match_scorer, prompt_builder
from services.response_parser import parse_json_array

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 3

DEFAULT_RECOMMENDATIONS: tuple[AIRecommendation, ...] = (
    AIRecommendation(
        career_path="Frontend Developer",
        reasoning=(
            "Based on your profile, frontend development offers a great entry point into tech "
            "with visual results and growing demand."
        ),
        match_score=75,
        next_steps=["Learn HTML/CSS basics", "Master JavaScript fundamentals", "Build portfolio projects"],
        timeline_estimate="6-9 months to job readiness",
        skill_gaps=["React", "TypeScript"],
        strength_areas=["HTML/CSS", "JavaScript"],
    ),
    AIRecommendation(
        career_path="Backend Developer",
        reasoning=(
            "Your analytical skills and interest in problem-solving make backend development "
            "a strong fit for building robust systems."
        ),
        match_score=70,
        next_steps=["Choose a programming language", "Learn database fundamentals", "Build API projects"],
        timeline_estimate="8-12 months to job readiness",
        skill_gaps=["Node.js", "Databases"],
        strength_areas=["Programming Logic", "Problem Solving"],
    ),
    AIRecommendation(
        career_path="Data Scientist",
        reasoning=(
            "With the growing importance of data-driven decisions, this field offers "
            "excellent growth opportunities."
        ),
        match_score=65,
        next_steps=["Learn Python and statistics", "Practice with real datasets", "Build data visualization projects"],
        timeline_estimate="10-15 months to job readiness",
        skill_gaps=["Python", "Statistics", "Machine Learning"],
        strength_areas=["Analytical Thinking", "Mathematics"],
    ),
)


def default_recommendations() -> list[AIRecommendation]:
    return list(DEFAULT_RECOMMENDATIONS)


def _filter_to_catalog(
    recommendations: list[AIRecommendation],
    titles: list[str],
) -> list[AIRecommendation]:
    """Drop titles outside ``titles`` and repeated titles, keeping model order."""
    allowed = set(titles)
    kept: list[AIRecommendation] = []
    seen: set[str] = set()
    for rec in recommendations:
        if rec.career_path not in allowed:
            logger.info("Dropping unknown career from model response: %s", rec.career_path)
            continue
        if rec.career_path in seen:
            continue
        seen.add(rec.career_path)
        kept.append(rec)
    return kept


def complete(
    profile: UserProfile,
    recommendations: list[AIRecommendation],
    titles: list[str],
) -> list[AIRecommendation]:
    """Filter to ``titles``, backfill from the match scorer, cap at three.

    Used for fresh model output and for cached records alike. May return
    an empty list; callers decide what to fall back to.
    """
    recommendations = _filter_to_catalog(recommendations, titles)

    if len(recommendations) < MAX_RECOMMENDATIONS:
        active = catalog.restrict_to_titles(titles)
        present = {
            catalog.career_id_for_title(rec.career_path, active)
            for rec in recommendations
        }
        backfill = match_scorer.score(profile, active, exclude_ids=present)
        logger.info(
            "%d usable recommendations, match scorer added %d",
            len(recommendations),
            len(backfill),
        )
        recommendations = recommendations + backfill

    return recommendations[:MAX_RECOMMENDATIONS]


async def _reconcile(
    profile: UserProfile,
    titles: list[str],
    client=None,
) -> tuple[list[AIRecommendation], bool]:
    prompt = prompt_builder.build_recommendation_prompt(profile, titles)
    text = await gemini_client.generate_text(prompt, client=client)

    parsed = parse_json_array(text)
    if not parsed.ok:
        logger.warning("Model recommendations unavailable (%s), using defaults", parsed.status.value)
        return default_recommendations(), True

    try:
        model_recs = [AIRecommendation.model_validate(item) for item in parsed.items]
    except ValidationError as e:
        logger.warning("Model recommendations failed validation, using defaults: %s", e)
        return default_recommendations(), True

    recommendations = complete(profile, model_recs, titles)
    if not recommendations:
        logger.warning("No usable recommendations for profile, using defaults")
        return default_recommendations(), True
    return recommendations, False


async def reconcile(
    profile: UserProfile,
    catalog_titles: list[str] | None = None,
    client=None,
) -> tuple[list[AIRecommendation], bool]:
    """Return ``(recommendations, degraded)``; never raises, never returns [].

    Model records come first in model order, followed by match-scorer
    records in descending score order. ``catalog_titles`` limits the
    careers that may be recommended (defaults to the whole catalog).
    ``degraded`` is True when the static defaults were returned.
    """
    titles = list(catalog_titles) if catalog_titles is not None else catalog.catalog_titles()
    try:
        return await _reconcile(profile, titles, client=client)
    except Exception:
        logger.exception("Recommendation reconciliation failed, using defaults")
        return default_recommendations(), True
