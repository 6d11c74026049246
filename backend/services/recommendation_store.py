"""Supabase storage for user profiles and cached AI recommendations."""

import logging

from pydantic import ValidationError
from supabase import Client, create_client

from config import settings
from models.schemas.ai_recommendation import AIRecommendation
from models.schemas.user_profile import UserProfile

logger = logging.getLogger(__name__)

_client: Client | None = None


def get_client() -> Client | None:
    """Shared Supabase client, or None when SUPABASE_URL / SUPABASE_KEY are unset."""
    global _client
    if not settings.supabase_url or not settings.supabase_key:
        logger.warning("Supabase not configured - recommendation caching disabled")
        return None
    if _client is None:
        _client = create_client(settings.supabase_url, settings.supabase_key)
    return _client


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------

def get_user_profile(client: Client, user_id: str) -> UserProfile | None:
    """Fetch a user's profile row by id. Returns None if there is no row."""
    rows = (
        client.table(settings.profiles_table)
        .select("*")
        .eq("id", user_id)
        .execute()
        .data
    )
    if not rows:
        return None
    return UserProfile.model_validate(rows[0])


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

def get_stored_recommendations(client: Client, user_id: str) -> list[AIRecommendation] | None:
    """Most recently stored recommendations for ``user_id``, or None.

    A stored payload that no longer validates is treated as absent.
    """
    rows = (
        client.table(settings.recommendations_table)
        .select("recommendations")
        .eq("user_id", user_id)
        .order("created_at", desc=True)
        .limit(1)
        .execute()
        .data
    )
    if not rows or not rows[0].get("recommendations"):
        return None

    try:
        return [AIRecommendation.model_validate(r) for r in rows[0]["recommendations"]]
    except (ValidationError, TypeError) as e:
        logger.warning("Ignoring invalid stored recommendations for %s: %s", user_id, e)
        return None


def store_recommendations(
    client: Client,
    user_id: str,
    recommendations: list[AIRecommendation],
) -> bool:
    """Insert a new recommendations row. Returns False if the insert failed."""
    payload = [r.model_dump(by_alias=True) for r in recommendations]
    try:
        client.table(settings.recommendations_table).insert(
            {"user_id": user_id, "recommendations": payload}
        ).execute()
    except Exception as e:
        logger.error("Error storing recommendations for %s: %s", user_id, e)
        return False
    return True
