"""Rule-based career recommender.

Maps interests, education field and raw skills onto catalog ids through
fixed substring/membership rules. No scoring and no external calls: the
result is an ordered set reflecting rule-evaluation order, backfilled from
the catalog when fewer than ``MIN_RECOMMENDATIONS`` ids were suggested.
"""

import logging
from collections.abc import Sequence

from models.schemas.career_path import CareerPathDefinition
from models.schemas.user_profile import UserProfile

logger = logging.getLogger(__name__)

MIN_RECOMMENDATIONS = 3

BUSINESS_TRACK: tuple[str, ...] = (
    "accounting",
    "corporate-finance",
    "investment-banking",
    "marketing-strategies",
    "e-commerce",
    "supply-chain-management",
    "business-analytics",
)

HUMANITIES_TRACK: tuple[str, ...] = (
    "content-creator",
    "social-researcher",
    "cultural-analyst",
    "public-relations",
    "policy-development",
    "community-engagement",
)

# (phrases matched as substrings of the lower-cased interests, ids to add)
INTEREST_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("web development", "ui/ux"), ("frontend",)),
    (("data science", "machine learning", "artificial intelligence"), ("datascience",)),
    (("cybersecurity",), ("cybersecurity",)),
    (("mobile",), ("mobile",)),
    (("devops", "cloud"), ("devops",)),
    (
        (
            "accounting",
            "finance",
            "business",
            "corporate finance",
            "investment banking",
            "marketing strategies",
            "e-commerce",
            "supply chain management",
            "business analytics",
        ),
        BUSINESS_TRACK,
    ),
    (
        (
            "content creation",
            "writing",
            "media",
            "social research",
            "cultural analysis",
            "public relations",
            "policy development",
            "community engagement",
        ),
        HUMANITIES_TRACK,
    ),
)

# (phrases matched as substrings of the lower-cased education field, ids to add)
EDUCATION_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("computer", "information"), ("frontend", "backend")),
    (("commerce", "business"), BUSINESS_TRACK),
    (("arts", "humanities"), HUMANITIES_TRACK),
)

# (skill names matched exactly against lower-cased user skills, ids to add)
SKILL_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("html", "css", "javascript", "react"), ("frontend",)),
    (("python", "java", "sql", "node.js"), ("backend", "datascience")),
    (("cybersecurity", "linux"), ("cybersecurity",)),
    (("mobile", "android", "ios"), ("mobile",)),
    (("cloud", "devops", "docker"), ("devops",)),
    (("data analysis", "machine learning", "statistics"), ("datascience",)),
    (("accounting", "finance"), ("accounting", "corporate-finance")),
    (("marketing", "advertising"), ("marketing", "marketing-strategies")),
    (("investment banking",), ("investment-banking",)),
    (("e-commerce",), ("e-commerce",)),
    (("supply chain management",), ("supply-chain-management",)),
    (("business analytics",), ("business-analytics",)),
    (("social research",), ("social-researcher",)),
    (("cultural analysis",), ("cultural-analyst",)),
    (("public relations",), ("public-relations",)),
    (("policy development",), ("policy-development",)),
    (("community engagement",), ("community-engagement",)),
)


def _add(suggested: list[str], ids: Sequence[str], known: set[str]) -> None:
    # Rule tables may name ids the active catalog does not offer
    for career_id in ids:
        if career_id in known and career_id not in suggested:
            suggested.append(career_id)


def recommend(
    profile: UserProfile,
    catalog: Sequence[CareerPathDefinition],
) -> list[str]:
    """Return suggested catalog ids, in rule order, at least three long.

    Deterministic for identical input. The list never contains duplicates
    and is not re-sorted by relevance.
    """
    known = {c.id for c in catalog}
    interests = profile.interests_lower
    education = profile.education_lower
    skills = set(profile.skills_lower)

    suggested: list[str] = []

    for phrases, ids in INTEREST_RULES:
        if any(phrase in interests for phrase in phrases):
            _add(suggested, ids, known)

    for phrases, ids in EDUCATION_RULES:
        if any(phrase in education for phrase in phrases):
            _add(suggested, ids, known)

    for tokens, ids in SKILL_RULES:
        if skills.intersection(tokens):
            _add(suggested, ids, known)

    if len(suggested) < MIN_RECOMMENDATIONS:
        backfill = [c.id for c in catalog if c.id not in suggested]
        suggested.extend(backfill[: MIN_RECOMMENDATIONS - len(suggested)])
        logger.debug("Backfilled rule-based suggestions to %d ids", len(suggested))

    return suggested


def partition(
    profile: UserProfile,
    catalog: Sequence[CareerPathDefinition],
) -> tuple[list[str], list[str]]:
    """Split catalog ids into (recommended, other); ``other`` keeps catalog order."""
    recommended = recommend(profile, catalog)
    chosen = set(recommended)
    other = [c.id for c in catalog if c.id not in chosen]
    return recommended, other
