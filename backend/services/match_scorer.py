"""Interest/skill match scorer used to backfill AI recommendations.

Scores each career in ``CAREER_MAPPINGS`` by keyword overlap with the
user's interests and skills plus an education bonus, keeps only careers
with BOTH an interest and a skill signal and a raw score of at least
``MIN_SCORE``, and returns the best two as ``AIRecommendation`` records.

Skill matching is bidirectional substring containment, so "java" matches
"javascript" and vice versa.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from models.schemas.ai_recommendation import AIRecommendation
from models.schemas.career_mapping import CareerMapping
from models.schemas.career_path import CareerPathDefinition
from models.schemas.user_profile import UserProfile

logger = logging.getLogger(__name__)

INTEREST_POINTS = 10
INTEREST_CAP = 30
SKILL_POINTS = 10
SKILL_CAP = 50
EDUCATION_BONUS = 15
MIN_SCORE = 40
MAX_RESULTS = 2

DISPLAY_FLOOR = 60
DISPLAY_CEILING = 95

TECHNICAL_CAREERS = frozenset({
    "frontend", "backend", "datascience", "cybersecurity", "mobile", "devops",
})
BUSINESS_CAREERS = frozenset({
    "business-analytics", "marketing-strategies", "e-commerce",
    "supply-chain-management", "corporate-finance", "investment-banking",
})
HUMANITIES_CAREERS = frozenset({
    "content-creator", "social-researcher", "cultural-analyst",
    "public-relations", "policy-development", "community-engagement",
})

# (education phrases, careers that earn the bonus); the career sets are disjoint
EDUCATION_BONUSES: tuple[tuple[tuple[str, ...], frozenset[str]], ...] = (
    (("computer", "information"), TECHNICAL_CAREERS),
    (("commerce", "business"), BUSINESS_CAREERS),
    (("arts", "humanities"), HUMANITIES_CAREERS),
)

CAREER_MAPPINGS: tuple[CareerMapping, ...] = (
    CareerMapping(
        career="frontend",
        interest_keywords=("web development", "frontend", "ui/ux", "design", "user interface"),
        skill_keywords=("html", "css", "javascript", "react", "vue", "angular", "typescript"),
        reasoning="Your combination of web development interests and frontend skills makes this an excellent career match.",
    ),
    CareerMapping(
        career="backend",
        interest_keywords=("backend", "server", "api", "database", "system architecture"),
        skill_keywords=("python", "java", "node.js", "sql", "mongodb", "postgresql", "express"),
        reasoning="Your technical interests and backend programming skills align perfectly with server-side development.",
    ),
    CareerMapping(
        career="datascience",
        interest_keywords=("data science", "machine learning", "ai", "analytics", "statistics", "research"),
        skill_keywords=("python", "r", "sql", "pandas", "numpy", "machine learning", "statistics", "data analysis"),
        reasoning="Your data-focused interests combined with analytical and programming skills make data science ideal.",
    ),
    CareerMapping(
        career="cybersecurity",
        interest_keywords=("cybersecurity", "security", "ethical hacking", "network security", "privacy"),
        skill_keywords=("linux", "networking", "security", "penetration testing", "cryptography", "firewall"),
        reasoning="Your security interests and technical skills provide a strong foundation for cybersecurity work.",
    ),
    CareerMapping(
        career="mobile",
        interest_keywords=("mobile", "app development", "android", "ios", "mobile apps"),
        skill_keywords=("react native", "flutter", "swift", "kotlin", "java", "dart", "mobile development"),
        reasoning="Your mobile development interests and relevant programming skills align with mobile app creation.",
    ),
    CareerMapping(
        career="devops",
        interest_keywords=("devops", "cloud", "automation", "infrastructure", "deployment"),
        skill_keywords=("docker", "kubernetes", "aws", "azure", "jenkins", "git", "linux", "automation"),
        reasoning="Your infrastructure interests and automation skills make DevOps an excellent career path.",
    ),
    CareerMapping(
        career="investment-banking",
        interest_keywords=("finance", "investment", "banking", "financial markets", "trading"),
        skill_keywords=("financial analysis", "excel", "financial modeling", "accounting", "economics"),
        reasoning="Your financial interests combined with analytical and business skills suit investment banking well.",
    ),
    CareerMapping(
        career="corporate-finance",
        interest_keywords=("corporate finance", "financial analysis", "budgeting", "financial planning"),
        skill_keywords=("excel", "financial modeling", "accounting", "data analysis", "financial analysis"),
        reasoning="Your finance interests and analytical skills align perfectly with corporate financial analysis.",
    ),
    CareerMapping(
        career="marketing-strategies",
        interest_keywords=("marketing", "digital marketing", "brand management", "strategy", "advertising"),
        skill_keywords=("marketing", "seo", "social media", "analytics", "content creation", "advertising"),
        reasoning="Your marketing interests and relevant skills make strategic marketing an excellent fit.",
    ),
    CareerMapping(
        career="e-commerce",
        interest_keywords=("e-commerce", "online business", "digital sales", "retail", "online marketing"),
        skill_keywords=("digital marketing", "seo", "analytics", "customer service", "online sales"),
        reasoning="Your e-commerce interests and digital skills align well with online business management.",
    ),
    CareerMapping(
        career="supply-chain-management",
        interest_keywords=("supply chain", "logistics", "operations", "inventory", "procurement"),
        skill_keywords=("data analysis", "project management", "logistics", "inventory management", "excel"),
        reasoning="Your operational interests and analytical skills suit supply chain optimization perfectly.",
    ),
    CareerMapping(
        career="business-analytics",
        interest_keywords=("business analysis", "process improvement", "data analysis", "consulting"),
        skill_keywords=("data analysis", "excel", "sql", "business analysis", "project management", "reporting"),
        reasoning="Your analytical interests and data skills make business analysis an ideal career choice.",
    ),
    CareerMapping(
        career="content-creator",
        interest_keywords=("content creation", "writing", "blogging", "social media", "video", "creative"),
        skill_keywords=("writing", "social media", "video editing", "content creation", "seo", "marketing"),
        reasoning="Your creative interests and content skills align perfectly with content creation careers.",
    ),
    CareerMapping(
        career="public-relations",
        interest_keywords=("public relations", "communications", "media relations", "marketing", "branding"),
        skill_keywords=("communication", "writing", "social media", "marketing", "public speaking"),
        reasoning="Your communication interests and relevant skills make PR an excellent career match.",
    ),
    CareerMapping(
        career="social-researcher",
        interest_keywords=("social research", "sociology", "human behavior", "research", "psychology"),
        skill_keywords=("research", "data analysis", "statistics", "survey design", "writing", "spss"),
        reasoning="Your research interests and analytical skills align well with social research methodologies.",
    ),
    CareerMapping(
        career="cultural-analyst",
        interest_keywords=("cultural analysis", "anthropology", "cultural studies", "sociology", "research"),
        skill_keywords=("research", "writing", "data analysis", "cultural studies", "qualitative analysis"),
        reasoning="Your cultural interests and research skills make cultural analysis a strong career fit.",
    ),
    CareerMapping(
        career="policy-development",
        interest_keywords=("policy", "government", "public policy", "legislation", "politics", "governance"),
        skill_keywords=("research", "data analysis", "writing", "policy analysis", "statistics", "communication"),
        reasoning="Your policy interests and analytical skills align perfectly with policy development and analysis.",
    ),
    CareerMapping(
        career="community-engagement",
        interest_keywords=("community", "volunteer", "social work", "engagement", "nonprofit", "outreach"),
        skill_keywords=("communication", "event planning", "project management", "social media", "public speaking"),
        reasoning="Your community interests and interpersonal skills make community engagement an ideal career.",
    ),
)


@dataclass(frozen=True)
class _Candidate:
    score: int
    recommendation: AIRecommendation


def skill_matches(keyword: str, user_skills: Iterable[str]) -> bool:
    """True if any (lower-cased) user skill contains or is contained in ``keyword``."""
    return any(skill in keyword or keyword in skill for skill in user_skills)


def display_score(raw_score: int) -> int:
    """Compress a raw 0-100 score into the 60-95 display range."""
    return min(DISPLAY_CEILING, DISPLAY_FLOOR + raw_score // 2)


def _education_bonus(education: str, career_id: str) -> int:
    for phrases, careers in EDUCATION_BONUSES:
        if career_id in careers and any(phrase in education for phrase in phrases):
            return EDUCATION_BONUS
    return 0


def _evaluate(
    mapping: CareerMapping,
    career: CareerPathDefinition,
    interests: str,
    education: str,
    user_skills: list[str],
) -> _Candidate | None:
    score = 0

    interest_hits = [kw for kw in mapping.interest_keywords if kw in interests]
    if interest_hits:
        score += min(INTEREST_CAP, INTEREST_POINTS * len(interest_hits))

    skill_hits = [kw for kw in mapping.skill_keywords if skill_matches(kw, user_skills)]
    if skill_hits:
        score += min(SKILL_CAP, SKILL_POINTS * len(skill_hits))

    score += _education_bonus(education, mapping.career)

    # Both signals are required, whatever the magnitude of either
    if not (interest_hits and skill_hits and score >= MIN_SCORE):
        return None

    strengths: list[str] = []
    if interest_hits:
        strengths.append("Strong interest alignment")
    if len(skill_hits) >= 2:
        strengths.append("Relevant technical skills")
    elif len(skill_hits) == 1:
        strengths.append("Some relevant skills")

    gaps = [kw for kw in mapping.skill_keywords if kw not in skill_hits][:3]

    recommendation = AIRecommendation(
        career_path=career.title,
        reasoning=mapping.reasoning,
        match_score=display_score(score),
        next_steps=[
            "Research the field thoroughly",
            f"Build projects using {' and '.join(skill_hits[:2])}",
            "Connect with professionals in the field",
        ],
        timeline_estimate=(
            "3-6 months to build proficiency"
            if len(skill_hits) >= 2
            else "6-12 months to develop required skills"
        ),
        skill_gaps=gaps or ["Industry-specific experience"],
        strength_areas=strengths or ["Interest in the field"],
    )
    return _Candidate(score=score, recommendation=recommendation)


def score(
    profile: UserProfile,
    catalog: Sequence[CareerPathDefinition],
    mappings: Sequence[CareerMapping] = CAREER_MAPPINGS,
    exclude_ids: Iterable[str] = (),
) -> list[AIRecommendation]:
    """Return up to two gated recommendations ranked by raw score, best first.

    Mappings for careers missing from ``catalog`` or listed in
    ``exclude_ids`` are skipped. Ties keep mapping-table order.
    """
    by_id = {c.id: c for c in catalog}
    excluded = set(exclude_ids)
    interests = profile.interests_lower
    education = profile.education_lower
    user_skills = profile.skills_lower

    candidates: list[_Candidate] = []
    for mapping in mappings:
        career = by_id.get(mapping.career)
        if career is None or mapping.career in excluded:
            continue
        candidate = _evaluate(mapping, career, interests, education, user_skills)
        if candidate is not None:
            candidates.append(candidate)

    candidates.sort(key=lambda c: c.score, reverse=True)
    logger.debug(
        "Match scorer retained %d of %d careers", len(candidates), len(mappings)
    )
    return [c.recommendation for c in candidates[:MAX_RESULTS]]
