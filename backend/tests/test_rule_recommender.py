from models.schemas.user_profile import UserProfile
from services.rule_recommender import MIN_RECOMMENDATIONS, partition, recommend


def test_data_profile_includes_datascience(data_profile, catalog):
    result = recommend(data_profile, catalog)
    assert "datascience" in result
    # interest rule first, then education rule, skill rules add nothing new
    assert result == ["datascience", "frontend", "backend"]


def test_empty_profile_is_pure_backfill(empty_profile, catalog):
    assert recommend(empty_profile, catalog) == ["frontend", "backend", "datascience"]


def test_deterministic(data_profile, catalog):
    assert recommend(data_profile, catalog) == recommend(data_profile, catalog)


def test_minimum_size_with_partial_match(catalog):
    profile = UserProfile(interests="Building mobile apps")
    assert recommend(profile, catalog) == ["mobile", "frontend", "backend"]


def test_no_duplicates(catalog):
    profile = UserProfile(
        interests="web development, ui/ux and cloud",
        education_field="Computer Science",
        skills=["HTML", "React", "Docker", "Python"],
    )
    result = recommend(profile, catalog)
    assert len(result) == len(set(result))
    assert result == ["frontend", "devops", "backend", "datascience"]


def test_finance_interest_adds_whole_business_track(catalog):
    profile = UserProfile(interests="personal finance")
    assert recommend(profile, catalog) == [
        "corporate-finance",
        "investment-banking",
        "marketing-strategies",
        "e-commerce",
        "supply-chain-management",
        "business-analytics",
    ]


def test_humanities_education(catalog):
    profile = UserProfile(education_field="Bachelor of Arts")
    result = recommend(profile, catalog)
    assert result[0] == "content-creator"
    assert len(result) == 6


def test_ids_outside_catalog_are_skipped(catalog):
    # "marketing" is not a catalog id; only the strategies track survives
    profile = UserProfile(skills=["Marketing"])
    assert recommend(profile, catalog) == ["marketing-strategies", "frontend", "backend"]


def test_skill_rules_use_exact_skill_names(catalog):
    # "JavaScript frameworks" is not the token "javascript"
    profile = UserProfile(skills=["JavaScript frameworks"])
    assert recommend(profile, catalog) == ["frontend", "backend", "datascience"]
    profile = UserProfile(skills=["Linux"])
    assert recommend(profile, catalog)[0] == "cybersecurity"


def test_backfill_respects_small_catalog(catalog):
    small = catalog[:2]
    assert recommend(UserProfile(), small) == ["frontend", "backend"]


def test_partition(data_profile, catalog):
    recommended, other = partition(data_profile, catalog)
    assert len(recommended) >= MIN_RECOMMENDATIONS
    assert not set(recommended) & set(other)
    assert len(recommended) + len(other) == len(catalog)
    assert other[0] == "cybersecurity"
