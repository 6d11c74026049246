"""Prompt template for the career recommendation call."""

from models.schemas.user_profile import UserProfile


def format_skills(profile: UserProfile) -> str:
    """Skills with their proficiency inline, e.g. ``React (intermediate)``."""
    return ", ".join(f"{skill} ({profile.expertise_for(skill)})" for skill in profile.skills)


def build_recommendation_prompt(profile: UserProfile, career_titles: list[str]) -> str:
    """Ask for exactly three recommendations chosen from ``career_titles``."""
    titles = ", ".join(career_titles)

    return f"""You are a career guidance expert. Based on the following user profile, provide 3 personalized career recommendations.

USER PROFILE:
- Name: {profile.name}
- Age: {profile.age}
- Education: {profile.education_field} (Year {profile.study_year})
- Current Skills with Expertise: {format_skills(profile)}
- Interests: {profile.interests}
- Career Goals: {profile.career_goals}
- Experience Level: {profile.experience_level}
- Available Learning Time: {profile.availability_hours_per_week} hours/week

CONSIDER:
1. The user's current skills AND their expertise levels (beginner, intermediate, advanced, expert)
2. Their interests and career goals
3. Their available time for learning
4. Their education background
5. Realistic timelines based on their skill expertise levels
6. Which skills they are already strong in vs which they need to develop

Choose ONLY from these career paths, using the title exactly as written:
{titles}

Respond with ONLY a JSON array (no markdown, no code fences) in this exact structure:
[
  {{
    "careerPath": "<one of the career path titles above>",
    "reasoning": "<why this path fits the user based on their skill expertise levels, 2-3 sentences>",
    "matchScore": <integer 0-100>,
    "nextSteps": ["<step 1>", "<step 2>", "<step 3>"],
    "timelineEstimate": "<e.g. 6-12 months to job readiness>",
    "skillGaps": ["<skill they need to learn>", "<another skill gap>"],
    "strengthAreas": ["<their strongest skills for this path>"]
  }}
]"""
