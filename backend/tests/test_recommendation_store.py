"""Tests for services.recommendation_store - Supabase fluent builder mocked out."""

from unittest.mock import MagicMock, patch

from config import settings
from models.schemas.ai_recommendation import AIRecommendation
from services import recommendation_store as store

USER_ID = "aaaaaaaa-1111-2222-3333-bbbbbbbbbbbb"

STORED = [
    {
        "careerPath": "Data Scientist",
        "reasoning": "Good fit.",
        "matchScore": 87,
        "nextSteps": ["Research the field thoroughly"],
        "timelineEstimate": "3-6 months to build proficiency",
        "skillGaps": ["r"],
        "strengthAreas": ["Strong interest alignment"],
    }
]


def _select_chain(client: MagicMock) -> MagicMock:
    return client.table.return_value.select.return_value.eq.return_value


class TestGetUserProfile:
    def test_returns_profile(self, make_execute):
        client = MagicMock()
        _select_chain(client).execute.return_value = make_execute([
            {
                "id": USER_ID,
                "name": "Asha",
                "email": "asha@example.com",
                "age": 21,
                "gender": "female",
                "education_field": "BSc Computer Science",
                "study_year": 3,
                "skills": ["Python"],
                "interests": None,
                "skill_expertise": {"Python": "advanced"},
                "created_at": "2026-01-01T00:00:00Z",
            }
        ])

        profile = store.get_user_profile(client, USER_ID)

        client.table.assert_called_once_with(settings.profiles_table)
        _select_chain(client).execute.assert_called_once()
        client.table.return_value.select.return_value.eq.assert_called_once_with("id", USER_ID)
        assert profile.name == "Asha"
        assert profile.interests == ""
        assert profile.expertise_for("Python") == "advanced"

    def test_missing_row(self, make_execute):
        client = MagicMock()
        _select_chain(client).execute.return_value = make_execute([])
        assert store.get_user_profile(client, USER_ID) is None


class TestGetStoredRecommendations:
    def _chain(self, client: MagicMock) -> MagicMock:
        return _select_chain(client).order.return_value.limit.return_value

    def test_most_recent_first(self, make_execute):
        client = MagicMock()
        self._chain(client).execute.return_value = make_execute([{"recommendations": STORED}])

        result = store.get_stored_recommendations(client, USER_ID)

        client.table.assert_called_once_with(settings.recommendations_table)
        _select_chain(client).order.assert_called_once_with("created_at", desc=True)
        _select_chain(client).order.return_value.limit.assert_called_once_with(1)
        assert [r.career_path for r in result] == ["Data Scientist"]

    def test_none_when_no_rows(self, make_execute):
        client = MagicMock()
        self._chain(client).execute.return_value = make_execute([])
        assert store.get_stored_recommendations(client, USER_ID) is None

    def test_none_when_empty_list_stored(self, make_execute):
        client = MagicMock()
        self._chain(client).execute.return_value = make_execute([{"recommendations": []}])
        assert store.get_stored_recommendations(client, USER_ID) is None

    def test_invalid_payload_treated_as_absent(self, make_execute):
        client = MagicMock()
        self._chain(client).execute.return_value = make_execute([{"recommendations": [{"careerPath": "X"}]}])
        assert store.get_stored_recommendations(client, USER_ID) is None


class TestStoreRecommendations:
    def test_inserts_camel_case_payload(self):
        client = MagicMock()
        recs = [AIRecommendation.model_validate(r) for r in STORED]

        assert store.store_recommendations(client, USER_ID, recs) is True

        payload = client.table.return_value.insert.call_args[0][0]
        assert payload == {"user_id": USER_ID, "recommendations": STORED}

    def test_insert_failure_returns_false(self):
        client = MagicMock()
        client.table.return_value.insert.return_value.execute.side_effect = RuntimeError("RLS violation")
        recs = [AIRecommendation.model_validate(r) for r in STORED]
        assert store.store_recommendations(client, USER_ID, recs) is False


class TestGetClient:
    def test_unconfigured(self):
        with patch.object(settings, "supabase_url", ""):
            assert store.get_client() is None

    def test_creates_client_once(self):
        with (
            patch.object(settings, "supabase_url", "https://example.supabase.co"),
            patch.object(settings, "supabase_key", "anon-key"),
            patch.object(store, "_client", None),
            patch.object(store, "create_client", return_value=MagicMock()) as mock_create,
        ):
            first = store.get_client()
            second = store.get_client()
        assert first is second
        mock_create.assert_called_once_with("https://example.supabase.co", "anon-key")
