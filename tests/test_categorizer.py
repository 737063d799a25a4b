"""
Tests for keyword category suggestion
"""
import pytest

from complaints.categorizer import suggest_category, score_categories


class TestSuggestCategory:

    @pytest.mark.parametrize("text, expected", [
        ("The mess food tastes terrible at dinner", "Canteen"),
        ("Hostel warden ignores the cockroach problem", "Hostel"),
        ("Shuttle bus driver is always late", "Transport"),
        ("Gym equipment broken, coach absent", "Sports"),
    ])
    def test_picks_best_category(self, text, expected):
        assert suggest_category(text) == expected

    def test_no_match_returns_none(self):
        assert suggest_category("xyz qqq") is None

    def test_empty_text(self):
        assert suggest_category("") is None
        assert suggest_category(None) is None

    def test_case_insensitive(self):
        assert suggest_category("LIBRARY BOOK") == "Library"

    def test_scores_count_keyword_hits(self):
        scores = score_categories("library book")

        assert scores["Library"] == 2
        assert set(scores) == {
            "Canteen", "Hostel", "Academics", "Infrastructure", "Transport", "Library", "Sports",
        }

    def test_non_string_text_scores_nothing(self):
        assert set(score_categories(123).values()) == {0}
        assert suggest_category(["library", "book"]) is None


class TestSuggestEndpoint:
    """POST /api/complaints/suggest-category"""

    def test_returns_category(self, client, student, headers_for):
        response = client.post(
            "/api/complaints/suggest-category", json={"text": "Library is too noisy"}, headers=headers_for(student),
        )

        assert response.status_code == 200
        assert response.get_json() == {"category": "Library"}

    def test_unknown_text_returns_null(self, client, student, headers_for):
        response = client.post(
            "/api/complaints/suggest-category", json={"text": "zzz"}, headers=headers_for(student),
        )

        assert response.get_json() == {"category": None}

    def test_requires_auth(self, client):
        response = client.post("/api/complaints/suggest-category", json={"text": "bus"})

        assert response.status_code == 401

    def test_non_string_text_rejected(self, client, student, headers_for):
        response = client.post(
            "/api/complaints/suggest-category", json={"text": 5}, headers=headers_for(student),
        )

        assert response.status_code == 400
        assert response.get_json() == {"message": "text must be a string"}

    def test_array_body_rejected(self, client, student, headers_for):
        response = client.post(
            "/api/complaints/suggest-category", json=["bus"], headers=headers_for(student),
        )

        assert response.status_code == 400
        assert response.get_json() == {"message": "Invalid request body"}
