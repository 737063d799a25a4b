"""
Unit tests for complaints.lifecycle called without the HTTP layer
"""
import pytest

from complaints import lifecycle
from utils.errors import Forbidden, NotFound, ValidationError


@pytest.fixture
def complaint(student):
    return lifecycle.create_complaint(student, "Broken fan", "Room 204 fan dead", "Hostel", priority="High")


class TestLifecycle:

    def test_create_sets_initial_state(self, complaint, student):
        assert complaint.status == "Submitted"
        assert complaint.priority == "High"
        assert [h.status for h in complaint.status_history] == ["Submitted"]
        assert complaint.status_history[0].changed_by_id == student.id

    def test_update_requires_admin_even_without_route(self, complaint, student):
        with pytest.raises(Forbidden):
            lifecycle.update_complaint(student, complaint.id, {"status": "Resolved"})

    def test_update_missing(self, admin):
        with pytest.raises(NotFound):
            lifecycle.update_complaint(admin, 12345, {"status": "Resolved"})

    def test_status_change_appends_exactly_one_entry(self, complaint, admin):
        lifecycle.update_complaint(admin, complaint.id, {"status": "Reviewed"})
        lifecycle.update_complaint(admin, complaint.id, {"status": "Reviewed"})

        assert [h.status for h in complaint.status_history] == ["Submitted", "Reviewed"]

    def test_blank_admin_response_clears(self, complaint, admin):
        lifecycle.update_complaint(admin, complaint.id, {"adminResponse": "Will fix"})
        lifecycle.update_complaint(admin, complaint.id, {"adminResponse": "  "})

        assert complaint.admin_response is None

    def test_null_admin_response_is_ignored(self, complaint, admin):
        lifecycle.update_complaint(admin, complaint.id, {"adminResponse": "Will fix"})
        lifecycle.update_complaint(admin, complaint.id, {"adminResponse": None})

        assert complaint.admin_response == "Will fix"

    def test_message_rejects_non_string(self, complaint, student):
        with pytest.raises(ValidationError):
            lifecycle.add_message(student, complaint.id, 42)

    def test_create_rejects_non_string_title(self, student):
        with pytest.raises(ValidationError, match="Title must be a string"):
            lifecycle.create_complaint(student, 123, "desc", "Other")

    def test_list_rejects_page_past_maximum(self, student):
        with pytest.raises(ValidationError):
            lifecycle.list_complaints(student, page=str(lifecycle.MAX_PAGE + 1))

    def test_get_checks_ownership(self, complaint, other_student):
        with pytest.raises(Forbidden):
            lifecycle.get_complaint(other_student, complaint.id)

    def test_list_limit_is_capped(self, student):
        for i in range(4):
            lifecycle.create_complaint(student, f"c{i}", "d", "Other")

        result = lifecycle.list_complaints(student, limit=50, max_limit=3)

        assert len(result["complaints"]) == 3
        assert result["totalPages"] == 2

    def test_delete_is_permanent(self, complaint, student):
        lifecycle.delete_complaint(student, complaint.id)

        with pytest.raises(NotFound):
            lifecycle.get_complaint(student, complaint.id)
