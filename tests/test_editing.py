"""
Tests for editing.py - form state machine for create/update/delete
"""

from unittest.mock import patch

import pytest

from rewards_report.collection.api import ApiError
from rewards_report.editing import Editing, Idle, RecordEditor, Submitting, missing_fields


@pytest.fixture
def editor():
    return RecordEditor("regions", "region_id", required_fields=("region_name",), base_url="https://host")


class TestMissingFields:

    def test_detects_absent_null_and_blank(self):
        payload = {"a": None, "b": "  ", "c": "ok", "d": 0}
        assert missing_fields(payload, ("a", "b", "c", "d", "e")) == ["a", "b", "e"]


class TestTransitions:

    def test_starts_idle(self, editor):
        assert editor.state == Idle()

    def test_edit_then_cancel(self, editor):
        assert editor.edit({"region_id": 5, "region_name": "EMEA"}) == Editing(entity_id=5)
        assert editor.cancel() == Idle()

    def test_submit_idle_creates(self, editor):
        payload = {"region_name": "EMEA", "availability_zones": None}

        with patch("rewards_report.collection.api.create_record",
                   return_value={"region_id": 1, **payload}) as mock_create:
            result = editor.submit(payload)

        mock_create.assert_called_once_with("regions", payload, base_url="https://host")
        assert result["region_id"] == 1
        assert editor.state == Idle()

    def test_submit_editing_updates(self, editor):
        editor.edit({"region_id": 5, "region_name": "EMEA"})

        with patch("rewards_report.collection.api.update_record",
                   return_value={"region_id": 5, "region_name": "Europe"}) as mock_update:
            editor.submit({"region_name": "Europe"})

        mock_update.assert_called_once_with("regions", 5, {"region_name": "Europe"}, base_url="https://host")
        assert editor.state == Idle()

    def test_state_is_submitting_during_request(self, editor):
        seen = []

        def fake_create(resource, payload, base_url=None):
            seen.append(editor.state)
            return payload

        with patch("rewards_report.collection.api.create_record", side_effect=fake_create):
            editor.submit({"region_name": "APAC"})

        assert seen == [Submitting(entity_id=None)]

    def test_failed_submit_restores_state(self, editor):
        editor.edit({"region_id": 5})

        with patch("rewards_report.collection.api.update_record",
                   side_effect=ApiError("boom", endpoint="https://host/regions/5", status_code=500)):
            with pytest.raises(ApiError):
                editor.submit({"region_name": "Europe"})

        assert editor.state == Editing(entity_id=5)

    def test_missing_required_field_sends_nothing(self, editor):
        with patch("rewards_report.collection.api.create_record") as mock_create:
            with pytest.raises(ValueError, match="region_name"):
                editor.submit({"region_name": ""})

        mock_create.assert_not_called()
        assert editor.state == Idle()

    def test_cannot_act_while_submitting(self, editor):
        editor.state = Submitting()

        with pytest.raises(RuntimeError):
            editor.submit({"region_name": "EMEA"})
        with pytest.raises(RuntimeError):
            editor.edit({"region_id": 1})


class TestDelete:

    def test_delete_edited_record_resets(self, editor):
        editor.edit({"region_id": 5})

        with patch("rewards_report.collection.api.delete_record") as mock_delete:
            editor.delete(5)

        mock_delete.assert_called_once_with("regions", 5, base_url="https://host")
        assert editor.state == Idle()

    def test_delete_other_record_keeps_editing(self, editor):
        editor.edit({"region_id": 5})

        with patch("rewards_report.collection.api.delete_record"):
            editor.delete(6)

        assert editor.state == Editing(entity_id=5)
