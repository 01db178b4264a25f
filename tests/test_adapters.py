"""Tests for the task store adapters."""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from taskboard.adapters.common import StoreError, parse_rows
from taskboard.adapters.json_file import JsonFileStore
from taskboard.adapters.supabase_rest import SupabaseAdapter
from taskboard.core.tasks import Task, TaskStatus


@pytest.fixture
def snapshot_file(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text(
        json.dumps(
            {
                "projects": [
                    {"id": 1, "name": "Website", "archived": False},
                    {"id": 2, "name": "Old", "archived": True},
                ],
                "tasks": [
                    {"id": 10, "name": "Hero", "project_id": 1, "status": "Pending",
                     "priority": "High", "due_date": "2025-01-20"},
                    {"name": "No id", "project_id": 1},
                    {"id": 11, "name": "Odd", "project_id": 2, "status": "Blocked",
                     "priority": "Low", "due_date": "soon"},
                ],
            }
        )
    )
    return path


def mock_response(status_code=200, payload=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    resp.text = json.dumps(payload)
    return resp


class TestParseRows:
    def test_skips_malformed(self, caplog):
        rows = [{"id": 1, "name": "ok", "project_id": 1}, {"name": "missing id"}, None]
        tasks = parse_rows(rows, Task.from_row, "task")
        assert [t.id for t in tasks] == [1]
        assert "Skipping malformed task row" in caplog.text

    def test_rejects_non_list(self):
        with pytest.raises(StoreError, match="Expected a list"):
            parse_rows({"id": 1}, Task.from_row, "task")


class TestJsonFileStore:
    def test_fetch_tasks(self, snapshot_file):
        tasks = JsonFileStore(snapshot_file).fetch_tasks()
        assert [t.id for t in tasks] == [10, 11]
        assert tasks[1].status is TaskStatus.UNKNOWN
        assert tasks[1].due_date is None

    def test_fetch_projects(self, snapshot_file):
        projects = JsonFileStore(snapshot_file).fetch_projects()
        assert [(p.name, p.archived) for p in projects] == [("Website", False), ("Old", True)]

    def test_missing_file(self, tmp_path):
        with pytest.raises(StoreError, match="not found"):
            JsonFileStore(tmp_path / "nope.json").fetch_tasks()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(StoreError, match="Invalid JSON"):
            JsonFileStore(path).fetch_tasks()

    def test_missing_sections_are_empty(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("{}")
        store = JsonFileStore(path)
        assert store.fetch_tasks() == []
        assert store.fetch_projects() == []


class TestSupabaseAdapter:
    def test_fetch_tasks_request(self):
        adapter = SupabaseAdapter(url="https://demo.supabase.co/", key="anon")
        rows = [{"id": 1, "name": "Hero", "project_id": 1, "status": "Completed", "due_date": "2025-01-20"}]

        with patch.object(adapter._session, "get", return_value=mock_response(payload=rows)) as mock_get:
            tasks = adapter.fetch_tasks()

        mock_get.assert_called_once()
        url = mock_get.call_args[0][0]
        kwargs = mock_get.call_args[1]
        assert url == "https://demo.supabase.co/rest/v1/tasks"
        assert kwargs["params"] == {"select": "*"}
        assert kwargs["headers"]["apikey"] == "anon"
        assert kwargs["headers"]["Authorization"] == "Bearer anon"
        assert tasks[0].status is TaskStatus.COMPLETED

    def test_fetch_projects(self):
        adapter = SupabaseAdapter(url="https://demo.supabase.co", key="anon")
        rows = [{"id": 1, "name": "Website", "archived": False}]

        with patch.object(adapter._session, "get", return_value=mock_response(payload=rows)) as mock_get:
            projects = adapter.fetch_projects()

        assert mock_get.call_args[0][0].endswith("/rest/v1/projects")
        assert projects[0].name == "Website"

    def test_error_status_raises(self):
        adapter = SupabaseAdapter(url="https://demo.supabase.co", key="bad")
        resp = mock_response(status_code=401, payload={"message": "Invalid API key"})

        with patch.object(adapter._session, "get", return_value=resp):
            with pytest.raises(StoreError, match="401"):
                adapter.fetch_tasks()

    def test_connection_error_raises(self):
        adapter = SupabaseAdapter(url="https://demo.supabase.co", key="anon")

        with patch.object(adapter._session, "get", side_effect=requests.ConnectionError("down")):
            with pytest.raises(StoreError, match="Could not reach"):
                adapter.fetch_tasks()

    def test_invalid_json_raises(self):
        adapter = SupabaseAdapter(url="https://demo.supabase.co", key="anon")
        resp = mock_response()
        resp.json.side_effect = ValueError("no json")

        with patch.object(adapter._session, "get", return_value=resp):
            with pytest.raises(StoreError, match="Invalid JSON"):
                adapter.fetch_tasks()

    @patch("taskboard.adapters.supabase_rest.load_config")
    def test_reads_config_when_not_given(self, mock_load):
        from taskboard.config import Config

        mock_load.return_value = Config(supabase_url="https://cfg.supabase.co", supabase_key="cfg-key")
        adapter = SupabaseAdapter()
        assert adapter.url == "https://cfg.supabase.co"
        assert adapter.key == "cfg-key"
