"""Tests for HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from app.main import create_app


@pytest.fixture
def client(container):
    app = create_app(container)
    with TestClient(app) as test_client:
        yield test_client


class TestSlashCommandEndpoint:
    """Tests for POST /slack/command."""

    def test_set_task(self, client, notifier):
        resp = client.post("/slack/command", data={"user_name": "alice", "text": "task T54"})
        assert resp.status_code == 200
        assert resp.json() == {
            "response_type": "ephemeral",
            "text": "You set the task to T54. All votes have been reset.",
            "goto_location": "",
            "attachments": None,
        }
        assert notifier.sent[0][0] == "Task set"

    def test_empty_text(self, client):
        resp = client.post("/slack/command", data={"user_name": "alice", "text": ""})
        assert resp.status_code == 400
        assert "`/planbot task T54`" in resp.json()["text"]

    def test_extra_slack_fields_ignored(self, client):
        resp = client.post(
            "/slack/command",
            data={
                "token": "xyz",
                "team_id": "T0001",
                "channel_id": "C2147483705",
                "user_name": "alice",
                "command": "/planbot",
                "text": "  results  ",
                "response_url": "https://hooks.slack.com/commands/1234/5678",
            },
        )
        assert resp.status_code == 400
        assert resp.json()["text"].startswith("No task set.")

    def test_whitespace_split(self, client, container):
        client.post("/slack/command", data={"user_name": "alice", "text": "task   T1"})
        resp = client.post("/slack/command", data={"user_name": "bob", "text": "vote\t2.5"})
        assert resp.status_code == 200
        assert container.state.task.votes[0].value == 2.5

    def test_broadcast_failure_status(self, client, notifier):
        notifier.fail_with = "invalid_token"
        resp = client.post("/slack/command", data={"user_name": "alice", "text": "task T1"})
        assert resp.status_code == 500
        assert resp.json()["text"] == "invalid_token"

    def test_missing_user_name(self, client):
        resp = client.post("/slack/command", data={"text": "task T1"})
        assert resp.status_code == 422

    def test_cleanup_closes_notifier(self, container, notifier):
        with TestClient(create_app(container)):
            pass
        assert notifier.closed


class TestHealthEndpoints:
    """Tests for health endpoints."""

    def test_health(self, client):
        resp = client.get("/health/")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"
        assert resp.json()["service"] == "planbot"

    def test_live(self, client):
        assert client.get("/health/live").json() == {"status": "alive"}

    def test_ready_reports_task(self, client):
        assert client.get("/health/ready").json() == {"status": "ready", "task": None}

        client.post("/slack/command", data={"user_name": "alice", "text": "task T1"})
        client.post("/slack/command", data={"user_name": "alice", "text": "vote 3"})
        assert client.get("/health/ready").json() == {
            "status": "ready",
            "task": {"name": "T1", "votes": [{"username": "alice", "value": 3.0}]},
        }
