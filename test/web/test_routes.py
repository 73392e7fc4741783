"""Tests for the HTML and JSON routes."""

from datetime import datetime, timedelta, timezone

import pytest

INVALID_BODY = {"error": "Invalid goal. Must be 1-100 characters."}


def parse_timestamp(value: str) -> datetime:
    assert value.endswith("Z")
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestHomePage:
    def test_renders_current_goal(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert '<h2 id="current-goal">Learn Docker!</h2>' in response.text

    def test_success_flag(self, client):
        assert "Goal updated successfully!" in client.get("/?success=true").text

    def test_error_flag(self, client):
        assert "Please enter a valid goal" in client.get("/?error=invalid_goal").text

    def test_unknown_error_flag_ignored(self, client):
        response = client.get("/?error=something_else")
        assert response.status_code == 200
        assert "Please enter a valid goal" not in response.text

    def test_goal_is_escaped(self, client, store):
        store.write("<img src=x onerror=alert(1)>")
        response = client.get("/")
        assert "<img src=x" not in response.text
        assert "&lt;img src=x onerror=alert(1)&gt;" in response.text


class TestStoreGoalForm:
    def test_valid_goal_redirects_with_success(self, client, store):
        response = client.post("/store-goal", data={"goal": "Learn Rust"})

        assert response.status_code == 302
        assert response.headers["location"] == "/?success=true"
        assert store.read() == "Learn Rust"

    def test_goal_is_trimmed(self, client, store):
        client.post("/store-goal", data={"goal": "   Learn Go  "})
        assert store.read() == "Learn Go"

    @pytest.mark.parametrize("goal", ["", "     ", "g" * 101])
    def test_invalid_goal_redirects_with_error(self, client, store, goal):
        response = client.post("/store-goal", data={"goal": goal})

        assert response.status_code == 302
        assert response.headers["location"] == "/?error=invalid_goal"
        assert store.read() == "Learn Docker!"

    def test_missing_field_is_invalid(self, client, store):
        response = client.post("/store-goal", data={"other": "value"})
        assert response.headers["location"] == "/?error=invalid_goal"
        assert store.read() == "Learn Docker!"

    def test_update_visible_on_home_page_and_api(self, client):
        client.post("/store-goal", data={"goal": "Learn Rust"})

        assert '<h2 id="current-goal">Learn Rust</h2>' in client.get("/").text
        assert client.get("/api/goal").json()["goal"] == "Learn Rust"

    def test_successful_update_is_logged(self, client, recording_logger):
        client.post("/store-goal", data={"goal": "Learn Rust"})
        messages = [message for _, message, _ in recording_logger.records]
        assert "Goal updated: Learn Rust" in messages

    def test_rejection_is_not_logged_as_error(self, client, recording_logger):
        client.post("/store-goal", data={"goal": ""})
        assert "error" not in recording_logger.levels()


class TestReadGoalApi:
    def test_initial_goal(self, client):
        response = client.get("/api/goal")

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"goal", "timestamp"}
        assert data["goal"] == "Learn Docker!"
        assert abs(datetime.now(timezone.utc) - parse_timestamp(data["timestamp"])) < timedelta(seconds=5)


class TestUpdateGoalApi:
    def test_valid_goal(self, client, store):
        response = client.post("/api/goal", json={"goal": "  Learn Rust  "})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["goal"] == "Learn Rust"
        parse_timestamp(data["timestamp"])
        assert store.read() == "Learn Rust"
        assert client.get("/api/goal").json()["goal"] == "Learn Rust"

    def test_empty_goal(self, client, store):
        response = client.post("/api/goal", json={"goal": ""})

        assert response.status_code == 400
        assert response.json() == INVALID_BODY
        assert store.read() == "Learn Docker!"

    def test_too_long_goal(self, client, store):
        response = client.post("/api/goal", json={"goal": "a" * 101})

        assert response.status_code == 400
        assert response.json() == INVALID_BODY
        assert store.read() == "Learn Docker!"

    def test_exactly_one_hundred_characters(self, client, store):
        response = client.post("/api/goal", json={"goal": "b" * 100})
        assert response.status_code == 200
        assert store.read() == "b" * 100

    @pytest.mark.parametrize("payload", [{}, {"goal": None}, {"goal": 7}, ["goal"], "goal"])
    def test_malformed_payloads(self, client, store, payload):
        response = client.post("/api/goal", json=payload)

        assert response.status_code == 400
        assert response.json() == INVALID_BODY
        assert store.read() == "Learn Docker!"

    def test_body_that_is_not_json(self, client, store):
        response = client.post(
            "/api/goal",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == INVALID_BODY
        assert store.read() == "Learn Docker!"


class TestRequestLogging:
    def test_every_request_logged(self, client, recording_logger):
        client.get("/api/goal")
        client.get("/missing")

        request_logs = [kwargs for _, _, kwargs in recording_logger.records if "path" in kwargs]
        assert [(entry["method"], entry["path"]) for entry in request_logs] == [
            ("GET", "/api/goal"),
            ("GET", "/missing"),
        ]
        parse_timestamp(request_logs[0]["timestamp"])
