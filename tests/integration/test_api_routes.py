"""
API integration tests using FastAPI TestClient with in-memory DB.
"""
import pytest
from fastapi.testclient import TestClient


@pytest.mark.integration
class TestHealthRoutes:
    def test_root_returns_healthy(self, api_client: TestClient):
        response = api_client.get("/")
        assert response.status_code == 200
        assert "Healthy" in response.json()["message"]

    def test_request_id_echoed(self, api_client: TestClient):
        response = api_client.get("/", headers={"x-request-id": "abc-123"})
        assert response.headers["x-request-id"] == "abc-123"

    def test_unknown_route_uses_error_shape(self, api_client: TestClient):
        response = api_client.get("/api/nope")
        assert response.status_code == 404
        assert "message" in response.json()


@pytest.mark.integration
class TestAuthRoutes:
    def test_register_success(self, api_client: TestClient):
        response = api_client.post(
            "/api/auth/register",
            json={"username": "u1", "password": "pw123456", "email": "u1@x.com", "displayName": "U Satu"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "u1"
        assert data["displayName"] == "U Satu"
        assert data["totalPoints"] == 0
        assert data["htmlLevel"] == data["cssLevel"] == data["jsLevel"] == 1
        assert "password" not in data and "hashedPassword" not in data

    def test_register_duplicate_username(self, api_client: TestClient):
        payload = {"username": "u1", "password": "pw", "email": "u1@x.com"}
        api_client.post("/api/auth/register", json=payload)
        response = api_client.post("/api/auth/register", json={**payload, "email": "other@x.com"})
        assert response.status_code == 409
        assert response.json()["message"] == "Username already exists"

    def test_register_duplicate_email(self, api_client: TestClient):
        response = api_client.post(
            "/api/auth/register",
            json={"username": "fresh", "password": "pw", "email": "user@malasngoding.com"},
        )
        assert response.status_code == 409
        assert response.json()["message"] == "Email already exists"

    def test_register_missing_field_is_400(self, api_client: TestClient):
        response = api_client.post("/api/auth/register", json={"username": "u2", "password": "pw"})
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid input data"
        assert body["errors"]

    def test_login_success_sets_cookie(self, api_client: TestClient):
        api_client.post("/api/auth/register", json={"username": "u1", "password": "pw123456", "email": "u1@x.com"})
        response = api_client.post("/api/auth/login", json={"username": "u1", "password": "pw123456"})
        assert response.status_code == 200
        data = response.json()
        assert data["user"]["username"] == "u1"
        assert data["user"]["totalPoints"] == 0
        assert data["accessToken"]
        assert "access_token" in response.cookies

    def test_login_wrong_password(self, api_client: TestClient):
        response = api_client.post("/api/auth/login", json={"username": "user", "password": "nope"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    def test_login_empty_fields(self, api_client: TestClient):
        response = api_client.post("/api/auth/login", json={"username": "", "password": ""})
        assert response.status_code == 400

    def test_cookie_authenticates_and_logout_clears(self, api_client: TestClient):
        api_client.post("/api/auth/login", json={"username": "user", "password": "user123"})
        assert api_client.get("/api/users/profile").status_code == 200
        response = api_client.post("/api/auth/logout")
        assert response.status_code == 200
        assert response.json()["message"] == "Logout successful"
        assert api_client.get("/api/users/profile").status_code == 401


@pytest.mark.integration
class TestUserRoutes:
    def test_profile_requires_auth(self, api_client: TestClient):
        response = api_client.get("/api/users/profile")
        assert response.status_code == 401

    def test_invalid_token_rejected(self, api_client: TestClient):
        response = api_client.get("/api/users/profile", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    def test_update_profile_keeps_unsent_fields(self, api_client: TestClient, demo_headers):
        response = api_client.patch("/api/users/profile", json={"bio": "Belajar CSS"}, headers=demo_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["bio"] == "Belajar CSS"
        assert data["displayName"] == "Demo User"

    def test_update_profile_username_conflict(self, api_client: TestClient, demo_headers):
        response = api_client.patch("/api/users/profile", json={"username": "admin"}, headers=demo_headers)
        assert response.status_code == 409

    def test_password_not_changed_by_profile_update(self, api_client: TestClient, demo_headers):
        api_client.patch("/api/users/profile", json={"password": "hacked"}, headers=demo_headers)
        ok = api_client.post("/api/auth/login", json={"username": "user", "password": "user123"})
        assert ok.status_code == 200


@pytest.mark.integration
class TestContentRoutes:
    def test_languages(self, api_client: TestClient):
        data = api_client.get("/api/languages").json()
        assert [lang["name"] for lang in data] == ["html", "css", "javascript"]

    def test_language_not_found(self, api_client: TestClient):
        response = api_client.get("/api/languages/999")
        assert response.status_code == 404
        assert response.json()["message"] == "Language not found"

    def test_modules_ordered(self, api_client: TestClient):
        data = api_client.get("/api/languages/1/modules").json()
        assert [m["levelNumber"] for m in data] == [1, 2, 3]
        assert data[0]["title"] == "HTML Basics"
        assert data[0]["pointsToEarn"] == 20

    def test_modules_by_level(self, api_client: TestClient):
        by_query = api_client.get("/api/languages/2/modules", params={"level": "medium"}).json()
        by_path = api_client.get("/api/languages/2/modules/level/medium").json()
        assert [m["title"] for m in by_query] == [m["title"] for m in by_path] == ["CSS Layout & Positioning"]

    def test_unknown_language_modules_empty(self, api_client: TestClient):
        response = api_client.get("/api/languages/999/modules")
        assert response.status_code == 200
        assert response.json() == []

    def test_lessons_and_challenges(self, api_client: TestClient):
        lessons = api_client.get("/api/modules/1/lessons").json()
        assert [lesson["sortOrder"] for lesson in lessons] == [1, 2]
        challenges = api_client.get(f"/api/lessons/{lessons[0]['id']}/challenges").json()
        assert len(challenges) == 1
        assert challenges[0]["points"] == 5
        assert len(challenges[0]["hints"]) == 3

    @pytest.mark.parametrize(
        "path,message",
        [
            ("/api/modules/999", "Module not found"),
            ("/api/lessons/999", "Lesson not found"),
            ("/api/challenges/999", "Challenge not found"),
        ],
    )
    def test_not_found(self, api_client: TestClient, path, message):
        response = api_client.get(path)
        assert response.status_code == 404
        assert response.json()["message"] == message


@pytest.mark.integration
class TestProgressRoutes:
    def test_requires_auth(self, api_client: TestClient):
        assert api_client.post("/api/progress", json={"moduleId": 1}).status_code == 401

    def test_module_completion_awards_points(self, api_client: TestClient, auth_headers):
        response = api_client.post(
            "/api/progress",
            json={"moduleId": 1, "completed": True, "pointsEarned": 20},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["kind"] == "module"
        profile = api_client.get("/api/users/profile", headers=auth_headers).json()
        assert profile["htmlLevel"] == 1
        assert profile["totalPoints"] == 20

    def test_higher_module_sets_level(self, api_client: TestClient, auth_headers):
        api_client.post(
            "/api/progress",
            json={"moduleId": 6, "completed": True, "pointsEarned": 50},
            headers=auth_headers,
        )
        profile = api_client.get("/api/users/profile", headers=auth_headers).json()
        assert profile["cssLevel"] == 3

    def test_same_challenge_twice_adds_points_twice(self, api_client: TestClient, auth_headers):
        body = {"moduleId": 1, "lessonId": 1, "challengeId": 1, "completed": True, "pointsEarned": 5, "code": "<h1>x</h1>"}
        first = api_client.post("/api/progress", json=body, headers=auth_headers).json()
        second = api_client.post("/api/progress", json=body, headers=auth_headers).json()
        assert first["id"] == second["id"]
        assert second["kind"] == "challenge"
        assert api_client.get("/api/users/profile", headers=auth_headers).json()["totalPoints"] == 10

    def test_target_progress_defaults(self, api_client: TestClient, auth_headers):
        lesson = api_client.get("/api/lessons/1/progress", headers=auth_headers).json()
        challenge = api_client.get("/api/challenges/1/progress", headers=auth_headers).json()
        assert lesson == {"completed": False, "pointsEarned": 0}
        assert challenge == {"completed": False, "pointsEarned": 0}

    def test_lesson_progress_after_write(self, api_client: TestClient, auth_headers):
        api_client.post("/api/progress", json={"moduleId": 1, "lessonId": 2, "completed": True}, headers=auth_headers)
        data = api_client.get("/api/lessons/2/progress", headers=auth_headers).json()
        assert data["completed"] is True
        assert data["lessonId"] == 2

    def test_list_progress_filtered_by_module(self, api_client: TestClient, auth_headers):
        api_client.post("/api/progress", json={"moduleId": 1}, headers=auth_headers)
        api_client.post("/api/progress", json={"moduleId": 2}, headers=auth_headers)
        everything = api_client.get("/api/progress", headers=auth_headers).json()
        only_two = api_client.get("/api/progress", params={"moduleId": 2}, headers=auth_headers).json()
        assert len(everything) == 2
        assert [p["moduleId"] for p in only_two] == [2]

    def test_progress_is_per_user(self, api_client: TestClient, auth_headers, demo_headers):
        api_client.post("/api/progress", json={"moduleId": 1}, headers=auth_headers)
        assert api_client.get("/api/progress", headers=demo_headers).json() == []

    def test_unknown_module_404(self, api_client: TestClient, auth_headers):
        response = api_client.post("/api/progress", json={"moduleId": 999}, headers=auth_headers)
        assert response.status_code == 404

    def test_lesson_from_other_module_rejected(self, api_client: TestClient, auth_headers):
        response = api_client.post(
            "/api/progress",
            json={"moduleId": 2, "lessonId": 1, "completed": True},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Lesson does not belong to module"
        assert api_client.get("/api/progress", headers=auth_headers).json() == []

    def test_challenge_from_other_lesson_rejected(self, api_client: TestClient, auth_headers):
        response = api_client.post(
            "/api/progress",
            json={"moduleId": 1, "lessonId": 2, "challengeId": 1},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Challenge does not belong to lesson"

    def test_challenge_from_other_module_rejected(self, api_client: TestClient, auth_headers):
        response = api_client.post(
            "/api/progress",
            json={"moduleId": 3, "challengeId": 1, "completed": True, "pointsEarned": 5},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert api_client.get("/api/users/profile", headers=auth_headers).json()["totalPoints"] == 0

    def test_negative_points_rejected(self, api_client: TestClient, auth_headers):
        response = api_client.post("/api/progress", json={"moduleId": 1, "pointsEarned": -5}, headers=auth_headers)
        assert response.status_code == 400


@pytest.mark.integration
class TestBadgeRoutes:
    def test_catalogue(self, api_client: TestClient):
        assert len(api_client.get("/api/badges").json()) == 4
        general = api_client.get("/api/badges/category/general").json()
        assert [b["title"] for b in general] == ["Code Master"]

    def test_award_twice_returns_same_grant(self, api_client: TestClient, auth_headers):
        first = api_client.post("/api/user/badges", json={"badgeId": 1}, headers=auth_headers)
        second = api_client.post("/api/user/badges", json={"badgeId": 1}, headers=auth_headers)
        assert first.status_code == second.status_code == 201
        assert first.json()["id"] == second.json()["id"]
        assert first.json()["earnedAt"] == second.json()["earnedAt"]
        assert len(api_client.get("/api/user/badges", headers=auth_headers).json()) == 1

    def test_award_requires_badge_id(self, api_client: TestClient, auth_headers):
        response = api_client.post("/api/user/badges", json={}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Badge ID is required"

    def test_award_unknown_badge(self, api_client: TestClient, auth_headers):
        response = api_client.post("/api/user/badges", json={"badgeId": 999}, headers=auth_headers)
        assert response.status_code == 404

    def test_status_reflects_points(self, api_client: TestClient, auth_headers):
        api_client.post(
            "/api/progress",
            json={"moduleId": 1, "completed": True, "pointsEarned": 20},
            headers=auth_headers,
        )
        statuses = api_client.get("/api/user/badges/status", headers=auth_headers).json()
        by_title = {s["badge"]["title"]: s for s in statuses}
        assert by_title["HTML Beginner"]["unlocked"] is True
        assert by_title["HTML Beginner"]["earned"] is False
        assert by_title["Code Master"]["unlocked"] is False
