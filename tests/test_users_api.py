"""
Profile, profile image and LinkedIn enrichment routes.
"""

import pytest

from tests.conftest import register, login_headers


pytestmark = pytest.mark.api


def profile(client, headers):
    response = client.get("/users/profile", headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


def test_get_profile_has_empty_optional_fields(client, alice):
    body = profile(client, alice)

    assert body["email"] == "a@x.com"
    assert body["username"] == "alice"
    assert body["profileImage"] == ""
    assert body["linkedInName"] == ""
    assert "password_hash" not in body


def test_profile_uses_camel_case_wire_names(client, alice):
    body = profile(client, alice)

    assert {"profileImage", "linkedInUrl", "linkedInName", "linkedInProfileUrl", "linkedInProfileImage", "createdAt"} <= set(body)
    assert "profile_image" not in body
    assert "linkedin_url" not in body


def test_update_profile(client, alice):
    response = client.patch("/users/profile", json={"username": "alicia"}, headers=alice)

    assert response.status_code == 200
    assert response.json()["message"] == "User profile updated successfully"
    assert response.json()["user"]["username"] == "alicia"
    assert response.json()["user"]["email"] == "a@x.com"


def test_update_profile_to_taken_email_conflicts(client, alice, bob):
    response = client.patch("/users/profile", json={"email": "b@x.com"}, headers=alice)

    assert response.status_code == 409
    assert profile(client, alice)["email"] == "a@x.com"


def test_update_profile_with_no_fields(client, alice):
    response = client.patch("/users/profile", json={}, headers=alice)

    assert response.status_code == 400


def test_upload_profile_image(client, alice, image_host):
    response = client.post(
        "/users/profile/upload",
        files={"file": ("me.png", b"\x89PNG fake", "image/png")},
        headers=alice,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Profile image updated successfully"
    assert body["profileImage"] == "https://images.example.com/profile_images/me.png"
    assert image_host.uploads[0]["content"] == b"\x89PNG fake"
    assert image_host.uploads[0]["content_type"] == "image/png"
    assert profile(client, alice)["profileImage"] == body["profileImage"]


def test_upload_without_file_is_not_found(client, alice, image_host):
    response = client.post("/users/profile/upload", headers=alice)

    assert response.status_code == 404
    assert response.json()["detail"] == "No file uploaded"
    assert image_host.uploads == []


def test_upload_failure_keeps_previous_image(client, alice, image_host):
    image_host.fail = True

    response = client.post("/users/profile/upload", files={"file": ("me.png", b"data", "image/png")}, headers=alice)

    assert response.status_code == 409
    assert profile(client, alice)["profileImage"] == ""


def test_scrape_fills_linkedin_fields(client, scraper):
    user = register(client, "c@x.com", "carol")
    headers = login_headers(client, "c@x.com")
    url = "https://www.linkedin.com/in/alice"

    response = client.post(f"/users/linkedin/scrape/{user['id']}", json={"linkedInUrl": url}, headers=headers)

    assert response.status_code == 200
    updated = response.json()["user"]
    assert updated["linkedInName"] == "Alice Example"
    assert updated["linkedInProfileImage"] == "https://media.example.com/alice.jpg"
    assert updated["linkedInProfileUrl"] == "https://www.linkedin.com/in/alice/"
    assert updated["linkedInUrl"] == url
    assert scraper.calls == [url]


def test_scrape_auth_wall_stores_placeholder(client, scraper):
    user = register(client, "c@x.com", "carol")
    headers = login_headers(client, "c@x.com")
    url = "https://www.linkedin.com/in/private"
    scraper.hit_auth_wall()

    response = client.post(f"/users/linkedin/scrape/{user['id']}", json={"linkedInUrl": url}, headers=headers)

    assert response.status_code == 200
    updated = response.json()["user"]
    assert updated["linkedInName"] == "Authentication required"
    assert updated["linkedInProfileUrl"] == url
    assert updated["linkedInProfileImage"] == ""


def test_scrape_failure_is_conflict(client, scraper):
    user = register(client, "c@x.com", "carol")
    headers = login_headers(client, "c@x.com")
    scraper.fail_with("navigation timed out")

    response = client.post(
        f"/users/linkedin/scrape/{user['id']}",
        json={"linkedInUrl": "https://www.linkedin.com/in/x"},
        headers=headers,
    )

    assert response.status_code == 409
    assert profile(client, headers)["linkedInName"] == ""


@pytest.mark.ownership
def test_scrape_for_another_user_is_not_found(client, scraper):
    victim = register(client, "v@x.com", "victim")
    register(client, "m@x.com", "mallory")
    headers = login_headers(client, "m@x.com")

    response = client.post(
        f"/users/linkedin/scrape/{victim['id']}",
        json={"linkedInUrl": "https://www.linkedin.com/in/x"},
        headers=headers,
    )

    assert response.status_code == 404
    assert scraper.calls == []
