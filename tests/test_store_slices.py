"""
Client state slices: confirm-then-refetch and failure handling.
"""

import pytest

from app_lib.store import AuthSlice, CategoriesSlice, TasksSlice
from tests.fakes import FakeAuthAPI, FakeResourceAPI


pytestmark = pytest.mark.store


@pytest.fixture()
def tasks_api():
    return FakeResourceAPI(empty_message="No tasks found. Create one to get started!")


@pytest.fixture()
def tasks(tasks_api):
    return TasksSlice(tasks_api)


def test_load_empty_keeps_message(tasks):
    assert tasks.load()

    assert tasks.items == []
    assert tasks.state.message == "No tasks found. Create one to get started!"
    assert tasks.state.loading is False


def test_create_confirms_then_refetches(tasks, tasks_api):
    created = tasks.create("Write report", due_date="2025-01-31")

    assert created["title"] == "Write report"
    assert tasks_api.calls == ["create", "get_all"]
    assert tasks.items == tasks_api.server
    assert tasks.state.message is None
    assert tasks.state.error is None


def test_create_omits_unset_optional_fields(tasks, tasks_api):
    tasks.create("Plain")

    assert set(tasks_api.server[0]) == {"id", "title", "description"}


def test_failed_create_leaves_cache_untouched(tasks, tasks_api):
    tasks.create("First")
    before = list(tasks.items)
    tasks_api.fail_next("create", status_code=400, detail="Invalid status: done")

    assert tasks.create("Second", status="done") is None

    assert tasks.items == before
    assert tasks.state.error == "Invalid status: done"
    assert tasks.state.loading is False
    assert tasks_api.calls[-1] == "create"


def test_update_replaces_record_after_refetch(tasks, tasks_api):
    task = tasks.create("Ship")

    tasks.set_completed(task["id"], True)

    assert tasks.find(task["id"])["completed"] is True
    assert "status" not in tasks_api.server[0]
    assert tasks_api.calls == ["create", "get_all", "update", "get_all"]


def test_update_of_uncached_record_is_appended():
    slice_ = TasksSlice(FakeResourceAPI())

    slice_.replace_or_push({"id": "9", "title": "Stray"})

    assert slice_.items == [{"id": "9", "title": "Stray"}]


def test_update_failure_uses_fallback_when_no_detail(tasks, tasks_api):
    task = tasks.create("Ship")
    tasks_api.fail_next("update", status_code=500, detail=None)

    assert tasks.update(task["id"], title="Renamed") is None

    assert tasks.state.error == "Failed to update task"
    assert tasks.find(task["id"])["title"] == "Ship"


def test_delete_removes_and_refetches(tasks, tasks_api):
    task = tasks.create("Only")

    assert tasks.delete(task["id"]) is True

    assert tasks.items == []
    assert tasks.state.message == "No tasks found. Create one to get started!"


def test_delete_of_foreign_task_fails(tasks, tasks_api):
    task = tasks.create("Mine")
    tasks_api.fail_next("delete", status_code=404, detail=f"Task with id {task['id']} not found")

    assert tasks.delete(task["id"]) is False

    assert tasks.find(task["id"]) is not None
    assert "not found" in tasks.state.error


def test_refetch_failure_keeps_confirmed_write(tasks, tasks_api):
    tasks_api.fail_next("get_all", status_code=503, detail=None)

    created = tasks.create("Written")

    assert created is not None
    assert tasks.items == [created]
    assert tasks.state.error == "Failed to fetch tasks"


def test_categories_update_sends_only_given_fields():
    api = FakeResourceAPI()
    categories = CategoriesSlice(api)
    category = categories.create("Work", "Office")

    categories.update(category["id"], name="Job")

    assert categories.find(category["id"]) == {"id": category["id"], "name": "Job", "description": "Office"}


# =============================================================================
# Auth
# =============================================================================


@pytest.fixture()
def auth_api():
    return FakeAuthAPI()


@pytest.fixture()
def auth(auth_api):
    return AuthSlice(auth_api)


def test_login_sets_user_and_flag(auth, auth_api):
    assert auth.login("a@x.com", "secret1")

    assert auth.state.is_authenticated
    assert auth.state.user["username"] == "alice"
    assert auth_api.client.token == "token-123"


def test_wrong_password_sets_error(auth):
    assert not auth.login("a@x.com", "nope")

    assert not auth.state.is_authenticated
    assert auth.state.error == "Invalid credentials"
    assert auth.state.loading is False


def test_register_does_not_authenticate(auth):
    assert auth.register("new@x.com", "newbie", "secret1")

    assert auth.state.user["email"] == "new@x.com"
    assert not auth.state.is_authenticated


def test_profile_without_token(auth):
    assert not auth.get_profile()

    assert auth.state.error == "No token found"


def test_profile_after_login(auth):
    auth.login("a@x.com", "secret1")

    assert auth.get_profile()
    assert auth.state.user["profileImage"] == ""


def test_expired_session_drops_authentication(auth, auth_api):
    auth.login("a@x.com", "secret1")
    auth_api.fail_next("get_profile", 401, "Token has expired")

    assert not auth.get_profile()

    assert not auth.state.is_authenticated
    assert auth.state.error == "Token has expired"


def test_upload_updates_cached_user(auth):
    auth.login("a@x.com", "secret1")

    assert auth.upload_profile_image("me.png", b"bytes", "image/png")

    assert auth.state.user["profileImage"] == "https://images.example.com/me.png"


def test_scrape_requires_signed_in_user(auth):
    assert not auth.scrape_linkedin("https://www.linkedin.com/in/x")

    assert auth.state.error == "Not signed in"


def test_scrape_auth_wall_counts_as_success(auth):
    auth.login("a@x.com", "secret1")

    assert auth.scrape_linkedin("https://www.linkedin.com/in/private")

    assert auth.state.user["linkedInName"] == "Authentication required"


def test_logout_resets_state(auth, auth_api):
    auth.login("a@x.com", "secret1")

    auth.logout()

    assert auth.state.user is None
    assert not auth.state.is_authenticated
    assert auth_api.client.token is None


def test_create_sends_camel_case_fields(tasks, tasks_api):
    tasks.create("Dated", due_date="2025-01-31", category_id="c1")

    record = tasks_api.server[0]
    assert record["dueDate"] == "2025-01-31"
    assert record["categoryId"] == "c1"
    assert "due_date" not in record
