"""
CategoryService, including task detachment on delete.
"""

import pytest

from core.exceptions import NotFoundException
from services.category_service import CategoryService
from services.task_service import TaskService


pytestmark = pytest.mark.unit


@pytest.fixture()
def categories(db_session):
    return CategoryService(db_session)


@pytest.fixture()
def tasks(db_session):
    return TaskService(db_session)


def test_create_and_list(categories, owner_a):
    categories.create({"name": "Work", "description": "Office"}, owner_a)
    categories.create({"name": "Home"}, owner_a)

    names = [category.name for category in categories.list_all(owner_a)["data"]]

    assert sorted(names) == ["Home", "Work"]


def test_list_empty_returns_sentinel_message(categories, owner_a):
    result = categories.list_all(owner_a)

    assert result == {"message": "No categories found. Create one to get started!", "data": []}


def test_update_partial(categories, owner_a):
    category = categories.create({"name": "Work", "description": "Office"}, owner_a)

    updated = categories.update(category.id, {"name": "Job"}, owner_a)

    assert updated.name == "Job"
    assert updated.description == "Office"


@pytest.mark.ownership
def test_foreign_category_looks_missing(categories, owner_a, owner_b):
    category = categories.create({"name": "Work"}, owner_a)

    with pytest.raises(NotFoundException) as excinfo:
        categories.get_by_id(category.id, owner_b)
    assert excinfo.value.message == f"Category with id {category.id} not found"

    with pytest.raises(NotFoundException):
        categories.delete(category.id, owner_b)
    assert categories.get_by_id(category.id, owner_a).name == "Work"


def test_delete_detaches_tasks(db_session, categories, tasks, owner_a):
    category = categories.create({"name": "Work"}, owner_a)
    task = tasks.create({"title": "Report", "category_id": category.id}, owner_a)

    assert categories.delete(category.id, owner_a) == {"message": "Category deleted successfully"}

    db_session.expire_all()
    survivor = tasks.get_by_id(task.id, owner_a)
    assert survivor.category_id is None
    assert survivor.title == "Report"


def test_delete_missing_changes_nothing(db_session, categories, tasks, owner_a):
    category = categories.create({"name": "Work"}, owner_a)
    task = tasks.create({"title": "Report", "category_id": category.id}, owner_a)

    with pytest.raises(NotFoundException):
        categories.delete("missing", owner_a)

    db_session.expire_all()
    assert tasks.get_by_id(task.id, owner_a).category_id == category.id
