"""Unit tests for TaskService."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest

from tasg.adapters import JsonTaskRepository
from tasg.exceptions import InvalidInputError, NotFoundError, StorageError
from tasg.models import Task
from tasg.repositories import TaskRepository
from tasg.services import TaskService, get_task_service


@pytest.fixture()
def service(repo) -> TaskService:
    return TaskService(repo)


# ---------------------------------------------------------------------------
# add / id assignment
# ---------------------------------------------------------------------------


class TestAddTask:
    def test_first_task_gets_id_one(self, service):
        task = service.add_task("Buy milk")
        assert task.id == 1
        (listed,) = service.list_tasks()
        assert listed.id == 1
        assert listed.description == "Buy milk"
        assert listed.completed is False

    def test_ids_increase_with_each_add(self, service):
        ids = [service.add_task(text).id for text in ("A", "B", "C")]
        assert ids == [1, 2, 3]

    def test_description_is_stripped(self, service):
        assert service.add_task("  Call mom \n").description == "Call mom"

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_empty_description_rejected(self, service, tasks_file, text):
        with pytest.raises(InvalidInputError) as exc_info:
            service.add_task(text)
        assert str(exc_info.value) == "Invalid input - Description cannot be empty"
        assert exc_info.value.exit_code == 2
        assert not tasks_file.exists()

    def test_deleted_id_is_not_reused_while_higher_ids_live(self, service):
        service.add_task("A")
        service.add_task("B")
        service.delete_task(1)
        task = service.add_task("C")
        assert task.id == 3
        assert [t.id for t in service.list_tasks(show_all=True)] == [2, 3]

    def test_next_id_counts_completed_tasks(self, service):
        service.add_task("A")
        service.complete_task(1)
        assert service.next_task_id() == 2


# ---------------------------------------------------------------------------
# list / complete / delete / edit
# ---------------------------------------------------------------------------


class TestOperations:
    def test_complete_then_list(self, service):
        service.add_task("A")
        service.add_task("B")
        service.complete_task(1)
        assert [t.description for t in service.list_tasks()] == ["B"]
        assert [t.id for t in service.list_tasks(show_all=True)] == [1, 2]

    def test_delete_missing_on_fresh_store(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            service.delete_task(1)
        assert exc_info.value.task_id == 1
        assert exc_info.value.exit_code == 3

    def test_edit_rejects_blank_description(self, service):
        service.add_task("A")
        with pytest.raises(InvalidInputError):
            service.edit_task(1, "  ")
        assert service.list_tasks()[0].description == "A"

    def test_edit_strips_and_forwards(self):
        repo = MagicMock(spec=TaskRepository)
        TaskService(repo).edit_task(4, "  new text ")
        repo.edit.assert_called_once_with(4, "new text")

    def test_edit_without_description(self):
        repo = MagicMock(spec=TaskRepository)
        TaskService(repo).edit_task(4)
        repo.edit.assert_called_once_with(4, None)

    def test_add_passes_constructed_task(self):
        repo = MagicMock(spec=TaskRepository)
        repo.list_all.return_value = [Task.new(9, "existing")]
        task = TaskService(repo).add_task("new")
        repo.list_all.assert_called_once_with(show_all=True)
        repo.add.assert_called_once_with(task)
        assert task.id == 10


# ---------------------------------------------------------------------------
# nuke
# ---------------------------------------------------------------------------


class TestNuke:
    def test_nuke_removes_file(self, service, tasks_file):
        service.add_task("A")
        assert tasks_file.exists()
        service.nuke()
        assert not tasks_file.exists()
        assert service.list_tasks(show_all=True) == []

    def test_nuke_missing_file_is_not_an_error(self, service, tasks_file):
        assert not tasks_file.exists()
        service.nuke()

    def test_nuke_other_os_error_wrapped(self, service, tasks_file):
        service.add_task("A")
        with patch.object(type(tasks_file), "unlink", side_effect=PermissionError("nope")):
            with pytest.raises(StorageError) as exc_info:
                service.nuke()
        assert exc_info.value.exit_code == 4
        assert tasks_file.exists()


# ---------------------------------------------------------------------------
# get_task_service
# ---------------------------------------------------------------------------


def test_get_task_service_creates_file(tasks_file):
    assert not tasks_file.exists()
    svc = get_task_service()
    assert isinstance(svc.repository, JsonTaskRepository)
    assert svc.repository.path == tasks_file
    assert tasks_file.read_text(encoding="utf-8") == "[]"


def test_get_task_service_keeps_existing_file(tasks_file):
    tasks_file.parent.mkdir(parents=True)
    tasks_file.write_text(json.dumps([Task.new(1, "x").model_dump(mode="json")]), encoding="utf-8")
    svc = get_task_service()
    assert [t.id for t in svc.list_tasks()] == [1]
