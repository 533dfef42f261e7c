"""Unit tests for the 'delete' command."""

from __future__ import annotations

from typer.testing import CliRunner

from tasg.commands.delete_command import app
from tasg.services import get_task_service

runner = CliRunner()


def test_delete_task():
    get_task_service().add_task("Test task")
    result = runner.invoke(app, ["1"])
    assert result.exit_code == 0, result.output
    assert "Task deleted successfully" in result.output
    assert get_task_service().list_tasks(show_all=True) == []


def test_delete_on_fresh_store():
    result = runner.invoke(app, ["1"])
    assert result.exit_code == 3
    assert "Task with ID 1 not found" in result.output


def test_delete_rejects_negative():
    result = runner.invoke(app, ["--", "-1"])
    assert result.exit_code == 2
