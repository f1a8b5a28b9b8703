#!/usr/bin/env python3
"""Unit tests for tui_app module - TaskTrackerTUI class methods."""

import time
from types import SimpleNamespace

import pytest
from prompt_toolkit.keys import Keys

from core import FilterMode, Priority, SortMode, Task, ViewSettings
from core.desktop.devtools.application.task_store import TaskStore
from core.desktop.devtools.interface.tui_app import TaskTrackerTUI
from infrastructure.memory_repository import InMemoryTaskRepository


def _text(formatted):
    return "".join(fragment[1] for fragment in formatted)


def _tasks():
    return [
        Task(id=1, description="buy milk", created_at="2024-01-02T00:00:00.000Z", priority=Priority.LOW),
        Task(id=2, description="file taxes", created_at="2024-01-01T00:00:00.000Z", priority=Priority.HIGH, due_date="2024-04-15"),
        Task(id=3, description="call mom", created_at="2024-01-03T00:00:00.000Z", tags=["family"]),
    ]


@pytest.fixture
def repo():
    return InMemoryTaskRepository(_tasks())


@pytest.fixture
def tui(repo, monkeypatch):
    monkeypatch.setattr(TaskTrackerTUI, "get_terminal_width", staticmethod(lambda: 80))
    monkeypatch.setattr(TaskTrackerTUI, "get_terminal_height", staticmethod(lambda: 24))
    return TaskTrackerTUI(TaskStore.open(repo))


def _press(tui, key):
    bindings = tui.app.key_bindings.get_bindings_for_keys((key,))
    active = [b for b in bindings if b.filter()]
    assert active, f"no active binding for {key!r}"
    active[-1].handler(SimpleNamespace(app=tui.app))


class TestTaskTrackerTUIHelpers:
    def test_get_theme_palette_unknown_falls_back(self):
        assert TaskTrackerTUI.get_theme_palette("nope") == TaskTrackerTUI.get_theme_palette("dark-olive")

    def test_build_style(self):
        assert TaskTrackerTUI.build_style("dark-olive") is not None

    def test_unknown_theme_name_is_replaced(self, repo):
        tui = TaskTrackerTUI(TaskStore.open(repo), theme="neon")
        assert tui.theme_name == "dark-olive"


class TestKeyBindings:
    def test_escape_binding_is_eager(self, tui):
        esc_bindings = [b for b in tui.app.key_bindings.bindings if Keys.Escape in b.keys]
        assert esc_bindings
        assert all(b.eager() for b in esc_bindings)

    def test_escape_does_not_wait_for_sequences(self, tui):
        assert tui.app.key_bindings.timeout == 0

    def test_russian_layout_aliases(self, tui):
        for latin, cyrillic in [("a", "ф"), ("c", "с"), ("d", "в"), ("q", "й")]:
            assert tui.app.key_bindings.get_bindings_for_keys((latin,))
            assert tui.app.key_bindings.get_bindings_for_keys((cyrillic,))

    def test_letter_keys_inactive_while_editing(self, tui):
        tui.open_add_dialog()
        bindings = tui.app.key_bindings.get_bindings_for_keys(("d",))
        assert not any(b.filter() for b in bindings)

    def test_c_key_toggles_selected(self, tui):
        _press(tui, "c")
        assert tui.store.get(1).completed is True

    def test_escape_closes_help_before_anything_else(self, tui):
        tui.toggle_help()
        _press(tui, Keys.Escape)
        assert tui.help_visible is False

    def test_escape_cancels_dialog(self, tui):
        tui.open_edit_dialog()
        _press(tui, Keys.Escape)
        assert tui.editing_mode is False
        assert tui.store.get(1).description == "buy milk"


class TestSelectionResolution:
    def test_toggle_goes_through_sorted_row(self, tui):
        tui.settings = ViewSettings(sort_mode=SortMode.PRIORITY)
        tui.refresh()
        assert [row.task.id for row in tui.rows] == [2, 1, 3]
        tui.selected_index = 0
        tui.toggle_selected()
        assert tui.store.get(2).completed is True
        assert tui.store.get(1).completed is False
        assert tui.status_message == "Task completed!"

    def test_filtered_row_disappears_and_selection_clamps(self, tui):
        tui.settings = ViewSettings(filter_mode=FilterMode.UNCOMPLETED)
        tui.refresh()
        tui.selected_index = 2
        tui.toggle_selected()
        assert [row.task.id for row in tui.rows] == [1, 2]
        assert tui.selected_index == 1

    def test_delete_recomputes_rows(self, tui, repo):
        tui.selected_index = 1
        tui.delete_selected()
        assert [row.task.id for row in tui.rows] == [1, 3]
        assert [r["id"] for r in repo.document] == [1, 3]
        assert tui.status_message == "Task deleted!"
        for row in tui.rows:
            assert tui.store.task_at(row.index).id == row.task.id

    def test_stale_row_is_refused(self, tui):
        tui.store.delete(1)  # mutate behind the surface's back
        assert tui.selected_task() is None
        assert [row.task.id for row in tui.rows] == [2, 3]

    def test_cycle_priority_message(self, tui):
        tui.cycle_priority_selected()
        assert tui.store.get(1).priority is Priority.MEDIUM
        assert tui.status_message == "Priority set to: medium"

    def test_actions_on_empty_list_are_ignored(self):
        tui = TaskTrackerTUI(TaskStore.open(InMemoryTaskRepository()))
        tui.toggle_selected()
        tui.delete_selected()
        tui.open_edit_dialog()
        assert tui.editing_mode is False
        assert tui.status_message == ""


class TestDialogs:
    def test_add_dialog_creates_and_selects(self, tui):
        tui.open_add_dialog()
        tui.edit_buffer.text = "  new thing  "
        tui.save_edit()
        assert tui.editing_mode is False
        assert tui.store.tasks[-1].description == "new thing"
        assert tui.rows[tui.selected_index].task.description == "new thing"
        assert tui.status_message == "Task added!"

    def test_add_dialog_empty_is_silent(self, tui, repo):
        tui.open_add_dialog()
        tui.edit_buffer.text = "   "
        tui.save_edit()
        assert len(tui.store) == 3
        assert repo.save_count == 0
        assert tui.status_message == ""

    def test_edit_prefills_and_rejects_empty(self, tui):
        tui.open_edit_dialog()
        assert tui.edit_buffer.text == "buy milk"
        assert tui.edit_target_id == 1
        tui.edit_buffer.text = ""
        tui.save_edit()
        assert tui.store.get(1).description == "buy milk"
        assert tui.status_message == "Description cannot be empty"

    def test_due_date_invalid_and_cleared(self, tui):
        tui.selected_index = 1
        tui.open_due_date_dialog()
        assert tui.edit_buffer.text == "2024-04-15"
        tui.edit_buffer.text = "15/04/2024"
        tui.save_edit()
        assert tui.status_message == "Invalid date format! Use YYYY-MM-DD"
        assert tui.store.get(2).due_date == "2024-04-15"
        tui.open_due_date_dialog()
        tui.edit_buffer.text = ""
        tui.save_edit()
        assert tui.store.get(2).due_date is None
        assert tui.status_message == "Due date cleared!"

    def test_tags_prefill_joined_by_comma(self, tui):
        tui.selected_index = 2
        tui.open_tags_dialog()
        assert tui.edit_buffer.text == "family"
        tui.edit_buffer.text = "family, phone"
        tui.save_edit()
        assert tui.store.get(3).tags == ["family", "phone"]
        assert tui.status_message == "Tags updated!"

    def test_search_dialog_sets_and_clears_term(self, tui):
        tui.open_search_dialog()
        tui.edit_buffer.text = "MILK"
        tui.save_edit()
        assert tui.settings.search == "MILK"
        assert [row.task.id for row in tui.rows] == [1]
        tui.open_search_dialog()
        assert tui.edit_buffer.text == "MILK"
        tui.edit_buffer.text = ""
        tui.save_edit()
        assert tui.settings.search == ""
        assert len(tui.rows) == 3

    def test_target_deleted_while_dialog_open(self, tui):
        tui.open_edit_dialog()
        tui.store.delete(1)
        tui.edit_buffer.text = "renamed"
        tui.save_edit()
        assert tui.status_message == "Task no longer exists"
        assert tui.store.get(1) is None


class TestModesAndStatus:
    def test_filter_and_sort_cycle_messages(self, tui):
        tui.cycle_filter_mode()
        assert tui.settings.filter_mode is FilterMode.COMPLETED
        assert tui.status_message == "Filter: completed"
        assert tui.rows == []
        tui.cycle_sort_mode()
        assert tui.status_message == "Sort: priority"

    def test_status_line(self, tui):
        tui.store.toggle_complete(3)
        tui.refresh()
        text = _text(tui.get_status_text())
        assert "Tasks: 3 | Completed: 1 | Filter: all | Sort: default" in text

    def test_status_message_replaces_line_until_expiry(self, tui):
        tui.set_status_message("hello", ttl=60)
        assert _text(tui.get_status_text()).strip() == "hello"
        tui.status_message_expires = time.time() - 1
        assert "Tasks: 3" in _text(tui.get_status_text())
        assert tui.status_message == ""

    def test_save_failure_is_reported_and_state_kept(self, tui, repo, monkeypatch):
        def boom(tasks):
            raise OSError("disk full")

        monkeypatch.setattr(repo, "save", boom)
        tui.toggle_selected()
        assert tui.store.get(1).completed is False
        assert tui.status_message.startswith("Could not save tasks")

    def test_footer_switches_to_dialog_hint(self, tui):
        assert '"a" add' in _text(tui.get_footer_text())
        tui.open_add_dialog()
        assert _text(tui.get_footer_text()) == "Enter - save | Esc - cancel"
        assert tui.edit_title_key() == "DIALOG_ADD"
