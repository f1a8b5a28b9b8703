from core import Task
from core.desktop.devtools.application.task_store import TaskStore
from core.desktop.devtools.interface import edit_handlers
from infrastructure.memory_repository import InMemoryTaskRepository


class DummyTui:
    def __init__(self, tasks=None):
        self.store = TaskStore(InMemoryTaskRepository(tasks), tasks)
        self.edit_context = ""
        self.edit_target_id = None
        self.messages = []
        self.canceled = False
        self.refreshed = 0
        self.selected = None
        self.search = None

    def _t(self, key, **kwargs):
        return key

    def run_mutation(self, operation):
        result = operation(self.store)
        self.refreshed += 1
        return result

    def select_task(self, task_id):
        self.selected = task_id

    def set_search(self, term):
        self.search = term

    def set_status_message(self, msg, ttl=None):
        self.messages.append(msg)

    def cancel_edit(self):
        self.canceled = True


def test_handlers_ignore_other_contexts():
    tui = DummyTui()
    tui.edit_context = "search"
    assert edit_handlers.handle_add(tui, "x") is False
    assert edit_handlers.handle_edit(tui, "x") is False
    assert edit_handlers.handle_due_date(tui, "x") is False
    assert edit_handlers.handle_tags(tui, "x") is False
    assert not tui.canceled


def test_handle_add_selects_new_task():
    tui = DummyTui()
    tui.edit_context = "add"
    assert edit_handlers.handle_add(tui, "water plants") is True
    assert tui.selected == tui.store.tasks[0].id
    assert tui.messages == ["MSG_ADDED"]
    assert tui.canceled and tui.refreshed == 1


def test_handle_add_empty_is_quiet():
    tui = DummyTui()
    tui.edit_context = "add"
    assert edit_handlers.handle_add(tui, "") is True
    assert tui.messages == []
    assert len(tui.store) == 0


def test_handle_edit_not_found():
    tui = DummyTui([Task(id=1, description="a")])
    tui.edit_context = "edit"
    tui.edit_target_id = 42
    edit_handlers.handle_edit(tui, "b")
    assert tui.messages == ["MSG_NOT_FOUND"]


def test_handle_due_date_outcomes():
    tui = DummyTui([Task(id=1, description="a")])
    tui.edit_context = "due_date"
    tui.edit_target_id = 1
    edit_handlers.handle_due_date(tui, "2024-02-30")
    edit_handlers.handle_due_date(tui, "soon")
    edit_handlers.handle_due_date(tui, "")
    assert tui.messages == ["MSG_DUE_UPDATED", "MSG_DUE_INVALID", "MSG_DUE_CLEARED"]
    assert tui.store.get(1).due_date is None


def test_handle_tags_replaces_list():
    tui = DummyTui([Task(id=1, description="a", tags=["x"])])
    tui.edit_context = "tags"
    tui.edit_target_id = 1
    edit_handlers.handle_tags(tui, "y, z")
    assert tui.store.get(1).tags == ["y", "z"]
    assert tui.messages == ["MSG_TAGS_UPDATED"]


def test_handle_search_sets_term():
    tui = DummyTui()
    tui.edit_context = "search"
    assert edit_handlers.handle_search(tui, "milk") is True
    assert tui.search == "milk"
    edit_handlers.handle_search(tui, "")
    assert tui.search == ""
    assert tui.messages == ["MSG_SEARCH_CLEARED"]


def test_handle_tags_target_gone():
    tui = DummyTui([Task(id=1, description="a")])
    tui.edit_context = "tags"
    tui.edit_target_id = 7
    edit_handlers.handle_tags(tui, "y")
    assert tui.messages == ["MSG_NOT_FOUND"]
    assert tui.canceled


def test_rejection_without_message_key_stays_quiet():
    tui = DummyTui()
    edit_handlers._report_failure(tui, "rejected")
    assert tui.messages == []
