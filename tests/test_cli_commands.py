import json

import pytest

from core.desktop.devtools.interface import tasks_app


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "data" / "tasks.json"


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(tasks_app, "setup_logging", lambda **kw: calls.append(kw))
    return calls


@pytest.fixture
def run(store_path, capsys):
    def _run(*argv):
        code = tasks_app.main(["--store", str(store_path), *argv])
        out, err = capsys.readouterr()
        return code, out, err

    return _run


def _document(store_path):
    return json.loads(store_path.read_text(encoding="utf-8"))


def test_add_and_list(run, store_path):
    code, out, _ = run("add", "buy", "milk")
    assert code == 0
    task_id = _document(store_path)[0]["id"]
    assert out.strip() == f"Added [{task_id}] buy milk"
    code, out, _ = run("list")
    assert code == 0
    assert out.strip() == f"{task_id}  [ ] buy milk (MED)"


def test_list_empty(run):
    code, out, _ = run("list")
    assert (code, out.strip()) == (0, "(no tasks)")


def test_add_blank_is_silent_noop(run, store_path):
    code, out, err = run("add", "   ")
    assert (code, out, err) == (0, "", "")
    assert not store_path.exists()
    code, out, _ = run("--json", "add", " ")
    body = json.loads(out)
    assert code == 0 and body["status"] == "OK" and body["payload"] == {}
    assert not store_path.exists()


def test_done_priority_due_tags_edit_rm(run, store_path):
    run("add", "pay rent")
    task_id = str(_document(store_path)[0]["id"])

    assert run("done", task_id)[0] == 0
    assert _document(store_path)[0]["completed"] is True
    code, out, _ = run("done", task_id)
    assert out.startswith("Reopened")

    code, out, _ = run("priority", task_id)
    assert out.strip() == f"Priority of [{task_id}] set to high"

    assert run("due", task_id, "2024-07-01")[0] == 0
    code, _, err = run("due", task_id, "July 1st")
    assert code == 1 and "Invalid date format" in err
    assert _document(store_path)[0]["due_date"] == "2024-07-01"
    run("due", task_id)
    assert "due_date" not in _document(store_path)[0]

    run("tags", task_id, "home, money")
    assert _document(store_path)[0]["tags"] == ["home", "money"]

    code, _, err = run("edit", task_id, " ")
    assert code == 1 and "cannot be empty" in err
    run("edit", task_id, "pay", "the", "rent")
    assert _document(store_path)[0]["description"] == "pay the rent"

    code, out, _ = run("rm", task_id)
    assert code == 0 and out.startswith("Deleted")
    assert _document(store_path) == []


def test_unknown_id_exits_1(run):
    code, _, err = run("done", "12345")
    assert code == 1
    assert "Task 12345 not found." in err


def test_list_filter_sort_search(run, store_path):
    run("add", "buy milk")
    run("add", "buy eggs")
    run("add", "walk dog")
    ids = [r["id"] for r in _document(store_path)]
    run("done", str(ids[1]))
    run("priority", str(ids[2]))  # medium -> high

    _, out, _ = run("list", "--filter", "uncompleted", "--search", "BUY")
    assert [int(line.split()[0]) for line in out.splitlines()] == [ids[0]]
    _, out, _ = run("list", "--search", "  milk ")
    assert [int(line.split()[0]) for line in out.splitlines()] == [ids[0]]

    _, out, _ = run("list", "--sort", "priority")
    assert int(out.splitlines()[0].split()[0]) == ids[2]


def test_json_output(run, store_path):
    code, out, _ = run("--json", "add", "ship it")
    body = json.loads(out)
    assert code == 0 and body["status"] == "OK" and body["command"] == "add"
    assert body["payload"]["task"]["description"] == "ship it"
    _, out, _ = run("--json", "list")
    body = json.loads(out)
    assert body["payload"]["total"] == 1
    assert body["payload"]["tasks"][0]["priority"] == "medium"


def test_corrupt_store_exits_2(run, store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text("{broken", encoding="utf-8")
    code, _, err = run("list")
    assert code == 2
    assert "Cannot read task store" in err
    assert "taskterm reset" in err
    assert store_path.read_text(encoding="utf-8") == "{broken"


def test_reset_backs_up_corrupt_store(run, store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text("{broken", encoding="utf-8")
    code, out, _ = run("reset", "--yes")
    assert code == 0
    assert _document(store_path) == []
    backups = [p for p in store_path.parent.iterdir() if ".corrupt-" in p.name]
    assert len(backups) == 1 and backups[0].read_text(encoding="utf-8") == "{broken"
    assert "Store reset" in out


def test_reset_without_confirmation_aborts(run, store_path):
    run("add", "keep me")
    code, _, err = run("reset")
    assert code == 1 and "Aborted." in err
    assert len(_document(store_path)) == 1


def test_path_command(run, store_path):
    assert run("path")[1].strip() == str(store_path)


def test_default_store_path_uses_home(isolated_home, capsys):
    assert tasks_app.main(["path"]) == 0
    assert capsys.readouterr().out.strip() == str(isolated_home / "tasks.json")


def test_version(capsys):
    assert tasks_app.main(["--version"]) == 0
    assert capsys.readouterr().out.strip()


def test_no_command_launches_tui(monkeypatch, quiet_logging):
    seen = {}

    def fake_tui(args):
        seen["theme"] = args.theme
        return 0

    monkeypatch.setattr(tasks_app, "cmd_tui", fake_tui)
    assert tasks_app.main([]) == 0
    assert "theme" in seen
    assert quiet_logging[-1]["console_level"] is None


def test_cli_mode_keeps_console_logging(run, quiet_logging):
    run("list")
    assert quiet_logging[-1]["console_level"] is not None


def test_io_error_exits_1(run, store_path, monkeypatch):
    def boom(self, tasks):
        raise OSError("read-only file system")

    monkeypatch.setattr("infrastructure.file_repository.JsonTaskRepository.save", boom)
    code, _, _ = run("add", "x")
    assert code == 1


def test_lang_command_persists_choice(run):
    import config

    code, out, _ = run("lang", "RU")
    assert (code, out.strip()) == (0, "ru")
    assert config.get_user_lang() == "ru"
    code, _, err = run("lang", "de")
    assert code == 1 and "Unknown language" in err
    assert config.get_user_lang() == "ru"
    code, out, _ = run("lang")
    assert code == 0 and out.strip() == "en"  # pytest forces English output
