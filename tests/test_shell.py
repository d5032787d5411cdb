"""Tests for plaintodo/shell.py — menu loop scenarios driven by input lines."""

from plaintodo.session import LIST_COMMANDS
from plaintodo.shell import MENU_COMMANDS, Shell


def _shell(workspace, console):
    return Shell.from_workspace(workspace, console=console)


def _index_lines(workspace):
    return (workspace / "data" / "paths.txt").read_text(encoding="utf-8").splitlines()


def test_run_prints_menu_and_exits(workspace, console):
    shell = _shell(workspace, console)
    assert shell.run(["exit"]) == 0
    assert console.output.startswith(MENU_COMMANDS + "\n")
    assert shell.running is False


def test_list_enumerates_names(workspace, console):
    shell = _shell(workspace, console)
    shell.handle_line("add groceries")
    shell.handle_line("list")
    assert "1 : chores\n2 : groceries\n" in console.output


def test_add_then_exit_persists_index(workspace, console):
    shell = _shell(workspace, console)
    shell.run(["add groceries", "exit"])
    assert _index_lines(workspace) == [
        str(workspace / "todo_lists" / "chores.txt"),
        str(workspace / "todo_lists" / "groceries.txt"),
    ]


def test_end_of_input_persists_index(workspace, console):
    shell = _shell(workspace, console)
    shell.run(["add groceries"])
    assert len(_index_lines(workspace)) == 2


def test_add_uses_first_token_as_name(workspace, console):
    shell = _shell(workspace, console)
    shell.handle_line("add weekend plans")
    assert (workspace / "todo_lists" / "weekend.txt").exists()


def test_add_without_name(workspace, console):
    shell = _shell(workspace, console)
    shell.handle_line("add")
    assert "No name for the todo list was given!" in console.errors
    assert shell.registry.list_names() == ["chores"]


def test_add_duplicate_reports(workspace, console):
    shell = _shell(workspace, console)
    shell.handle_line("add chores")
    assert "Failed to create new todo list with name[chores]" in console.errors
    assert shell.registry.list_names() == ["chores"]


def test_open_missing_list(workspace, console):
    shell = _shell(workspace, console)
    shell.handle_line("open nope")
    assert shell.session is None
    assert "Failed to open list with name[nope]. This list doesn't exist" in console.errors


def test_open_without_name(workspace, console):
    shell = _shell(workspace, console)
    shell.handle_line("open")
    assert shell.session is None
    assert "Failed to open todo list with name[]" in console.errors


def test_open_renders_list(workspace, console):
    shell = _shell(workspace, console)
    shell.handle_line("open chores")
    assert shell.session is not None
    assert (
        f"Todo list: chores\n{LIST_COMMANDS}\n"
        "1\t[X] - take out trash\n2\t[ ] - water plants\n"
    ) in console.output


def test_session_scenario(workspace, console):
    shell = _shell(workspace, console)
    shell.run([
        "add groceries",
        "open groceries",
        "add milk",
        "add eggs",
        "done 1",
        "done 5",
        "close",
        "exit",
    ])
    path = workspace / "todo_lists" / "groceries.txt"
    assert path.read_text(encoding="utf-8") == "1\t[X] - milk\n2\t[ ] - eggs\n"
    assert "no entry with index[5]" in console.errors
    assert len(_index_lines(workspace)) == 2


def test_close_returns_to_menu(workspace, console):
    shell = _shell(workspace, console)
    shell.handle_line("open chores")
    assert shell.handle_line("close") is True
    assert shell.session is None
    # Back in the menu, "add" creates lists again
    shell.handle_line("add groceries")
    assert (workspace / "todo_lists" / "groceries.txt").exists()


def test_exit_inside_session_ends_program(workspace, console):
    shell = _shell(workspace, console)
    shell.run(["open chores", "exit", "add never"])
    assert shell.running is False
    assert not (workspace / "todo_lists" / "never.txt").exists()


def test_unknown_menu_command(workspace, console):
    shell = _shell(workspace, console)
    assert shell.handle_line("frobnicate now") is True
    assert f"Unknown command[frobnicate]\n{MENU_COMMANDS}" in console.output


def test_handle_line_strips_line_terminator(workspace, console):
    shell = _shell(workspace, console)
    shell.handle_line("add groceries\n")
    assert (workspace / "todo_lists" / "groceries.txt").exists()


def test_shutdown_is_safe_twice(workspace, console):
    shell = _shell(workspace, console)
    assert shell.shutdown() is True
    assert shell.shutdown() is True
    assert shell.handle_line("list") is False


def test_from_workspace_uses_settings(workspace, console):
    (workspace / "plaintodo.yaml").write_text(
        "lists_dir: lists\nindex_file: index.txt\n", encoding="utf-8"
    )
    shell = _shell(workspace, console)
    shell.run(["add groceries", "exit"])
    assert (workspace / "lists" / "groceries.txt").exists()
    assert (workspace / "index.txt").read_text(encoding="utf-8") == (
        f"{workspace / 'lists' / 'groceries.txt'}\n"
    )


def test_shell_drops_session_once_closed(workspace, console):
    shell = _shell(workspace, console)
    shell.handle_line("open chores")
    session = shell.session
    shell.handle_line("add vacuum")
    assert shell.session is session
    assert session.closed is False
    shell.handle_line("close")
    assert session.closed is True
    assert shell.session is None
    assert shell.running is True
