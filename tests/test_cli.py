"""Tests for the menu-driven command-line interface."""

import pytest

from registrar.cli import main


@pytest.fixture
def answers(monkeypatch):
    """Feed scripted answers to input(); running out behaves like end of input."""
    queue = []

    def fake_input(prompt=""):
        if not queue:
            raise EOFError
        return queue.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    return queue


@pytest.fixture
def data_env(tmp_path, monkeypatch):
    monkeypatch.setenv("REGISTRAR_DATA_DIR", str(tmp_path / "data"))
    return tmp_path / "data"


class TestMain:
    """Tests for main."""

    def test_exit_choice(self, answers, data_env, capsys):
        answers.append("9")
        main()
        assert "Goodbye" in capsys.readouterr().out
        assert (data_env / "backups").is_dir()

    def test_end_of_input_exits(self, answers, data_env, capsys):
        main()
        assert "Goodbye" in capsys.readouterr().out

    def test_add_and_list_student(self, answers, data_env, capsys):
        answers.extend([
            "1", "1", "REG001", "Ada Lovelace", "ada@example.edu",
            "1", "2",
            "9",
        ])
        main()
        out = capsys.readouterr().out
        assert "Added STU0001: Ada Lovelace" in out
        assert "STU0001" in out

    def test_registry_errors_keep_the_menu_running(self, answers, data_env, capsys):
        answers.extend([
            "3", "1", "STU9999", "CSE101", "",
            "9",
        ])
        main()
        out = capsys.readouterr().out
        assert "Student not found or inactive: STU9999" in out
        assert "Goodbye" in out

    def test_invalid_setting_stops_with_message(self, answers, data_env, monkeypatch, capsys):
        monkeypatch.setenv("REGISTRAR_MAX_CREDITS_PER_SEMESTER", "eighteen")
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 2
        assert "Invalid REGISTRAR_* setting" in capsys.readouterr().out
