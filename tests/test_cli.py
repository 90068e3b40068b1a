"""Location menu - scripted input through the interactive CLI."""

import pytest

from campus_guide import DirectoryService
from campus_guide.cli import build_parser, main, run_menu


@pytest.fixture
def answers(monkeypatch):
    """Feed scripted answers to input(); EOF once they run out."""
    def _feed(*values):
        remaining = iter(values)

        def _input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", _input)
    return _feed


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.admin is False
    assert args.log_level == "ERROR"
    assert args.data_file.endswith("university_data.txt")


def test_search_hit_prints_location(directory, answers, capsys):
    answers("1", "c_lab", "5")
    run_menu(directory)
    out = capsys.readouterr().out
    assert "Engineering Hall" in out
    assert "Computer Lab" in out
    assert "Goodbye" in out


def test_search_miss_prints_not_found(directory, answers, capsys):
    answers("1", "nowhere", "5")
    run_menu(directory)
    assert "Location for key 'nowhere' not found" in capsys.readouterr().out


def test_view_all_prints_total(directory, answers, capsys):
    answers("2", "5")
    run_menu(directory)
    out = capsys.readouterr().out
    assert "Total locations found:" in out
    assert "c_lab" in out
    assert "library" in out


def test_add_requires_admin(directory, answers, capsys):
    answers("3", "5")
    run_menu(directory, is_admin=False)
    assert "Authorization Required" in capsys.readouterr().out
    assert len(directory) == 2


def test_delete_requires_admin(directory, answers, capsys):
    answers("4", "5")
    run_menu(directory, is_admin=False)
    assert "Authorization Required" in capsys.readouterr().out
    assert directory.search_by_key("c_lab") is not None


def test_admin_add_reprompts_for_empty_and_duplicate_key(directory, answers, capsys):
    answers("3", "", "c_lab", "gym", "Sports Complex", "Ground", "GYM", "Indoor courts", "5")
    run_menu(directory, is_admin=True)
    out = capsys.readouterr().out
    assert "Key cannot be empty." in out
    assert "already exists" in out
    assert "Location 'gym' has been added" in out
    assert directory.search_by_key("gym").room == "GYM"


def test_admin_add_invalid_field_is_reported(directory, answers, capsys):
    answers("3", "gym", "Hall;Annex", "Ground", "GYM", "Indoor courts", "5")
    run_menu(directory, is_admin=True)
    assert "cannot contain ';'" in capsys.readouterr().out
    assert directory.search_by_key("gym") is None


def test_admin_delete(directory, answers, capsys):
    answers("4", "library", "4", "library", "5")
    run_menu(directory, is_admin=True)
    out = capsys.readouterr().out
    assert "Location 'library' has been deleted" in out
    assert "Location with key 'library' not found." in out
    assert directory.search_by_key("library") is None


def test_invalid_choice_then_eof_exits(directory, answers, capsys):
    answers("9")
    run_menu(directory)
    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Goodbye" in out


def test_eof_inside_action_exits(directory, answers, capsys):
    answers("1")
    run_menu(directory)
    assert "Goodbye" in capsys.readouterr().out


def test_main_warns_about_missing_file(data_file, answers, capsys):
    answers("5")
    main(["--data-file", str(data_file)])
    assert "not found or could not be opened" in capsys.readouterr().out


def test_main_admin_add_writes_file(data_file, answers):
    answers("3", "c_lab", "Engineering Hall", "2nd", "204", "Computer Lab", "5")
    main(["--data-file", str(data_file), "--admin"])

    reopened = DirectoryService.open(data_file)
    assert reopened.search_by_key("c_lab").description == "Computer Lab"


def test_undecodable_text_is_printed_with_replacement(data_file, answers, capsys):
    data_file.write_bytes(b"cafe;Caf\xe9 Hall;1st;1;Dining\n")
    directory = DirectoryService.open(data_file)

    answers("1", "cafe", "2", "5")
    run_menu(directory)

    out = capsys.readouterr().out
    assert "Caf\ufffd Hall" in out
    assert "Total locations found:" in out


def test_root_runner_uses_cli_entry_point():
    import campus_guide_app

    assert campus_guide_app.main is main
    assert "Root Runner" in campus_guide_app.__doc__
