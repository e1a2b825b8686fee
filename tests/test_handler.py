import os

import pytest

from dupfinder.handler import DuplicateAction, DuplicateHandler


@pytest.fixture
def handler():
    return DuplicateHandler()


def _make(path, content=b"same content"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


def _feed_input(monkeypatch, answers):
    answers = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_delete_existing_file(handler, tmp_path, capsys):
    target = _make(tmp_path / "a.txt")
    assert handler.delete_duplicate(str(target)) is True
    assert not target.exists()
    assert f"Deleted: {target}" in capsys.readouterr().out


def test_delete_missing_file_reports_error(handler, tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert handler.delete_duplicate(str(missing)) is False
    assert f"Error deleting file: {missing}" in capsys.readouterr().err


def test_move_creates_target_directory(handler, tmp_path):
    source = _make(tmp_path / "a.txt", b"data")
    target = tmp_path / "out" / "deep"
    assert handler.move_duplicate(str(source), str(target)) is True
    assert not source.exists()
    assert (target / "a.txt").read_bytes() == b"data"


def test_move_resolves_name_conflicts(handler, tmp_path):
    target = tmp_path / "out"
    _make(target / "a.txt", b"existing")
    _make(target / "a_1.txt", b"existing too")
    source = _make(tmp_path / "src" / "a.txt", b"moved")
    assert handler.move_duplicate(str(source), str(target)) is True
    assert (target / "a_2.txt").read_bytes() == b"moved"
    assert (target / "a.txt").read_bytes() == b"existing"


def test_move_missing_file_fails(handler, tmp_path, capsys):
    assert handler.move_duplicate(str(tmp_path / "nope.txt"), str(tmp_path / "out")) is False
    assert "Exception moving file" in capsys.readouterr().err


def test_create_hard_link_shares_inode(handler, tmp_path):
    original = _make(tmp_path / "orig.txt", b"linked")
    link = tmp_path / "links" / "copy.txt"
    assert handler.create_hard_link(str(original), str(link)) is True
    assert os.stat(original).st_ino == os.stat(link).st_ino
    assert link.read_bytes() == b"linked"


def test_create_hard_link_fails_when_link_exists(handler, tmp_path, capsys):
    original = _make(tmp_path / "orig.txt")
    existing = _make(tmp_path / "taken.txt")
    assert handler.create_hard_link(str(original), str(existing)) is False
    assert "Exception creating hard link" in capsys.readouterr().err


def test_handle_single_file_does_nothing(handler, tmp_path, capsys):
    only = _make(tmp_path / "only.txt")
    handler.handle_duplicates([str(only)], DuplicateAction.DELETE)
    assert only.exists()
    assert capsys.readouterr().out == ""


def test_handle_delete_keeps_first(handler, tmp_path, capsys):
    files = [_make(tmp_path / name) for name in ("a.txt", "b.txt", "c.txt")]
    handler.handle_duplicates([str(f) for f in files], DuplicateAction.DELETE)
    assert [f.exists() for f in files] == [True, False, False]
    out = capsys.readouterr().out
    assert "Found 3 duplicate files:" in out
    assert f"  1. {files[0]}" in out


def test_handle_move_without_target_leaves_files(handler, tmp_path):
    files = [_make(tmp_path / name) for name in ("a.txt", "b.txt")]
    handler.handle_duplicates([str(f) for f in files], DuplicateAction.MOVE)
    assert all(f.exists() for f in files)


def test_handle_move_to_target(handler, tmp_path):
    files = [_make(tmp_path / name) for name in ("a.txt", "b.txt")]
    target = tmp_path / "moved"
    handler.handle_duplicates([str(f) for f in files], DuplicateAction.MOVE, str(target))
    assert files[0].exists()
    assert not files[1].exists()
    assert (target / "b.txt").exists()


def test_handle_hard_link_replaces_duplicates(handler, tmp_path):
    files = [_make(tmp_path / name) for name in ("a.txt", "b.txt")]
    target = tmp_path / "links"
    handler.handle_duplicates(
        [str(f) for f in files], DuplicateAction.HARD_LINK, str(target)
    )
    assert not files[1].exists()
    assert os.stat(target / "b.txt").st_ino == os.stat(files[0]).st_ino


def test_handle_show_only_changes_nothing(handler, tmp_path):
    files = [_make(tmp_path / name) for name in ("a.txt", "b.txt")]
    handler.handle_duplicates([str(f) for f in files], DuplicateAction.SHOW_ONLY)
    assert all(f.exists() for f in files)


def test_interactive_skip(handler, tmp_path, monkeypatch, capsys):
    files = [_make(tmp_path / name) for name in ("a.txt", "b.txt")]
    _feed_input(monkeypatch, ["4"])
    handler.handle_duplicates_interactive([str(f) for f in files])
    assert all(f.exists() for f in files)
    assert "Skipping this group." in capsys.readouterr().out


@pytest.mark.parametrize("answer", ["9", "abc", ""])
def test_interactive_invalid_choice(handler, tmp_path, monkeypatch, capsys, answer):
    files = [_make(tmp_path / name) for name in ("a.txt", "b.txt")]
    _feed_input(monkeypatch, [answer])
    handler.handle_duplicates_interactive([str(f) for f in files])
    assert all(f.exists() for f in files)
    assert "Invalid choice. Skipping this group." in capsys.readouterr().out


def test_interactive_delete(handler, tmp_path, monkeypatch):
    files = [_make(tmp_path / name) for name in ("a.txt", "b.txt")]
    _feed_input(monkeypatch, ["1"])
    handler.handle_duplicates_interactive([str(f) for f in files])
    assert [f.exists() for f in files] == [True, False]


def test_interactive_move(handler, tmp_path, monkeypatch):
    files = [_make(tmp_path / name) for name in ("a.txt", "b.txt")]
    target = tmp_path / "dest"
    _feed_input(monkeypatch, ["2", str(target)])
    handler.handle_duplicates_interactive([str(f) for f in files])
    assert not files[1].exists()
    assert (target / "b.txt").exists()


def test_interactive_hard_link(handler, tmp_path, monkeypatch):
    files = [_make(tmp_path / name) for name in ("a.txt", "b.txt")]
    target = tmp_path / "hl"
    _feed_input(monkeypatch, ["3", str(target)])
    handler.handle_duplicates_interactive([str(f) for f in files])
    assert not files[1].exists()
    assert os.stat(target / "b.txt").st_ino == os.stat(files[0]).st_ino


def test_interactive_single_file_asks_nothing(handler, tmp_path, monkeypatch, capsys):
    only = _make(tmp_path / "only.txt")
    _feed_input(monkeypatch, [])
    handler.handle_duplicates_interactive([str(only)])
    assert only.exists()
    assert capsys.readouterr().out == ""


def test_handle_rejects_unknown_action(handler, tmp_path):
    files = [_make(tmp_path / name) for name in ("a.txt", "b.txt")]
    with pytest.raises(ValueError):
        handler.handle_duplicates([str(f) for f in files], "Explode")