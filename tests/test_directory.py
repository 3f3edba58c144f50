import io
import os
from pathlib import Path

from pcsynth.directory import create_directory_for_path, print_current_dir


def test_creates_missing_parents(tmp_path):
    target = tmp_path / "a" / "b" / "file.txt"
    create_directory_for_path(target)
    assert (tmp_path / "a" / "b").is_dir()
    assert not target.exists()


def test_existing_parent_is_left_alone(tmp_path):
    target = tmp_path / "a" / "file.txt"
    create_directory_for_path(target)
    create_directory_for_path(target)
    assert target.parent.is_dir()
    assert not target.exists()
    assert sorted(p.name for p in tmp_path.iterdir()) == ["a"]


def test_bare_filename_creates_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = Path("file.txt")
    create_directory_for_path(target)
    assert not target.exists()
    assert list(tmp_path.iterdir()) == []


def test_print_current_dir_to_stream(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    buffer = io.StringIO()
    print_current_dir(buffer)
    text = buffer.getvalue()
    assert text.startswith('"') and text.endswith('"\n')
    assert Path(text.strip().strip('"')).samefile(tmp_path)


def test_print_current_dir_defaults_to_stdout(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    print_current_dir()
    captured = capsys.readouterr().out
    assert captured.strip().strip('"') == os.getcwd()