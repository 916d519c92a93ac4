import pytest

from filekit.rename import replace_in_filenames


def _touch(path, text="x"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


def test_replaces_in_top_level_and_nested(tmp_path):
    _touch(tmp_path / "one_old.txt", "first")
    _touch(tmp_path / "sub" / "two_old.txt", "second")
    _touch(tmp_path / "untouched.txt")

    count = replace_in_filenames(tmp_path, "old", "new")

    assert count == 2
    assert (tmp_path / "one_new.txt").read_text() == "first"
    assert (tmp_path / "sub" / "two_new.txt").read_text() == "second"
    assert not (tmp_path / "one_old.txt").exists()
    assert (tmp_path / "untouched.txt").exists()


def test_directories_keep_their_names(tmp_path):
    _touch(tmp_path / "old_dir" / "file_old.txt")

    count = replace_in_filenames(str(tmp_path), "old", "new")

    assert count == 1
    assert (tmp_path / "old_dir" / "file_new.txt").exists()
    assert not (tmp_path / "new_dir").exists()


def test_empty_replacement_removes_target(tmp_path):
    _touch(tmp_path / "copy - copy.txt")

    count = replace_in_filenames(tmp_path, " - copy")

    assert count == 1
    assert sorted(p.name for p in tmp_path.iterdir()) == ["copy.txt"]


def test_every_occurrence_is_replaced(tmp_path):
    _touch(tmp_path / "aXbXc.txt")

    replace_in_filenames(tmp_path, "X", "_")

    assert sorted(p.name for p in tmp_path.iterdir()) == ["a_b_c.txt"]


def test_no_match_renames_nothing(tmp_path):
    _touch(tmp_path / "a.txt")
    assert replace_in_filenames(tmp_path, "zzz", "y") == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == ["a.txt"]


def test_prints_each_rename(tmp_path, capsys):
    _touch(tmp_path / "a_old.txt")

    replace_in_filenames(tmp_path, "old", "new")

    assert "Renamed: a_old.txt -> a_new.txt" in capsys.readouterr().out


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        replace_in_filenames(tmp_path / "missing", "a", "b")