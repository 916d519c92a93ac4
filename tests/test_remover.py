import os

import pytest

from filekit.remover import DeletionError, delete_files, find_matching_files, match_pattern


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("x")
    return path


@pytest.mark.parametrize(
    "pattern, name, expected",
    [
        ("*.rar", "archive.rar", True),
        ("*.rar", "archive.txt", False),
        ("*.tmp", "a.tmp.bak", False),
        ("?.txt", "a.txt", True),
        ("?.txt", "ab.txt", False),
        ("[a-c].txt", "b.txt", True),
        ("[a-c].txt", "d.txt", False),
        ("[^a-c].txt", "b.txt", False),
        ("[^a-c].txt", "d.txt", True),
        ("\\*.txt", "*.txt", True),
        ("\\*.txt", "a.txt", False),
        ("*", "", True),
        ("*x", "abx", True),
        ("a*b*c", "aXXbYYc", True),
        ("*", "a/b", False),
    ],
)
def test_match_pattern(pattern, name, expected):
    assert match_pattern(pattern, name) is expected


@pytest.mark.parametrize("pattern", ["[", "[]", "a\\", "[a-", "[-a]", "[a"])
def test_match_pattern_rejects_malformed(pattern):
    with pytest.raises(ValueError):
        match_pattern(pattern, "a")


def test_find_non_recursive_only_top_level(tmp_path):
    _touch(tmp_path / "b.rar")
    _touch(tmp_path / "a.rar")
    _touch(tmp_path / "c.txt")
    _touch(tmp_path / "sub" / "d.rar")
    (tmp_path / "dir.rar").mkdir()

    found = find_matching_files(str(tmp_path), "*.rar", False)

    assert found == [
        os.path.join(str(tmp_path), "a.rar"),
        os.path.join(str(tmp_path), "b.rar"),
    ]


def test_find_recursive_includes_nested(tmp_path):
    _touch(tmp_path / "a.rar")
    _touch(tmp_path / "sub" / "d.rar")
    _touch(tmp_path / "sub" / "deeper" / "e.rar")
    _touch(tmp_path / "sub" / "f.txt")
    (tmp_path / "dir.rar").mkdir()

    found = find_matching_files(str(tmp_path), "*.rar", True)

    assert sorted(found) == sorted(
        [
            os.path.join(str(tmp_path), "a.rar"),
            os.path.join(str(tmp_path), "sub", "d.rar"),
            os.path.join(str(tmp_path), "sub", "deeper", "e.rar"),
        ]
    )
    assert all(os.path.isfile(path) for path in found)


def test_find_no_matches(tmp_path):
    _touch(tmp_path / "a.txt")
    assert find_matching_files(str(tmp_path), "*.rar", True) == []


def test_find_bad_pattern_with_files_raises(tmp_path):
    _touch(tmp_path / "a.txt")
    with pytest.raises(ValueError):
        find_matching_files(str(tmp_path), "[", False)


def test_find_bad_pattern_in_empty_directory(tmp_path):
    assert find_matching_files(str(tmp_path), "[", False) == []


def test_find_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        find_matching_files(str(tmp_path / "missing"), "*", False)
    with pytest.raises(FileNotFoundError):
        find_matching_files(str(tmp_path / "missing"), "*", True)


def test_delete_files_removes_all(tmp_path):
    files = [_touch(tmp_path / name) for name in ("a.tmp", "b.tmp", "c.tmp")]
    assert delete_files(files) == 3
    assert not any(path.exists() for path in files)


def test_delete_files_reports_failures(tmp_path):
    present = _touch(tmp_path / "a.tmp")
    missing = tmp_path / "gone.tmp"

    with pytest.raises(DeletionError) as info:
        delete_files([present, missing])

    assert info.value.deleted == 1
    assert len(info.value.failures) == 1
    assert str(missing) in info.value.failures[0]
    assert str(info.value).startswith("some files could not be deleted:\n")
    assert not present.exists()


def test_delete_files_round_trip_with_find(tmp_path):
    _touch(tmp_path / "x.log")
    _touch(tmp_path / "y.log")
    keep = _touch(tmp_path / "z.txt")

    found = find_matching_files(tmp_path, "*.log", False)

    assert delete_files(found) == len(found) == 2
    assert find_matching_files(tmp_path, "*.log", False) == []
    assert keep.exists()