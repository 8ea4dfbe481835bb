from pathlib import Path

import pytest

from savescan.fileops import (
    CannotPrepareBackupTarget,
    SaveScanError,
    are_files_identical,
    prepare_backup_target,
)


@pytest.fixture
def sample_files(tmp_path: Path) -> dict[str, Path]:
    root2_game1 = tmp_path / "root2" / "game1"
    root2_game2 = tmp_path / "root2" / "game2"
    root1_subdir = tmp_path / "root1" / "game1" / "subdir"
    for directory in (root2_game1, root2_game2, root1_subdir):
        directory.mkdir(parents=True)
    files = {
        "root2_game1_file1": root2_game1 / "file1.txt",
        "root2_game2_file1": root2_game2 / "file1.txt",
        "root1_subdir_file2": root1_subdir / "file2.txt",
    }
    files["root2_game1_file1"].write_text("a")
    files["root2_game2_file1"].write_text("a")
    files["root1_subdir_file2"].write_text("bb")
    return files


def test_identical_files_are_detected(sample_files):
    assert are_files_identical(sample_files["root2_game1_file1"], sample_files["root2_game2_file1"]) is True


def test_different_files_are_detected(sample_files):
    assert are_files_identical(sample_files["root1_subdir_file2"], sample_files["root2_game1_file1"]) is False


def test_missing_file_raises(sample_files, tmp_path):
    with pytest.raises(OSError):
        are_files_identical(sample_files["root2_game1_file1"], tmp_path / "nonexistent.txt")


def test_difference_after_first_chunk(tmp_path):
    first = tmp_path / "first.bin"
    second = tmp_path / "second.bin"
    first.write_bytes(b"x" * 3000 + b"1")
    second.write_bytes(b"x" * 3000 + b"2")
    assert are_files_identical(first, second) is False


def test_large_identical_files(tmp_path):
    first = tmp_path / "first.bin"
    second = tmp_path / "second.bin"
    data = bytes(range(256)) * 20
    first.write_bytes(data)
    second.write_bytes(data)
    assert are_files_identical(first, second) is True


def test_prefix_is_not_identical(tmp_path):
    first = tmp_path / "short.txt"
    second = tmp_path / "long.txt"
    first.write_bytes(b"abc")
    second.write_bytes(b"abcd")
    assert are_files_identical(first, second) is False
    assert are_files_identical(second, first) is False


def test_empty_files_are_identical(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(b"")
    second.write_bytes(b"")
    assert are_files_identical(first, second) is True


@pytest.mark.parametrize("merge", [True, False])
def test_prepare_creates_missing_directory(tmp_path, merge):
    target = tmp_path / "backup" / "nested"
    prepare_backup_target(target, merge)
    assert target.is_dir()


def test_prepare_without_merge_clears_existing_content(tmp_path):
    target = tmp_path / "backup"
    (target / "game").mkdir(parents=True)
    (target / "game" / "save.dat").write_text("old")
    prepare_backup_target(target, False)
    assert target.is_dir()
    assert list(target.iterdir()) == []


def test_prepare_with_merge_keeps_existing_content(tmp_path):
    target = tmp_path / "backup"
    target.mkdir()
    (target / "save.dat").write_text("old")
    prepare_backup_target(target, True)
    assert (target / "save.dat").read_text() == "old"


def test_prepare_with_merge_rejects_file_target(tmp_path):
    target = tmp_path / "backup"
    target.write_text("not a directory")
    with pytest.raises(CannotPrepareBackupTarget) as info:
        prepare_backup_target(target, True)
    assert info.value.path == target
    assert str(info.value) == "Cannot prepare the backup target"
    assert target.read_text() == "not a directory"


def test_prepare_without_merge_replaces_file_target(tmp_path):
    target = tmp_path / "backup"
    target.write_text("not a directory")
    prepare_backup_target(target, False)
    assert target.is_dir()


def test_prepare_fails_when_parent_is_a_file(tmp_path):
    parent = tmp_path / "blocker"
    parent.write_text("file")
    target = parent / "backup"
    with pytest.raises(SaveScanError) as info:
        prepare_backup_target(target, False)
    assert isinstance(info.value, CannotPrepareBackupTarget)
    assert info.value.path == target