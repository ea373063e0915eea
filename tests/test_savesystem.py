import pytest

from kliker.gold import Gold
from kliker.savesystem import SAVE_FILE_NAME, SaveFormatError, SaveSystem


def test_round_trip(tmp_path):
    path = tmp_path / "progress.txt"
    gold = Gold()
    gold.add(1234)
    SaveSystem(gold, path).save_progress()
    restored = Gold()
    assert SaveSystem(restored, path).load_progress() == 1234
    assert restored.amount == 1234


def test_save_writes_plain_integer_and_truncates(tmp_path):
    path = tmp_path / "progress.txt"
    path.write_text("999999999 leftover")
    gold = Gold()
    gold.add(7)
    SaveSystem(gold, path).save_progress()
    assert path.read_text() == "7"


def test_default_path_is_in_current_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    gold = Gold()
    gold.add(3)
    system = SaveSystem(gold)
    system.save_progress()
    assert system.path == tmp_path / SAVE_FILE_NAME
    assert (tmp_path / "save.txt").read_text() == "3"


def test_missing_file_raises(tmp_path):
    gold = Gold()
    with pytest.raises(FileNotFoundError):
        SaveSystem(gold, tmp_path / "absent.txt").load_progress()
    assert gold.amount == 0


@pytest.mark.parametrize("content", [b"abc", b"-5", b"12 ", b"\n", b"1.5", b"99999999999"])
def test_invalid_content_raises(tmp_path, content):
    path = tmp_path / "progress.txt"
    path.write_bytes(content)
    gold = Gold()
    with pytest.raises(SaveFormatError):
        SaveSystem(gold, path).load_progress()
    assert gold.amount == 0


def test_empty_file_loads_nothing(tmp_path):
    path = tmp_path / "progress.txt"
    path.write_bytes(b"")
    gold = Gold()
    assert SaveSystem(gold, path).load_progress() is None
    assert gold.amount == 0


def test_only_first_line_is_read_and_added(tmp_path):
    path = tmp_path / "progress.txt"
    path.write_bytes(b"12\nnot a number\n")
    gold = Gold()
    gold.add(5)
    assert SaveSystem(gold, path).load_progress() == 12
    assert gold.amount == 17