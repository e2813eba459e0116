import pytest

from shiftcrypt.task import Action, Task


def test_to_string_format():
    assert Task("dir/a.txt", Action.ENCRYPT).to_string() == "dir/a.txt,ENCRYPT"
    assert Task("dir/a.txt", Action.DECRYPT).to_string() == "dir/a.txt,DECRYPT"


@pytest.mark.parametrize("action", list(Action))
def test_round_trip(action):
    task = Task("some/path/file.bin", action)
    assert Task.from_string(task.to_string()) == task


def test_unknown_action_means_decrypt():
    assert Task.from_string("x.txt,encrypt").action is Action.DECRYPT


def test_action_stops_at_newline():
    task = Task.from_string("x.txt,ENCRYPT\ntrailing")
    assert task == Task("x.txt", Action.ENCRYPT)


def test_path_ends_at_first_comma():
    task = Task.from_string("a,b,ENCRYPT")
    assert task.file_path == "a"
    assert task.action is Action.DECRYPT


@pytest.mark.parametrize("data", ["", "no-comma-here", "path,"])
def test_invalid_format_raises(data):
    with pytest.raises(ValueError, match="Invalid task data format"):
        Task.from_string(data)


def test_open_existing_file(tmp_path):
    path = tmp_path / "f.bin"
    path.write_bytes(b"content")
    with Task(str(path), Action.ENCRYPT).open() as stream:
        assert stream.read() == b"content"


def test_open_missing_file_raises(tmp_path):
    missing = str(tmp_path / "none.bin")
    with pytest.raises(OSError, match="Failed to open file:"):
        Task(missing, Action.DECRYPT).open()