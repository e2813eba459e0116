import io

import pytest

from shiftcrypt.cli import collect_tasks, main
from shiftcrypt.task import Action, Task


@pytest.fixture
def tree(tmp_path):
    data = tmp_path / "data"
    (data / "nested" / "deeper").mkdir(parents=True)
    files = {
        data / "a.txt": b"alpha file",
        data / "nested" / "b.txt": b"bravo file",
        data / "nested" / "deeper" / "c.bin": b"charlie file",
    }
    for path, content in files.items():
        path.write_bytes(content)
    env = tmp_path / ".env"
    env.write_text("6\n")
    return data, env, files


def test_collect_tasks_finds_all_files(tree):
    data, _, files = tree
    tasks = list(collect_tasks(data, "encrypt"))
    assert sorted(tasks, key=lambda t: t.file_path) == sorted(
        (Task(str(path), Action.ENCRYPT) for path in files), key=lambda t: t.file_path
    )


def test_collect_tasks_other_action_decrypts(tree):
    data, _, files = tree
    tasks = list(collect_tasks(str(data), "whatever"))
    assert len(tasks) == len(files)
    assert {task.action for task in tasks} == {Action.DECRYPT}


def test_collect_tasks_invalid_directory(tmp_path):
    with pytest.raises(NotADirectoryError):
        collect_tasks(tmp_path / "missing", "encrypt")


def test_collect_tasks_rejects_file(tree):
    _, env, _ = tree
    with pytest.raises(NotADirectoryError):
        collect_tasks(env, "encrypt")


def test_main_round_trip(tree, capsys):
    data, env, files = tree
    assert main([str(data), "encrypt", "--env", str(env)]) == 0
    out = capsys.readouterr().out
    assert "Total execution time:" in out
    for path, content in files.items():
        assert path.read_bytes() != content
    assert main([str(data), "decrypt", "--env", str(env)]) == 0
    for path, content in files.items():
        assert path.read_bytes() == content


def test_main_invalid_directory(tmp_path, capsys):
    missing = tmp_path / "nowhere"
    assert main([str(missing), "encrypt"]) == 0
    assert f"Invalid directory path: {missing}" in capsys.readouterr().out


def test_main_prompts_for_input(tree, monkeypatch, capsys):
    data, env, files = tree
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{data}\nencrypt\n"))
    assert main(["--env", str(env)]) == 0
    out = capsys.readouterr().out
    assert "Enter the directory path:" in out
    assert "Enter the action (encrypt/decrypt)" in out
    for path, content in files.items():
        assert path.read_bytes() != content