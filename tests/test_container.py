import os
import stat
import subprocess
from unittest import mock

import pytest

from dockpack.engine.container import Container, ContainerError, generate_container_id


def _done(returncode=0, output=b""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=output)


def _fake_docker(directory, body):
    script = directory / "docker"
    script.write_text("#!/bin/sh\n" + body)
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


def test_generate_container_id_uses_pid():
    assert generate_container_id() == f"container-{os.getpid()}"


def test_new_container_gets_generated_id():
    container = Container("alpine", ["sh"], ["A=1"], "/work")
    assert container.id == generate_container_id()
    assert container.image == "alpine"
    assert container.working_dir == "/work"


def test_start_runs_docker_with_environment():
    container = Container("alpine", ["sh"], ["A=1", "B=x=y"], "/work")
    with mock.patch.object(subprocess, "run", return_value=_done()) as run:
        container.start()
    args = run.call_args.args[0]
    assert args == ["docker", "run", "--rm", "--name", container.id, "-w", "/work", "alpine"]
    assert run.call_args.kwargs["env"] == {"A": "1", "B": "x=y"}


def test_start_without_env_inherits_environment(tmp_path, monkeypatch):
    out_file = tmp_path / "out.txt"
    _fake_docker(
        tmp_path,
        'printf \'%s\\n\' "$@" > "$DOCKPACK_OUT"\n'
        'printf \'%s\\n\' "$DOCKPACK_MARKER" >> "$DOCKPACK_OUT"\n',
    )
    monkeypatch.setenv("PATH", str(tmp_path) + os.pathsep + os.environ.get("PATH", ""))
    monkeypatch.setenv("DOCKPACK_OUT", str(out_file))
    monkeypatch.setenv("DOCKPACK_MARKER", "inherited")

    container = Container("alpine", working_dir="/")
    container.start(timeout=5)

    assert out_file.read_text().splitlines() == [
        "run", "--rm", "--name", container.id, "-w", "/", "alpine", "inherited",
    ]


def test_start_failure_reports_output(tmp_path, monkeypatch):
    _fake_docker(tmp_path, "echo boom\nexit 1\n")
    monkeypatch.setenv("PATH", str(tmp_path) + os.pathsep + os.environ.get("PATH", ""))
    container = Container("alpine", working_dir="/")
    with pytest.raises(ContainerError, match="failed to start container .*boom"):
        container.start(timeout=5)


def test_start_timeout_raises(tmp_path, monkeypatch):
    _fake_docker(tmp_path, "exec sleep 5\n")
    monkeypatch.setenv("PATH", str(tmp_path) + os.pathsep + os.environ.get("PATH", ""))
    container = Container("alpine", working_dir="/")
    with pytest.raises(ContainerError, match="failed to start container"):
        container.start(timeout=0.5)


def test_missing_docker_binary_raises(tmp_path, monkeypatch):
    empty = tmp_path / "empty"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    container = Container("alpine")
    with pytest.raises(ContainerError, match="failed to stop container"):
        container.stop()


def test_stop_and_cleanup_commands(tmp_path, monkeypatch):
    out_file = tmp_path / "calls.txt"
    _fake_docker(tmp_path, 'echo "$@" >> "$DOCKPACK_OUT"\n')
    monkeypatch.setenv("PATH", str(tmp_path) + os.pathsep + os.environ.get("PATH", ""))
    monkeypatch.setenv("DOCKPACK_OUT", str(out_file))
    container = Container("alpine")
    container.stop()
    container.cleanup()
    assert out_file.read_text().splitlines() == [
        f"stop {container.id}",
        f"rm {container.id}",
    ]


def test_cleanup_failure_raises(tmp_path, monkeypatch):
    _fake_docker(tmp_path, "echo gone\nexit 2\n")
    monkeypatch.setenv("PATH", str(tmp_path) + os.pathsep + os.environ.get("PATH", ""))
    container = Container("alpine")
    with pytest.raises(ContainerError, match="failed to cleanup container .*gone"):
        container.cleanup()