"""Containers run through the ``docker`` command-line client."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field


class ContainerError(RuntimeError):
    """A container command failed."""


def generate_container_id() -> str:
    """Return the container ID used by this process."""
    return f"container-{os.getpid()}"


def _environment(env: Sequence[str] | None) -> dict[str, str] | None:
    if env is None:
        return None
    result: dict[str, str] = {}
    for entry in env:
        key, _, value = entry.partition("=")
        result[key] = value
    return result


def _run(
    args: list[str],
    action: str,
    container_id: str,
    *,
    env: dict[str, str] | None = None,
    timeout: float | None = None,
) -> None:
    prefix = f"failed to {action} container {container_id}"
    try:
        result = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            env=env,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        output = (exc.output or b"").decode(errors="replace")
        raise ContainerError(f"{prefix}: timed out, output: {output}") from exc
    except OSError as exc:
        raise ContainerError(f"{prefix}: {exc}, output: ") from exc
    if result.returncode != 0:
        output = (result.stdout or b"").decode(errors="replace")
        raise ContainerError(f"{prefix}: exit status {result.returncode}, output: {output}")


@dataclass
class Container:
    """A container managed by the embedded engine."""

    image: str
    command: list[str] = field(default_factory=list)
    env: list[str] | None = None
    working_dir: str = ""
    id: str = field(default_factory=generate_container_id)

    def start(self, timeout: float | None = None) -> None:
        """Run the container and wait for it to finish.

        ``env`` entries of the form ``KEY=VALUE`` become the whole environment of
        the client; with ``env`` set to ``None`` the current environment is used.
        """
        _run(
            ["docker", "run", "--rm", "--name", self.id, "-w", self.working_dir, self.image],
            "start",
            self.id,
            env=_environment(self.env),
            timeout=timeout,
        )

    def stop(self) -> None:
        """Stop the running container."""
        _run(["docker", "stop", self.id], "stop", self.id)

    def cleanup(self) -> None:
        """Remove the container's resources."""
        _run(["docker", "rm", self.id], "cleanup", self.id)