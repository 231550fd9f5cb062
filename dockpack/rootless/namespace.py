"""User namespaces for rootless operation."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field

_USER_NS_PATH = "/proc/self/ns/user"


@dataclass
class Namespace:
    """A user namespace and the IDs of the user who created it."""

    uid: int
    gid: int
    path: str
    process: subprocess.Popen | None = field(default=None, repr=False, compare=False)

    def enter(self) -> None:
        """Join the user namespace at ``path``."""
        try:
            fd = os.open(self.path, os.O_RDONLY)
        except OSError as exc:
            raise OSError(exc.errno, f"failed to open namespace file: {exc.strerror}") from exc
        try:
            os.setns(fd, os.CLONE_NEWUSER)
        except OSError as exc:
            raise OSError(exc.errno, f"failed to enter user namespace: {exc.strerror}") from exc
        finally:
            os.close(fd)

    def exit(self) -> None:
        """Leave the namespace; nothing needs releasing."""


def new_namespace() -> Namespace:
    """Start a shell in a fresh user namespace with the caller mapped to root."""
    try:
        process = subprocess.Popen(
            ["unshare", "--user", "--map-root-user", "--mount-proc", "--fork", "bash"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as exc:
        raise OSError(exc.errno, f"failed to create user namespace: {exc.strerror}") from exc
    return Namespace(uid=os.getuid(), gid=os.getgid(), path=_USER_NS_PATH, process=process)