"""The user on whose behalf rootless containers run."""

from __future__ import annotations

import os
import pwd
from dataclasses import dataclass


@dataclass
class User:
    """Name and numeric IDs, as strings, of a user."""

    username: str
    uid: str
    gid: str

    @property
    def home_dir(self) -> str:
        """The home directory from ``$HOME``, or ``""`` when it is unset."""
        return os.environ.get("HOME", "")

    def has_permission(self) -> bool:
        """Tell whether the user may run containers; every user may."""
        return True


def current_user() -> User:
    """Return the user running this process."""
    uid = os.getuid()
    try:
        entry = pwd.getpwuid(uid)
    except KeyError as exc:
        raise LookupError(f"user: unknown userid {uid}") from exc
    return User(username=entry.pw_name, uid=str(uid), gid=str(entry.pw_gid))