"""The runtime environment of the embedded container daemon."""

from __future__ import annotations

import os


class Runtime:
    """Owns the runtime directory and the daemon's lifecycle."""

    def __init__(self, runtime_dir: str | os.PathLike[str]) -> None:
        self.runtime_dir = os.fspath(runtime_dir)
        self.running = False
        os.makedirs(self.runtime_dir, mode=0o777, exist_ok=True)

    def start(self) -> None:
        """Start the embedded daemon and mark the runtime as running."""
        print("Starting embedded Docker daemon...")
        self.running = True

    def stop(self) -> None:
        """Stop the embedded daemon and mark the runtime as stopped."""
        print("Stopping embedded Docker daemon...")
        self.running = False