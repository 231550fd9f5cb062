"""HTTP client for the embedded engine's API."""

from __future__ import annotations

import requests

from dockpack.api.types import Container


class ApiError(Exception):
    """The API answered with an unexpected status or body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class Client:
    """Talks to the engine's API at ``base_url``."""

    def __init__(self, base_url: str, session: requests.Session | None = None) -> None:
        self.base_url = base_url
        self.session = session if session is not None else requests.Session()

    def list_containers(self) -> list[Container]:
        """Return every container the engine knows of."""
        response = self.session.get(f"{self.base_url}/containers")
        with response:
            if response.status_code != 200:
                raise ApiError(
                    f"failed to list containers: {response.status_code} {response.reason}",
                    response.status_code,
                )
            try:
                payload = response.json()
            except ValueError as exc:
                raise ApiError(f"failed to decode containers: {exc}", response.status_code) from exc
        if payload is None:
            return []
        if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
            raise ApiError("failed to decode containers: expected a list of objects", 200)
        return [Container.from_dict(item) for item in payload]

    def _post_action(self, container_id: str, action: str) -> None:
        response = self.session.post(f"{self.base_url}/containers/{container_id}/{action}")
        with response:
            if response.status_code != 204:
                raise ApiError(
                    f"failed to {action} container: {response.text}", response.status_code
                )

    def start_container(self, container_id: str) -> None:
        """Ask the engine to start a container."""
        self._post_action(container_id, "start")

    def stop_container(self, container_id: str) -> None:
        """Ask the engine to stop a container."""
        self._post_action(container_id, "stop")