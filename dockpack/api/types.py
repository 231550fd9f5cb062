"""Data types exchanged with the engine's HTTP API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Port:
    """A port published by a container."""

    host_port: int = 0
    container_port: int = 0
    protocol: str = ""


@dataclass
class Container:
    """A container's configuration and state."""

    id: str = ""
    name: str = ""
    image: str = ""
    status: str = ""
    ports: list[Port] = field(default_factory=list)
    created: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form of this container."""
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "status": self.status,
            "ports": [
                {
                    "host_port": port.host_port,
                    "container_port": port.container_port,
                    "protocol": port.protocol,
                }
                for port in self.ports
            ],
            "created": self.created,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Container:
        """Build a container from its JSON object form; missing fields take defaults."""
        ports = [
            Port(
                host_port=port.get("host_port") or 0,
                container_port=port.get("container_port") or 0,
                protocol=port.get("protocol") or "",
            )
            for port in data.get("ports") or []
        ]
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            image=data.get("image") or "",
            status=data.get("status") or "",
            ports=ports,
            created=data.get("created") or 0,
        )


@dataclass
class Image:
    """A container image's metadata."""

    id: str = ""
    repository: str = ""
    tag: str = ""
    size: int = 0
    created: int = 0
    architecture: str = ""


@dataclass
class Network:
    """A network available to containers."""

    name: str = ""
    driver: str = ""


@dataclass
class HealthCheck:
    """Health-check settings of a container."""

    interval: int = 0
    timeout: int = 0
    retries: int = 0