"""Reading and writing docker-compose style YAML configurations."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import yaml

_NULL_TAG = "tag:yaml.org,2002:null"


@dataclass
class ServiceConfig:
    """Configuration of one service in a compose file."""

    image: str = ""
    ports: list[str] = field(default_factory=list)
    volumes: list[str] = field(default_factory=list)


@dataclass
class ComposeConfig:
    """A compose file: its version and its services by name."""

    version: str = ""
    services: dict[str, ServiceConfig] = field(default_factory=dict)


def _is_null(node: yaml.Node | None) -> bool:
    return node is None or (isinstance(node, yaml.ScalarNode) and node.tag == _NULL_TAG)


def _scalar(node: yaml.Node, where: str) -> str:
    if _is_null(node):
        return ""
    if isinstance(node, yaml.ScalarNode):
        return node.value
    raise ValueError(f"{where}: expected a scalar value")


def _strings(node: yaml.Node, where: str) -> list[str]:
    if _is_null(node):
        return []
    if isinstance(node, yaml.SequenceNode):
        return [_scalar(item, where) for item in node.value]
    raise ValueError(f"{where}: expected a list of strings")


def _pairs(node: yaml.Node | None, where: str) -> list[tuple[str, yaml.Node]]:
    if _is_null(node):
        return []
    if isinstance(node, yaml.MappingNode):
        return [(_scalar(key, where), value) for key, value in node.value]
    raise ValueError(f"{where}: expected a mapping")


def _service(node: yaml.Node, name: str) -> ServiceConfig:
    service = ServiceConfig()
    for key, value in _pairs(node, f"service {name}"):
        if key == "image":
            service.image = _scalar(value, f"service {name} image")
        elif key == "ports":
            service.ports = _strings(value, f"service {name} ports")
        elif key == "volumes":
            service.volumes = _strings(value, f"service {name} volumes")
    return service


def _parse(data: bytes) -> ComposeConfig:
    try:
        root = yaml.compose(data, Loader=yaml.SafeLoader)
    except yaml.YAMLError as exc:
        raise ValueError(f"failed to unmarshal compose file: {exc}") from exc

    config = ComposeConfig()
    try:
        for key, value in _pairs(root, "compose file"):
            if key == "version":
                config.version = _scalar(value, "version")
            elif key == "services":
                config.services = {
                    name: _service(body, name) for name, body in _pairs(value, "services")
                }
    except ValueError as exc:
        raise ValueError(f"failed to unmarshal compose file: {exc}") from exc
    return config


def load_compose_file(file_path: str | os.PathLike[str]) -> ComposeConfig:
    """Read a compose YAML file; unknown keys are ignored."""
    with open(file_path, "rb") as handle:
        data = handle.read()
    return _parse(data)


def _service_document(service: ServiceConfig) -> dict[str, object]:
    document: dict[str, object] = {"image": service.image}
    if service.ports:
        document["ports"] = list(service.ports)
    if service.volumes:
        document["volumes"] = list(service.volumes)
    return document


def save_compose_file(file_path: str | os.PathLike[str], config: ComposeConfig) -> None:
    """Write ``config`` as YAML; services appear sorted by name, empty lists are left out."""
    document = {
        "version": config.version,
        "services": {
            name: _service_document(service)
            for name, service in sorted(config.services.items())
        },
    }
    text = yaml.safe_dump(document, sort_keys=False, default_flow_style=False)
    fd = os.open(file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
    with os.fdopen(fd, "wb") as handle:
        handle.write(text.encode("utf-8"))