"""Network namespaces and virtual interfaces for containers."""

from __future__ import annotations

import fcntl
import os
import shutil
import socket
import struct

_SIOCGIFFLAGS = 0x8913
_SIOCSIFFLAGS = 0x8914
_IFF_UP = 0x1
_IFREQ = "16sH22x"


def _interface_exists(name: str) -> bool:
    try:
        socket.if_nametoindex(name)
    except OSError:
        return False
    return True


class NetworkManager:
    """Manages the network namespace used to isolate containers."""

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace

    @property
    def namespace_path(self) -> str:
        """Path of the namespace under ``/var/run/netns``."""
        return os.path.join("/var/run/netns", self.namespace)

    def create_network_namespace(self) -> None:
        """Create the namespace directory."""
        os.makedirs(self.namespace, mode=0o755, exist_ok=True)

    def delete_network_namespace(self) -> None:
        """Remove the namespace directory and everything in it, if present."""
        if os.path.isdir(self.namespace) and not os.path.islink(self.namespace):
            shutil.rmtree(self.namespace)
        elif os.path.lexists(self.namespace):
            os.remove(self.namespace)

    def setup_container_network(self, container_id: str) -> None:
        """Prepare networking for a container; an existing interface is left as it is."""
        if _interface_exists("veth" + container_id):
            return

    def teardown_container_network(self, container_id: str) -> None:
        """Bring down the container's virtual interface."""
        self.interface_down("veth" + container_id)

    def interface_down(self, veth_name: str) -> None:
        """Clear the UP flag of an interface; raise ``LookupError`` if it does not exist."""
        if not _interface_exists(veth_name):
            raise LookupError(f"Link not found: {veth_name}")
        name = veth_name.encode()
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            reply = fcntl.ioctl(sock, _SIOCGIFFLAGS, struct.pack(_IFREQ, name, 0))
            _, flags = struct.unpack(_IFREQ, reply)
            fcntl.ioctl(sock, _SIOCSIFFLAGS, struct.pack(_IFREQ, name, flags & ~_IFF_UP & 0xFFFF))