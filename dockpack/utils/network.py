"""Network address helpers."""

from __future__ import annotations

import ipaddress
import socket

_PRIVATE_NETWORKS = (
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("fc00::/7"),
)


def get_available_port() -> int:
    """Return a TCP port that is free on this machine right now."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("", 0))
        return sock.getsockname()[1]


def _parse_ip(text: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    if "%" in text:
        return None
    try:
        address = ipaddress.ip_address(text)
    except ValueError:
        return None
    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped is not None:
        return address.ipv4_mapped
    return address


def is_private_ip(ip: str) -> bool:
    """Tell whether ``ip`` lies in an RFC 1918 or RFC 4193 private range."""
    address = _parse_ip(ip)
    if address is None:
        return False
    return any(
        address.version == network.version and address in network
        for network in _PRIVATE_NETWORKS
    )


def parse_cidr(cidr: str) -> ipaddress.IPv4Network | ipaddress.IPv6Network:
    """Parse ``address/prefix`` notation into the network it denotes.

    Host bits are cleared; a missing prefix length is an error.
    """
    if "/" not in cidr:
        raise ValueError(f"invalid CIDR address: {cidr}")
    try:
        return ipaddress.ip_network(cidr, strict=False)
    except ValueError as exc:
        raise ValueError(f"invalid CIDR address: {cidr}") from exc


def _usable(address: str) -> bool:
    try:
        parsed = ipaddress.IPv4Address(address)
    except ValueError:
        return False
    return not parsed.is_loopback and not parsed.is_unspecified


def get_host_ip() -> str:
    """Return a non-loopback IPv4 address of this host, or ``""`` if none is found."""
    try:
        infos = socket.getaddrinfo(socket.gethostname(), None, socket.AF_INET)
    except OSError:
        infos = []
    for *_, sockaddr in infos:
        if _usable(sockaddr[0]):
            return sockaddr[0]

    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("192.0.2.1", 9))
            address = sock.getsockname()[0]
    except OSError:
        return ""
    return address if _usable(address) else ""


def split_host_port(host_port: str) -> tuple[str, str]:
    """Split ``host:port`` or ``[host]:port`` into its trimmed parts."""

    def fail(reason: str) -> ValueError:
        return ValueError(f"address {host_port}: {reason}")

    colon = host_port.rfind(":")
    if colon < 0:
        raise fail("missing port in address")

    open_from = close_from = 0
    if host_port.startswith("["):
        end = host_port.find("]")
        if end < 0:
            raise fail("missing ']' in address")
        if end + 1 == len(host_port):
            raise fail("missing port in address")
        if end + 1 != colon:
            if host_port[end + 1] == ":":
                raise fail("too many colons in address")
            raise fail("missing port in address")
        host = host_port[1:end]
        open_from, close_from = 1, end + 1
    else:
        host = host_port[:colon]
        if ":" in host:
            raise fail("too many colons in address")

    if "[" in host_port[open_from:]:
        raise fail("unexpected '[' in address")
    if "]" in host_port[close_from:]:
        raise fail("unexpected ']' in address")

    port = host_port[colon + 1 :]
    return host.strip(), port.strip()