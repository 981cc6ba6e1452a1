"""Virtual IP ownership detection.

Answers a single question: is the configured VIP currently assigned to one
of this host's active, non-loopback interfaces? Interfaces are read through
psutil; the matching logic works on plain Interface snapshots so it can be
fed synthetic data.
"""

import ipaddress
import socket
from dataclasses import dataclass, field
from typing import Iterable, Optional

import psutil


class VipCheckError(Exception):
    """Network interfaces or their addresses could not be enumerated."""
    pass


@dataclass
class Interface:
    """Snapshot of one network interface."""
    name: str
    is_up: bool
    is_loopback: bool
    addresses: list[str] = field(default_factory=list)


def _is_loopback_interface(name: str, flags: str) -> bool:
    if flags:
        return "loopback" in flags.split(",")
    # psutil builds without interface flags
    return name == "lo" or (name.startswith("lo") and name[2:].isdigit())


def list_interfaces() -> list[Interface]:
    """Enumerate the host's network interfaces with their IP addresses.

    Interfaces without link statistics are reported as down. Only
    AF_INET and AF_INET6 addresses are collected.

    Raises:
        VipCheckError: If the operating system refuses the lookup
    """
    try:
        stats = psutil.net_if_stats()
        addrs = psutil.net_if_addrs()
    except (OSError, psutil.Error) as e:
        raise VipCheckError(f"could not enumerate network interfaces: {e}") from e

    interfaces = []
    for name, nic_addrs in addrs.items():
        nic_stats = stats.get(name)
        interfaces.append(Interface(
            name=name,
            is_up=bool(nic_stats and nic_stats.isup),
            is_loopback=_is_loopback_interface(name, getattr(nic_stats, "flags", "")),
            addresses=[
                a.address for a in nic_addrs
                if a.family in (socket.AF_INET, socket.AF_INET6) and a.address
            ],
        ))
    return interfaces


def to_ipv4(address: str) -> Optional[ipaddress.IPv4Address]:
    """Extract a non-loopback IPv4 address from an address string.

    Accepts bare addresses ("10.0.0.5") and addresses with a prefix
    ("10.0.0.5/24"). IPv4-mapped IPv6 addresses are unwrapped.

    Returns:
        The IPv4 address, or None for unparseable, loopback and
        IPv6-only addresses
    """
    host, _, prefix = address.partition("/")
    host = host.split("%", 1)[0]
    try:
        ip = ipaddress.ip_interface(f"{host}/{prefix}" if prefix else host).ip
    except ValueError:
        return None

    if ip.is_loopback:
        return None
    if isinstance(ip, ipaddress.IPv6Address):
        if ip.ipv4_mapped is None:
            return None
        ip = ip.ipv4_mapped
        if ip.is_loopback:
            return None
    return ip


def check_vip(vip: str, interfaces: Optional[Iterable[Interface]] = None) -> bool:
    """Check whether the VIP is assigned to this host.

    The VIP is compared textually against the dotted-decimal form of every
    IPv4 address on up, non-loopback interfaces. No validation is applied
    to the VIP itself.

    Args:
        vip: Target address, e.g. "10.0.0.5"
        interfaces: Interfaces to inspect (defaults to the host's)

    Returns:
        True on the first matching address, False otherwise

    Raises:
        VipCheckError: If interface enumeration fails
    """
    if interfaces is None:
        interfaces = list_interfaces()

    for iface in interfaces:
        if not iface.is_up or iface.is_loopback:
            continue
        for address in iface.addresses:
            ip = to_ipv4(address)
            if ip is not None and str(ip) == vip:
                return True
    return False
