"""Discovery of wireless and wired network interfaces."""

from __future__ import annotations

import ipaddress
import logging
import platform
import socket
from collections.abc import Iterable
from dataclasses import dataclass, field

import psutil

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NetworkInterface:
    """A network interface and its addresses."""

    name: str
    index: int = 0
    mtu: int = 0
    hardware_addr: str = ""
    flags: str = ""
    addresses: tuple[str, ...] = field(default_factory=tuple)


def _current_system() -> str:
    return platform.system().lower()


def interface_patterns(system: str | None = None) -> dict[str, list[str]]:
    """Return name patterns for ``wlan`` and ``ethernet`` interfaces on *system*."""
    system = (system or _current_system()).lower()
    if system == "linux":
        return {
            "wlan": ["wlan", "wifi", "wlp", "wl"],
            "ethernet": ["eth", "enp", "eno", "ens"],
        }
    if system == "darwin":
        # macOS uses en* for both kinds.
        return {"wlan": ["en"], "ethernet": ["en"]}
    if system == "windows":
        return {
            "wlan": ["Wi-Fi", "Wireless"],
            "ethernet": ["Ethernet", "Local Area Connection"],
        }
    return {"wlan": ["wlan", "wifi"], "ethernet": ["eth", "en"]}


def is_matching_interface(name: str, patterns: Iterable[str]) -> bool:
    """Tell whether *name* contains any of *patterns*, ignoring case."""
    lowered = name.lower()
    return any(pattern.lower() in lowered for pattern in patterns)


def _prefix_length(netmask: str) -> int | None:
    try:
        return bin(int(ipaddress.ip_address(netmask))).count("1")
    except ValueError:
        return None


def _format_address(address: str, netmask: str | None) -> str:
    address = address.split("%", 1)[0]
    prefix = _prefix_length(netmask) if netmask else None
    if prefix is None:
        return address
    try:
        return ipaddress.ip_interface(f"{address}/{prefix}").with_prefixlen
    except ValueError:
        return address


def _interface_indexes() -> dict[str, int]:
    try:
        return {name: index for index, name in socket.if_nameindex()}
    except (AttributeError, OSError):
        return {}


def _format_flags(stats) -> str:
    if stats is None:
        return ""
    flags = getattr(stats, "flags", None)
    if flags:
        return "|".join(part for part in flags.split(",") if part)
    return "up" if stats.isup else ""


def list_interfaces() -> list[NetworkInterface]:
    """Return all network interfaces of this machine."""
    all_addrs = psutil.net_if_addrs()
    all_stats = psutil.net_if_stats()
    indexes = _interface_indexes()
    result = []
    for name, addrs in all_addrs.items():
        hardware_addr = ""
        addresses = []
        for addr in addrs:
            if addr.family == psutil.AF_LINK:
                hardware_addr = addr.address.replace("-", ":").lower()
            elif addr.family in (socket.AF_INET, socket.AF_INET6):
                addresses.append(_format_address(addr.address, addr.netmask))
        stats = all_stats.get(name)
        result.append(
            NetworkInterface(
                name=name,
                index=indexes.get(name, 0),
                mtu=stats.mtu if stats is not None else 0,
                hardware_addr=hardware_addr,
                flags=_format_flags(stats),
                addresses=tuple(addresses),
            )
        )
    return result


def matching_interfaces(
    kind: str,
    interfaces: Iterable[NetworkInterface] | None = None,
    system: str | None = None,
) -> list[NetworkInterface]:
    """Return the interfaces of *kind* (``wlan`` or ``ethernet``) in their order."""
    system = (system or _current_system()).lower()
    if interfaces is None:
        interfaces = list_interfaces()
    patterns = interface_patterns(system).get(kind, [])
    matched = []
    for iface in interfaces:
        if system == "darwin":
            if kind == "wlan" and iface.name == "en0":
                matched.append(iface)
                continue
            if kind == "ethernet" and iface.name.startswith("en") and iface.name != "en0":
                matched.append(iface)
                continue
        if is_matching_interface(iface.name, patterns):
            matched.append(iface)
    return matched


def first_interface_name(
    kind: str,
    interfaces: Iterable[NetworkInterface] | None = None,
    system: str | None = None,
) -> str | None:
    """Return the name of the first interface of *kind*, or None if there is none."""
    system = (system or _current_system()).lower()
    found = matching_interfaces(kind, interfaces, system)
    if not found:
        logger.warning("No %s interfaces found", kind)
        return None
    logger.info("Found %s interfaces for %s", kind, system)
    return found[0].name