import socket
from types import SimpleNamespace
from unittest import mock

from proctinet.interfaces import (
    NetworkInterface,
    first_interface_name,
    interface_patterns,
    is_matching_interface,
    list_interfaces,
    matching_interfaces,
)


def _ifaces(*names):
    return [NetworkInterface(name=n) for n in names]


def test_linux_patterns():
    patterns = interface_patterns("linux")
    assert patterns["wlan"] == ["wlan", "wifi", "wlp", "wl"]
    assert patterns["ethernet"] == ["eth", "enp", "eno", "ens"]


def test_windows_patterns():
    patterns = interface_patterns("Windows")
    assert patterns["ethernet"] == ["Ethernet", "Local Area Connection"]


def test_unknown_system_patterns():
    assert interface_patterns("freebsd") == {"wlan": ["wlan", "wifi"], "ethernet": ["eth", "en"]}


def test_is_matching_interface_is_case_insensitive():
    assert is_matching_interface("WI-FI 2", ["Wi-Fi", "Wireless"])
    assert not is_matching_interface("lo", ["eth", "enp"])


def test_linux_ethernet_selection_keeps_order():
    ifaces = _ifaces("lo", "wlp2s0", "enp3s0", "eth1")
    names = [i.name for i in matching_interfaces("ethernet", ifaces, "linux")]
    assert names == ["enp3s0", "eth1"]


def test_linux_wlan_selection():
    ifaces = _ifaces("lo", "wlp2s0", "enp3s0")
    assert [i.name for i in matching_interfaces("wlan", ifaces, "linux")] == ["wlp2s0"]


def test_darwin_ethernet_follows_en_pattern():
    ifaces = _ifaces("lo0", "en0", "en1", "bridge0")
    names = [i.name for i in matching_interfaces("ethernet", ifaces, "darwin")]
    assert names == ["en0", "en1"]


def test_darwin_wlan_includes_en0():
    ifaces = _ifaces("lo0", "en0", "awdl0")
    assert [i.name for i in matching_interfaces("wlan", ifaces, "darwin")] == ["en0"]


def test_unknown_kind_matches_nothing():
    assert matching_interfaces("bluetooth", _ifaces("eth0", "wlan0"), "linux") == []


def test_first_interface_name():
    assert first_interface_name("ethernet", _ifaces("lo", "ens5", "eth0"), "linux") == "ens5"


def test_first_interface_name_none_found():
    assert first_interface_name("ethernet", _ifaces("lo"), "linux") is None


def test_list_interfaces_from_psutil():
    link = SimpleNamespace(
        family=-1, address="02-00-00-00-00-01", netmask=None, broadcast=None, ptp=None
    )
    inet = SimpleNamespace(
        family=socket.AF_INET, address="192.168.1.5", netmask="255.255.255.0",
        broadcast=None, ptp=None,
    )
    stats = SimpleNamespace(isup=True, duplex=0, speed=0, mtu=1500, flags="up,broadcast")
    with mock.patch("proctinet.interfaces.psutil.AF_LINK", -1), mock.patch(
        "proctinet.interfaces.psutil.net_if_addrs", return_value={"testeth0": [link, inet]}
    ), mock.patch(
        "proctinet.interfaces.psutil.net_if_stats", return_value={"testeth0": stats}
    ):
        result = list_interfaces()
    assert len(result) == 1
    iface = result[0]
    assert iface.name == "testeth0"
    assert iface.mtu == 1500
    assert iface.hardware_addr == "02:00:00:00:00:01"
    assert iface.addresses == ("192.168.1.5/24",)
    assert iface.flags == "up|broadcast"